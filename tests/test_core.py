"""Tests for errors, sanitization, logging and settings."""

import json
import logging

import pytest

from cipherbench.core.config import Settings
from cipherbench.core.exceptions import CipherBenchError, CipherError, CipherErrorKind
from cipherbench.core.logging import JSONFormatter, configure_logging
from cipherbench.services.preprocessing.sanitizer import TextSanitizer


class TestCipherError:
    """Test suite for the cipher error type."""

    def test_default_message(self):
        error = CipherError(CipherErrorKind.WEAK_KEY)

        assert error.kind == CipherErrorKind.WEAK_KEY
        assert error.message == "Weak key"
        assert str(error) == "Weak key"
        assert error.details == {}

    def test_custom_message_and_details(self):
        error = CipherError(CipherErrorKind.TEXT_TOO_SHORT, "too short", {"length": 2})

        assert error.message == "too short"
        assert error.details == {"length": 2}

    def test_hierarchy(self):
        error = CipherError(CipherErrorKind.EMPTY_KEY)

        assert isinstance(error, CipherBenchError)
        assert isinstance(error, ValueError)

    def test_every_kind_has_a_message(self):
        for kind in CipherErrorKind:
            assert CipherError(kind).message


class TestTextSanitizer:
    """Test suite for the text sanitizer."""

    @pytest.fixture
    def sanitizer(self):
        return TextSanitizer()

    def test_latin_letters(self, sanitizer):
        result = sanitizer.latin_letters("Hello, World 42")

        assert result.text == "HELLOWORLD"
        assert result.original == "Hello, World 42"
        assert result.removed_chars == {",": 1, " ": 2, "4": 1, "2": 1}
        assert result.removed_count == 5

    def test_latin_letters_drops_other_scripts(self, sanitizer):
        assert sanitizer.latin_letters("abcПРИВЕТéß").text == "ABC"

    def test_filter_to_without_normalization(self, sanitizer):
        result = sanitizer.filter_to("a1b2c3", "abc")

        assert result.text == "abc"
        assert result.removed_count == 3


class TestLogging:
    """Test suite for logging setup."""

    def test_configure_logging_replaces_handlers(self):
        logger = configure_logging("DEBUG")
        configure_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.propagate is False

    def test_configure_logging_json(self):
        logger = configure_logging("INFO", json_logs=True)

        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_json_formatter(self):
        record = logging.LogRecord(
            name="cipherbench.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Rejected %s",
            args=("key",),
            exc_info=None,
        )
        record.error_kind = "weak_key"

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "cipherbench.test"
        assert entry["message"] == "Rejected key"
        assert entry["error_kind"] == "weak_key"
        assert "cipher_type" not in entry


class TestSettings:
    """Test suite for settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.api_v1_prefix == "/api/v1"
        assert settings.max_text_length == 100_000
        assert settings.is_development

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MAX_TEXT_LENGTH", "42")
        monkeypatch.setenv("APP_ENV", "production")

        settings = Settings()

        assert settings.max_text_length == 42
        assert settings.is_production
