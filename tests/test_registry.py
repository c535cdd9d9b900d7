"""
Tests for the engine registry.
"""
import pytest

from cipherbench.core.exceptions import CipherError, CipherErrorKind, EngineNotFoundError
from cipherbench.models.schemas import CipherFamily, CipherType, KeyKind
from cipherbench.services.engines.registry import EngineRegistry
from cipherbench.services.engines.substitution import ModAlphaEngine
from cipherbench.services.engines.transposition import TableRouteEngine


class TestCipherRegistry:
    """Test the cipher registry."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_all_ciphers_registered(self):
        """Verify all expected ciphers are registered."""
        registered = EngineRegistry.list_registered()

        for cipher_type in (CipherType.MOD_ALPHA, CipherType.TABLE_ROUTE):
            assert cipher_type in registered, f"{cipher_type} not registered"
            assert EngineRegistry.is_registered(cipher_type)

    def test_get_engines_by_family(self, registry):
        assert registry.get_engines_by_family(CipherFamily.POLYALPHABETIC) == [ModAlphaEngine]
        assert registry.get_engines_by_family(CipherFamily.TRANSPOSITION) == [TableRouteEngine]

    def test_unknown_cipher_type(self, registry):
        with pytest.raises(EngineNotFoundError) as exc_info:
            registry.get_engine_class("enigma")
        assert exc_info.value.details == {"engine_name": "enigma"}

    def test_create_mod_alpha(self, registry):
        engine = registry.create(CipherType.MOD_ALPHA, "ключ")

        assert isinstance(engine, ModAlphaEngine)
        assert engine.key == "КЛЮЧ"

    def test_create_table_route_from_string_key(self, registry):
        engine = registry.create(CipherType.TABLE_ROUTE, " 3 ")

        assert isinstance(engine, TableRouteEngine)
        assert engine.key == 3

    def test_create_table_route_rejects_word_key(self, registry):
        with pytest.raises(CipherError) as exc_info:
            registry.create(CipherType.TABLE_ROUTE, "three")
        assert exc_info.value.kind == CipherErrorKind.INVALID_COLUMN_COUNT

    def test_create_mod_alpha_rejects_numeric_key(self, registry):
        with pytest.raises(CipherError) as exc_info:
            registry.create(CipherType.MOD_ALPHA, 12)
        assert exc_info.value.kind == CipherErrorKind.INVALID_KEY_CHARACTER

    def test_engines_are_not_shared(self, registry):
        first = registry.create(CipherType.TABLE_ROUTE, 3)
        second = registry.create(CipherType.TABLE_ROUTE, 4)

        assert first is not second
        assert first.key == 3

    def test_describe_all(self, registry):
        info = {item.cipher_type: item for item in registry.describe_all()}

        assert info[CipherType.MOD_ALPHA].key_kind == KeyKind.WORD
        assert info[CipherType.TABLE_ROUTE].key_kind == KeyKind.COLUMNS
        assert info[CipherType.TABLE_ROUTE].cipher_family == CipherFamily.TRANSPOSITION
