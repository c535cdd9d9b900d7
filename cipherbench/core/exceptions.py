from enum import Enum
from typing import Any


class CipherBenchError(Exception):
    """Base exception for all cipherbench errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CipherErrorKind(str, Enum):
    """Reason tags carried by CipherError."""

    # Substitution engine
    EMPTY_KEY = "empty_key"
    INVALID_KEY_CHARACTER = "invalid_key_character"
    WEAK_KEY = "weak_key"
    EMPTY_CIPHERTEXT = "empty_ciphertext"
    INVALID_CIPHERTEXT = "invalid_ciphertext"

    # Shared
    EMPTY_PLAINTEXT = "empty_plaintext"

    # Route engine
    INVALID_COLUMN_COUNT = "invalid_column_count"
    NO_LETTERS_IN_PLAINTEXT = "no_letters_in_plaintext"
    TEXT_TOO_SHORT = "text_too_short"


_DEFAULT_MESSAGES: dict[CipherErrorKind, str] = {
    CipherErrorKind.EMPTY_KEY: "Empty key",
    CipherErrorKind.INVALID_KEY_CHARACTER: "Invalid key",
    CipherErrorKind.WEAK_KEY: "Weak key",
    CipherErrorKind.EMPTY_CIPHERTEXT: "Empty cipher text",
    CipherErrorKind.INVALID_CIPHERTEXT: "Invalid cipher text",
    CipherErrorKind.EMPTY_PLAINTEXT: "Empty open text",
    CipherErrorKind.INVALID_COLUMN_COUNT: "Column count must be a positive integer",
    CipherErrorKind.NO_LETTERS_IN_PLAINTEXT: "Text contains no letters",
    CipherErrorKind.TEXT_TOO_SHORT: "Text length must be greater than the column count",
}


class CipherError(CipherBenchError, ValueError):
    """
    Raised when a cipher engine rejects its key or input text.

    There is one concrete type for every validation failure; callers
    tell cases apart through ``kind``.
    """

    def __init__(
        self,
        kind: CipherErrorKind,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.kind = kind
        super().__init__(message or _DEFAULT_MESSAGES[kind], details)

    def __repr__(self) -> str:
        return f"CipherError(kind={self.kind.value!r}, message={self.message!r})"


class EngineError(CipherBenchError):
    """Base exception for cipher engine lookup errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
