from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    MOD_ALPHA = "mod_alpha"
    TABLE_ROUTE = "table_route"


class KeyKind(str, Enum):
    """Shape of the key an engine is built from."""

    WORD = "word"
    COLUMNS = "columns"


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    text: str
    cipher_type: CipherType
    key: StrictStr | StrictInt


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    text: str
    cipher_type: CipherType
    key: StrictStr | StrictInt


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: str | int
    explanation: str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: str | int
    explanation: str


class CipherInfo(BaseModel):
    """Description of a registered cipher engine."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str
    key_kind: KeyKind


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
