from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """Specific cipher types."""

    VIGENERE = "vigenere"
    CAESAR = "caesar"
    ATBASH = "atbash"
    ROT13 = "rot13"
    PLAYFAIR = "playfair"


class ParameterKind(str, Enum):
    """Auxiliary parameter a cipher needs besides the message."""

    KEYWORD = "keyword"
    SHIFT = "shift"
    NONE = "none"


class RejectionReason(str, Enum):
    """Why an encryption request was rejected before transformation."""

    EMPTY_OR_NON_ALPHABETIC_KEYWORD = "empty_or_non_alphabetic_keyword"
    ZERO_SHIFT = "zero_shift"


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    message: str
    cipher_type: CipherType
    keyword: str | None = None
    shift: int | None = Field(default=None, ge=0, le=25)


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: str | None
    notification: str
    explanation: str


class CipherInfo(BaseModel):
    """Description of one available cipher."""

    cipher_type: CipherType
    name: str
    family: CipherFamily
    parameter: ParameterKind
    description: str


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]


class KeySquareResponse(BaseModel):
    """Response schema for the Playfair key square endpoint."""

    keyword: str
    rows: list[str]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
