from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    SUBSTITUTION = "substitution"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """
    Specific cipher types.

    Lookup is case-insensitive and also accepts the legacy names used by
    older clients (``caesar``, ``polybius``, ``railfence``, ``transposition``).
    """

    SHIFT = "shift"
    GRID_SUBSTITUTION = "grid-substitution"
    ZIGZAG_TRANSPOSITION = "zigzag-transposition"
    KEYED_COLUMNAR = "keyed-columnar"

    @classmethod
    def _missing_(cls, value: object) -> "CipherType | None":
        if not isinstance(value, str):
            return None
        name = value.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == name:
                return member
        return CIPHER_ALIASES.get(name)


CIPHER_ALIASES: dict[str, CipherType] = {
    "caesar": CipherType.SHIFT,
    "polybius": CipherType.GRID_SUBSTITUTION,
    "railfence": CipherType.ZIGZAG_TRANSPOSITION,
    "rail-fence": CipherType.ZIGZAG_TRANSPOSITION,
    "zigzag": CipherType.ZIGZAG_TRANSPOSITION,
    "transposition": CipherType.KEYED_COLUMNAR,
    "columnar": CipherType.KEYED_COLUMNAR,
}


class Operation(str, Enum):
    """Direction of a cipher transformation."""

    ENCODE = "encode"
    DECODE = "decode"


# Keys arrive as integers (shift, rails) or keywords (keyed columnar)
CipherKey = int | str

# JSON scalars are passed to the engine untouched so it can reject
# booleans and floats itself instead of pydantic coercing them
RequestKey = StrictInt | StrictStr | StrictBool | StrictFloat


# ============================================================================
# Request Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    cipher_type: str = Field(min_length=1)
    text: str = Field(min_length=1)
    key: RequestKey | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    cipher_type: CipherType
    operation: Operation
    text: str
    result: str
    key_used: CipherKey | None
    explanation: str


class CipherInfo(BaseModel):
    """Description of a single supported cipher."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str
    requires_key: bool


class CiphersResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]
    total: int


class HealthResponse(BaseModel):
    """Response schema for /health endpoint."""

    status: str
    service: str
    version: str
    supported_ciphers: list[CipherType]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
