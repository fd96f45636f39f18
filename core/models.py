# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# Everything here is a transient request/response record.  Nothing is
# persisted; vendor-side objects (documents, address lists, jobs) only ever
# appear as opaque ids passed from one request to the next.
# =============================================================================

from dataclasses import asdict, dataclass, field
from enum import Enum
import json
from typing import Any, Optional

from core.errors import ErrorKind, MailToolError


class LetterType(str, Enum):
    """Letter products accepted as Click2Mail documentClass values."""

    LETTER_8_5_X_11 = "Letter 8.5 x 11"
    LETTER_8_5_X_14 = "Letter 8.5 x 14"


class PostcardType(str, Enum):
    POSTCARD_4_25_X_6 = "Postcard 4.25 x 6"
    POSTCARD_4_X_9 = "Postcard 4 x 9"
    POSTCARD_5_X_8 = "Postcard 5 x 8"


# -----------------------------------------------------------------------------
# Address - a postal address with no identity beyond its fields
# -----------------------------------------------------------------------------
@dataclass
class Address:
    name: str
    street: str
    city: str
    state: str
    zip_code: str
    country: str = "US"

    def to_easypost(self) -> dict[str, str]:
        """Shape used by EasyPost's to_address / from_address objects."""
        return {
            "name": self.name,
            "street1": self.street,
            "city": self.city,
            "state": self.state,
            "zip": self.zip_code,
            "country": self.country,
        }


@dataclass
class SendLetterInput:
    to: Address
    from_: Address
    letter_type: LetterType


@dataclass
class SendPostcardInput:
    to: Address
    from_: Address
    postcard_type: PostcardType


# -----------------------------------------------------------------------------
# AddressValidationResult - one per validate_address call, never mutated
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AddressValidationResult:
    is_valid: bool
    corrected_address: dict[str, Any] = field(default_factory=dict)
    original_address: dict[str, Any] = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# -----------------------------------------------------------------------------
# ToolResult - tagged outcome of every core operation
# -----------------------------------------------------------------------------
# Core code keeps success and each failure kind apart so tests (and
# any other Python caller) can branch on `kind`.  The MCP layer flattens
# this back to a single text message with to_text().
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResult:
    ok: bool
    value: Any = None
    kind: Optional[ErrorKind] = None
    message: str = ""
    step: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "ToolResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, step: Optional[str] = None) -> "ToolResult":
        return cls(ok=False, kind=kind, message=message, step=step)

    @classmethod
    def from_error(cls, error: MailToolError) -> "ToolResult":
        return cls.failure(error.kind, error.message, step=error.step)

    def to_text(self) -> str:
        """Render the result for a text-only tool response."""
        if not self.ok:
            return self.message
        if isinstance(self.value, str):
            return self.value
        if isinstance(self.value, AddressValidationResult):
            return json.dumps(self.value.to_dict())
        if isinstance(self.value, (dict, list)):
            return json.dumps(self.value)
        return str(self.value)
