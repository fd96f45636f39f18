# =============================================================================
# core/errors.py  -  Error taxonomy for every tool
# =============================================================================
#
# Four kinds of failure can happen inside a tool call:
#
#   CONFIGURATION  a credential or key is missing; raised before any request
#   TRANSPORT      non-2xx status or a network exception from httpx
#   MISSING_FIELD  the call succeeded but the field we need is not there
#   INVALID_INPUT  the caller gave us something we cannot send
#
# Core code raises these exceptions; the public core functions catch them
# and fold them into a ToolResult (core/models.py).  Nothing escapes past
# the tool boundary as an exception.
# =============================================================================

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    MISSING_FIELD = "missing_field"
    INVALID_INPUT = "invalid_input"
    UNSUPPORTED = "unsupported"


class MailToolError(Exception):
    """Base class for failures that end a tool call."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(self, message: str, step: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.step = step


class ConfigurationError(MailToolError):
    kind = ErrorKind.CONFIGURATION


class MissingFieldError(MailToolError):
    kind = ErrorKind.MISSING_FIELD


class InvalidInputError(MailToolError):
    kind = ErrorKind.INVALID_INPUT


class TransportError(MailToolError):
    """An HTTP call failed: either a bad status or no response at all."""

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        step: str,
        status_code: Optional[int] = None,
        body: str = "",
        reason: str = "",
    ):
        if status_code is not None:
            message = f"Error during {step}: HTTP {status_code}"
            if body:
                message += f" - {body}"
        else:
            message = f"Error during {step}: {reason or 'request failed'}"
        super().__init__(message, step=step)
        self.status_code = status_code
        self.body = body
