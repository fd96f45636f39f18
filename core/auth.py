# =============================================================================
# core/auth.py  -  Authorization header builders
# =============================================================================
#
# Two independent builders, one per vendor:
#   - Click2Mail takes HTTP Basic with a credential that is ALREADY
#     base64-encoded ("user:password" → base64).  We only wrap it.
#   - EasyPost takes a bearer token from Settings.
#
# Both are pure functions: no caching, no refresh.  An absent credential
# raises ConfigurationError so the caller stops before any request is sent.
# =============================================================================

from typing import Optional

from core.config import Settings
from core.errors import ConfigurationError


def basic_auth_header(credential: Optional[str]) -> dict[str, str]:
    """Wrap a pre-encoded Click2Mail credential in a Basic auth header.

    Raises:
        ConfigurationError: If the credential is empty or missing.
    """
    if not credential:
        raise ConfigurationError(
            "Configuration error: Click2Mail credentials are not set (CLICK2MAIL_AUTH)."
        )
    return {"Authorization": f"Basic {credential}"}


def bearer_auth_header(settings: Settings) -> dict[str, str]:
    """Bearer header for the EasyPost label API.

    Raises:
        ConfigurationError: If EASYPOST_API_KEY is not configured.
    """
    if not settings.easypost_api_key:
        raise ConfigurationError(
            "Configuration error: EasyPost API key is not set (EASYPOST_API_KEY)."
        )
    return {"Authorization": f"Bearer {settings.easypost_api_key}"}
