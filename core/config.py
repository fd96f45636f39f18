# =============================================================================
# core/config.py  -  Settings (credentials + endpoints) for every client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Collects every credential and base URL the tools need into ONE frozen
#   Settings object.  The tools/ layer builds a fresh Settings per tool call
#   (Settings.from_env()) and hands it to the core function explicitly.
#   No core module reads os.environ on its own.
#
# ENVIRONMENT VARIABLES:
#   CLICK2MAIL_AUTH            base64("user:password"), sent as Basic auth
#   CLICK2MAIL_BASE_URL        defaults to the Click2Mail staging REST API
#   EASYPOST_API_KEY           bearer token for label creation
#   EASYPOST_CARRIER_ACCOUNT   optional carrier account id
#   EASYPOST_BASE_URL          defaults to https://api.easypost.com/v2
#   GOOGLE_MAPS_API_KEY        key for the Address Validation API
#   ADDRESS_VALIDATION_URL     defaults to the public Google endpoint
#   HTTP_TIMEOUT_SECONDS       per-request timeout (default 30)
#
#   A .env file is picked up by load_dotenv() in the entry points
#   (tools/mcp_server.py and main.py), not here.
# =============================================================================

from dataclasses import dataclass
import os
from typing import Mapping, Optional

from core.errors import ConfigurationError


CLICK2MAIL_STAGE_URL = "https://stage-rest.click2mail.com/molpro"
EASYPOST_URL = "https://api.easypost.com/v2"
GOOGLE_ADDRESS_VALIDATION_URL = "https://addressvalidation.googleapis.com/v1:validateAddress"
DEFAULT_TIMEOUT_SECONDS = 30.0


def _clean(value: Optional[str]) -> Optional[str]:
    """Blank or whitespace-only values count as unset."""
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Credentials and endpoints for the three external APIs."""

    click2mail_auth: Optional[str] = None
    click2mail_base_url: str = CLICK2MAIL_STAGE_URL

    easypost_api_key: Optional[str] = None
    easypost_carrier_account: Optional[str] = None
    easypost_base_url: str = EASYPOST_URL

    google_maps_api_key: Optional[str] = None
    address_validation_url: str = GOOGLE_ADDRESS_VALIDATION_URL

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from environment variables.

        Args:
            environ: Mapping to read from.  Defaults to os.environ; tests pass
                a plain dict.
        """
        env = os.environ if environ is None else environ

        timeout_raw = _clean(env.get("HTTP_TIMEOUT_SECONDS"))
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
        except ValueError:
            raise ConfigurationError(
                f"HTTP_TIMEOUT_SECONDS must be a number, got {timeout_raw!r}"
            ) from None

        return cls(
            click2mail_auth=_clean(env.get("CLICK2MAIL_AUTH")),
            click2mail_base_url=(
                _clean(env.get("CLICK2MAIL_BASE_URL")) or CLICK2MAIL_STAGE_URL
            ).rstrip("/"),
            easypost_api_key=_clean(env.get("EASYPOST_API_KEY")),
            easypost_carrier_account=_clean(env.get("EASYPOST_CARRIER_ACCOUNT")),
            easypost_base_url=(
                _clean(env.get("EASYPOST_BASE_URL")) or EASYPOST_URL
            ).rstrip("/"),
            google_maps_api_key=_clean(env.get("GOOGLE_MAPS_API_KEY")),
            address_validation_url=(
                _clean(env.get("ADDRESS_VALIDATION_URL")) or GOOGLE_ADDRESS_VALIDATION_URL
            ),
            timeout_seconds=timeout,
        )

    def click2mail_url(self, path: str) -> str:
        return f"{self.click2mail_base_url}/{path.lstrip('/')}"

    def easypost_url(self, path: str) -> str:
        return f"{self.easypost_base_url}/{path.lstrip('/')}"
