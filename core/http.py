# =============================================================================
# core/http.py  -  Shared httpx plumbing for the vendor clients
# =============================================================================
#
# Every core function takes an optional httpx.Client.  Production code leaves
# it out and gets a short-lived client per call; tests pass a client built on
# httpx.MockTransport so no real network is touched.
#
# send() is the single place where an httpx exception or a non-2xx status is
# turned into a TransportError tagged with the step name.
# =============================================================================

from contextlib import contextmanager
import logging
from typing import Any, Iterator, Optional

import httpx

from core.config import Settings
from core.errors import MissingFieldError, TransportError

logger = logging.getLogger(__name__)

# Response bodies can be whole HTML error pages; keep error text readable.
_MAX_BODY_CHARS = 500


@contextmanager
def http_session(settings: Settings, client: Optional[httpx.Client] = None) -> Iterator[httpx.Client]:
    """Yield the caller's client, or open one for the duration of the block."""
    if client is not None:
        yield client
        return
    with httpx.Client(timeout=settings.timeout_seconds) as owned:
        yield owned


def send(client: httpx.Client, method: str, url: str, step: str, **kwargs: Any) -> httpx.Response:
    """Issue one request and raise TransportError unless it succeeded."""
    logger.debug("%s %s (%s)", method, url, step)
    try:
        response = client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        logger.warning("%s failed: %s", step, exc)
        raise TransportError(step, reason=str(exc) or exc.__class__.__name__) from exc

    if not response.is_success:
        body = response.text[:_MAX_BODY_CHARS].strip()
        logger.warning("%s returned HTTP %s", step, response.status_code)
        raise TransportError(step, status_code=response.status_code, body=body)
    return response


def json_body(response: httpx.Response, step: str) -> dict:
    """Decode a JSON object body; anything else counts as a transport failure."""
    try:
        data = response.json()
    except ValueError:
        raise TransportError(
            step,
            status_code=response.status_code,
            body=f"response was not JSON: {response.text[:_MAX_BODY_CHARS].strip()}",
        ) from None
    if not isinstance(data, dict):
        raise TransportError(step, status_code=response.status_code, body="unexpected JSON payload")
    return data


def require_field(data: dict, key: str, message: str, step: Optional[str] = None) -> Any:
    """Return data[key], raising MissingFieldError when it is absent or null.

    Falsy values such as 0 are returned as-is.
    """
    value = data.get(key)
    if value is None or value == "":
        raise MissingFieldError(message, step=step)
    return value
