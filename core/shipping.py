# =============================================================================
# core/shipping.py  -  EasyPost shipping labels
# =============================================================================
#
# One POST to /shipments.  The service level is always "Priority"; when an
# EasyPost carrier account is configured it is attached as a one-element
# carrier_accounts list.  We hand back postage_label.label_url untouched.
#
# A response without a label URL is NOT a transport error: the shipment was
# created, it just has no label yet.  That case gets its own message.
# =============================================================================

import logging
import math
from typing import Any, Optional

import httpx

from core.auth import bearer_auth_header
from core.config import Settings
from core.errors import InvalidInputError, MailToolError, MissingFieldError
from core.http import http_session, json_body, send
from core.models import Address, ToolResult

logger = logging.getLogger(__name__)

SERVICE_LEVEL = "Priority"
LABEL_NOT_FOUND = "Label URL not found in response."


def parse_weight(parcel_weight: str) -> float:
    """Parcel weight arrives as text (ounces, per EasyPost); parse it to float."""
    try:
        weight = float(str(parcel_weight).strip())
    except ValueError:
        raise InvalidInputError(f"Invalid parcel weight: {parcel_weight!r}") from None
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidInputError(f"Parcel weight must be a positive number, got {parcel_weight!r}")
    return weight


def build_shipment(
    settings: Settings,
    to_address: Address,
    from_address: Address,
    weight: float,
) -> dict[str, Any]:
    shipment: dict[str, Any] = {
        "to_address": to_address.to_easypost(),
        "from_address": from_address.to_easypost(),
        "parcel": {"weight": weight},
        "service": SERVICE_LEVEL,
    }
    if settings.easypost_carrier_account:
        shipment["carrier_accounts"] = [settings.easypost_carrier_account]
    return {"shipment": shipment}


def create_shipping_label(
    settings: Settings,
    to_address: Address,
    from_address: Address,
    parcel_weight: str,
    client: Optional[httpx.Client] = None,
) -> ToolResult:
    """Create a shipment and return its label URL."""
    step = "label creation"
    try:
        headers = bearer_auth_header(settings)
        payload = build_shipment(settings, to_address, from_address, parse_weight(parcel_weight))

        with http_session(settings, client) as http:
            response = send(
                http, "POST", settings.easypost_url("shipments"), step,
                headers=headers, json=payload,
            )
            data = json_body(response, step)

        label = data.get("postage_label") or {}
        label_url = label.get("label_url") if isinstance(label, dict) else None
        if not label_url:
            raise MissingFieldError(LABEL_NOT_FOUND, step=step)
    except MailToolError as exc:
        return ToolResult.from_error(exc)

    logger.info("Created shipment %s", data.get("id", "<no id>"))
    return ToolResult.success(label_url)
