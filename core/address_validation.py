# =============================================================================
# core/address_validation.py  -  Google Address Validation API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends one address to Google's validateAddress endpoint (with USPS CASS
#   enabled) and turns the verdict into an AddressValidationResult:
#
#     is_valid           = not hasUnconfirmedComponents
#                          and not hasInferredComponents
#                          (a missing flag counts as false)
#     corrected_address  = result.address.postalAddress, {} if absent
#     original_address   = the inputs we were called with
#     messages           = readable notes built from the verdict flags and
#                          the address' missing/unresolved parts
#
# The key is sent as the "key" query parameter.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from core.config import Settings
from core.errors import ConfigurationError, MailToolError
from core.http import http_session, json_body, send
from core.models import AddressValidationResult, ToolResult

logger = logging.getLogger(__name__)


def build_request(address_lines: str, locality: str, postal_code: str, region_code: str) -> dict[str, Any]:
    return {
        "address": {
            "regionCode": region_code,
            "locality": locality,
            "postalCode": postal_code,
            "addressLines": [address_lines],
        },
        "enableUspsCass": True,
    }


def verdict_is_valid(verdict: dict[str, Any]) -> bool:
    return (
        verdict.get("hasUnconfirmedComponents") is not True
        and verdict.get("hasInferredComponents") is not True
    )


def verdict_messages(verdict: dict[str, Any], address: dict[str, Any]) -> list[str]:
    messages = []
    granularity = verdict.get("validationGranularity")
    if granularity:
        messages.append(f"Validation granularity: {granularity}")
    if verdict.get("hasUnconfirmedComponents") is True:
        messages.append("Address has unconfirmed components.")
    if verdict.get("hasInferredComponents") is True:
        messages.append("Address has inferred components.")
    if verdict.get("hasReplacedComponents") is True:
        messages.append("Address has replaced components.")
    for component in address.get("missingComponentTypes") or []:
        messages.append(f"Missing component: {component}")
    for token in address.get("unresolvedTokens") or []:
        messages.append(f"Unresolved token: {token}")
    return messages


def parse_response(data: dict[str, Any], original: dict[str, Any]) -> AddressValidationResult:
    """Map a validateAddress response body onto AddressValidationResult."""
    result = data.get("result") or {}
    verdict = result.get("verdict") or {}
    address = result.get("address") or {}

    return AddressValidationResult(
        is_valid=verdict_is_valid(verdict),
        corrected_address=dict(address.get("postalAddress") or {}),
        original_address=original,
        messages=verdict_messages(verdict, address),
    )


def validate_address(
    settings: Settings,
    address_lines: str,
    locality: str,
    postal_code: str,
    region_code: str = "US",
    client: Optional[httpx.Client] = None,
) -> ToolResult:
    """Validate one address.  Success carries an AddressValidationResult."""
    original = {
        "address_lines": address_lines,
        "locality": locality,
        "postal_code": postal_code,
        "region_code": region_code,
    }
    step = "address validation"
    try:
        if not settings.google_maps_api_key:
            raise ConfigurationError(
                "Configuration error: Google Maps API key is not set (GOOGLE_MAPS_API_KEY)."
            )
        with http_session(settings, client) as http:
            response = send(
                http, "POST", settings.address_validation_url, step,
                params={"key": settings.google_maps_api_key},
                json=build_request(address_lines, locality, postal_code, region_code),
            )
            data = json_body(response, step)
    except MailToolError as exc:
        return ToolResult.from_error(exc)

    validation = parse_response(data, original)
    logger.info("Validated address in %s: is_valid=%s", locality, validation.is_valid)
    return ToolResult.success(validation)
