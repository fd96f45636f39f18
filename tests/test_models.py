"""Tests for ToolResult rendering and the small record types."""

import json

from core.errors import ErrorKind, MissingFieldError, TransportError
from core.models import Address, AddressValidationResult, ToolResult


def test_success_text_passthrough():
    assert ToolResult.success("done").to_text() == "done"
    assert ToolResult.success(0).to_text() == "0"


def test_validation_result_renders_as_json():
    value = AddressValidationResult(is_valid=True, original_address={"locality": "Austin"})
    rendered = json.loads(ToolResult.success(value).to_text())

    assert rendered == {
        "is_valid": True,
        "corrected_address": {},
        "original_address": {"locality": "Austin"},
        "messages": [],
    }


def test_from_error_keeps_kind_and_step():
    result = ToolResult.from_error(MissingFieldError("Balance not found.", step="balance check"))

    assert not result.ok
    assert result.kind is ErrorKind.MISSING_FIELD
    assert result.step == "balance check"
    assert result.to_text() == "Balance not found."


def test_transport_error_messages():
    assert TransportError("job creation", status_code=502).message == "Error during job creation: HTTP 502"
    assert TransportError("job creation", reason="timed out").message == "Error during job creation: timed out"


def test_address_easypost_shape():
    address = Address(name="A", street="1 Main", city="Austin", state="TX", zip_code="78701")

    assert address.country == "US"
    assert address.to_easypost() == {
        "name": "A", "street1": "1 Main", "city": "Austin",
        "state": "TX", "zip": "78701", "country": "US",
    }
