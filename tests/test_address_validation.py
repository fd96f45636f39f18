"""Tests for the Google address-validation client."""

import json

import httpx
import pytest

from core.address_validation import parse_response, validate_address, verdict_is_valid
from core.errors import ErrorKind
from core.models import AddressValidationResult
from tests.helpers import RecordingTransport, connect_error

VALIDATE = ("POST", "/v1:validateAddress")


def _google_response(verdict, address=None):
    return httpx.Response(200, json={"result": {"verdict": verdict, "address": address or {}}})


class TestVerdict:

    def test_both_flags_false_is_valid(self):
        assert verdict_is_valid({"hasUnconfirmedComponents": False, "hasInferredComponents": False})

    def test_absent_flags_are_valid(self):
        assert verdict_is_valid({})

    @pytest.mark.parametrize("verdict", [
        {"hasUnconfirmedComponents": True},
        {"hasInferredComponents": True},
        {"hasUnconfirmedComponents": True, "hasInferredComponents": True},
        {"hasUnconfirmedComponents": False, "hasInferredComponents": True},
    ])
    def test_any_true_flag_is_invalid(self, verdict):
        assert not verdict_is_valid(verdict)


class TestParseResponse:

    def test_corrected_address_and_messages(self):
        data = {
            "result": {
                "verdict": {
                    "validationGranularity": "PREMISE",
                    "hasInferredComponents": True,
                },
                "address": {
                    "postalAddress": {"regionCode": "US", "postalCode": "94043-1351"},
                    "missingComponentTypes": ["subpremise"],
                },
            }
        }
        result = parse_response(data, {"locality": "Mountain View"})

        assert result.is_valid is False
        assert result.corrected_address == {"regionCode": "US", "postalCode": "94043-1351"}
        assert result.original_address == {"locality": "Mountain View"}
        assert result.messages == [
            "Validation granularity: PREMISE",
            "Address has inferred components.",
            "Missing component: subpremise",
        ]

    def test_empty_result(self):
        result = parse_response({}, {})

        assert result.is_valid is True
        assert result.corrected_address == {}
        assert result.messages == []


class TestValidateAddress:

    def test_sends_one_request_with_cass_enabled(self, settings):
        transport = RecordingTransport({
            VALIDATE: _google_response(
                {"hasUnconfirmedComponents": False, "hasInferredComponents": False},
                {"postalAddress": {"addressLines": ["1600 Amphitheatre Pkwy"]}},
            ),
        })
        result = validate_address(
            settings, "1600 Amphitheatre Pkwy", "Mountain View", "94043",
            client=transport.client(),
        )

        assert len(transport.requests) == 1
        request = transport.requests[0]
        assert request.url.params["key"] == "g-key"
        body = json.loads(request.content)
        assert body["enableUspsCass"] is True
        assert body["address"] == {
            "regionCode": "US",
            "locality": "Mountain View",
            "postalCode": "94043",
            "addressLines": ["1600 Amphitheatre Pkwy"],
        }

        assert result.ok
        assert isinstance(result.value, AddressValidationResult)
        assert result.value.is_valid is True
        assert result.value.corrected_address == {"addressLines": ["1600 Amphitheatre Pkwy"]}
        assert result.value.original_address == {
            "address_lines": "1600 Amphitheatre Pkwy",
            "locality": "Mountain View",
            "postal_code": "94043",
            "region_code": "US",
        }

    def test_unconfirmed_components_are_invalid(self, settings):
        transport = RecordingTransport({VALIDATE: _google_response({"hasUnconfirmedComponents": True})})
        result = validate_address(settings, "1 Nowhere", "Nowhere", "00000", client=transport.client())

        assert result.ok
        assert result.value.is_valid is False
        assert "Address has unconfirmed components." in result.value.messages

    def test_missing_key_makes_no_request(self, bare_settings, transport):
        result = validate_address(bare_settings, "1 Main St", "Austin", "78701", client=transport.client())

        assert not result.ok
        assert result.kind is ErrorKind.CONFIGURATION
        assert "GOOGLE_MAPS_API_KEY" in result.to_text()
        assert transport.requests == []

    def test_http_error_is_text(self, settings):
        transport = RecordingTransport({VALIDATE: httpx.Response(403, text="API key not valid")})
        result = validate_address(settings, "1 Main St", "Austin", "78701", client=transport.client())

        assert result.kind is ErrorKind.TRANSPORT
        assert result.to_text() == "Error during address validation: HTTP 403 - API key not valid"

    def test_network_error_is_text(self, settings):
        transport = RecordingTransport({VALIDATE: connect_error})
        result = validate_address(settings, "1 Main St", "Austin", "78701", client=transport.client())

        assert result.kind is ErrorKind.TRANSPORT
        assert "connection refused" in result.to_text()
