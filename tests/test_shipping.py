"""Tests for the EasyPost shipping-label client."""

import dataclasses
import json

import httpx
import pytest

from core.errors import ErrorKind, InvalidInputError
from core.models import Address
from core.shipping import LABEL_NOT_FOUND, create_shipping_label, parse_weight
from tests.helpers import RecordingTransport

SHIPMENTS = ("POST", "/v2/shipments")

TO = Address(name="Ada Lovelace", street="12 St James Sq", city="Austin", state="TX", zip_code="78701")
FROM = Address(name="Mail Desk", street="1 Main St", city="Denver", state="CO", zip_code="80202")


def test_parse_weight():
    assert parse_weight("16") == 16.0
    assert parse_weight(" 2.5 ") == 2.5


@pytest.mark.parametrize("weight", ["heavy", "", "0", "-3", "nan", "inf", "-inf"])
def test_parse_weight_rejects_bad_input(weight):
    with pytest.raises(InvalidInputError):
        parse_weight(weight)


def test_returns_label_url_exactly(settings):
    transport = RecordingTransport({
        SHIPMENTS: httpx.Response(200, json={"id": "shp_1", "postage_label": {"label_url": "https://x/y.pdf"}}),
    })
    result = create_shipping_label(settings, TO, FROM, "10", client=transport.client())

    assert result.ok
    assert result.to_text() == "https://x/y.pdf"

    request = transport.requests[0]
    assert request.headers["Authorization"] == "Bearer EZTK_test"
    body = json.loads(request.content)["shipment"]
    assert body["service"] == "Priority"
    assert body["parcel"] == {"weight": 10.0}
    assert body["to_address"]["street1"] == "12 St James Sq"
    assert body["from_address"]["zip"] == "80202"
    assert "carrier_accounts" not in body


def test_attaches_configured_carrier_account(settings):
    settings = dataclasses.replace(settings, easypost_carrier_account="ca_42")
    transport = RecordingTransport({
        SHIPMENTS: httpx.Response(201, json={"postage_label": {"label_url": "https://x/z.pdf"}}),
    })
    create_shipping_label(settings, TO, FROM, "4", client=transport.client())

    body = json.loads(transport.requests[0].content)["shipment"]
    assert body["carrier_accounts"] == ["ca_42"]


def test_missing_label_is_not_a_transport_error(settings):
    transport = RecordingTransport({SHIPMENTS: httpx.Response(200, json={"id": "shp_2"})})
    result = create_shipping_label(settings, TO, FROM, "4", client=transport.client())

    assert result.kind is ErrorKind.MISSING_FIELD
    assert result.to_text() == LABEL_NOT_FOUND


def test_http_failure(settings):
    transport = RecordingTransport({SHIPMENTS: httpx.Response(422, text='{"error": "bad address"}')})
    result = create_shipping_label(settings, TO, FROM, "4", client=transport.client())

    assert result.kind is ErrorKind.TRANSPORT
    assert result.to_text().startswith("Error during label creation: HTTP 422")


def test_missing_key_makes_no_request(bare_settings, transport):
    result = create_shipping_label(bare_settings, TO, FROM, "4", client=transport.client())

    assert result.kind is ErrorKind.CONFIGURATION
    assert transport.requests == []


def test_bad_weight_makes_no_request(settings, transport):
    result = create_shipping_label(settings, TO, FROM, "a lot", client=transport.client())

    assert result.kind is ErrorKind.INVALID_INPUT
    assert transport.requests == []


@pytest.mark.parametrize("weight", ["nan", "inf"])
def test_non_finite_weight_makes_no_request(settings, transport, weight):
    result = create_shipping_label(settings, TO, FROM, weight, client=transport.client())

    assert result.kind is ErrorKind.INVALID_INPUT
    assert transport.requests == []
