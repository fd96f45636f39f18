"""Shared fixtures for the core client tests."""

import pytest

from core.config import Settings
from tests.helpers import C2M_BASE, EASYPOST_BASE, VALIDATION_URL, RecordingTransport


@pytest.fixture
def settings():
    return Settings(
        click2mail_auth="dXNlcjpzZWNyZXQ=",
        click2mail_base_url=C2M_BASE,
        easypost_api_key="EZTK_test",
        easypost_base_url=EASYPOST_BASE,
        google_maps_api_key="g-key",
        address_validation_url=VALIDATION_URL,
    )


@pytest.fixture
def bare_settings():
    """Endpoints only, no credentials."""
    return Settings(
        click2mail_base_url=C2M_BASE,
        easypost_base_url=EASYPOST_BASE,
        address_validation_url=VALIDATION_URL,
    )


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def pdf_path(tmp_path):
    path = tmp_path / "invoice.pdf"
    path.write_bytes(b"%PDF-1.4\n% test document\n")
    return path
