# =============================================================================
# core/click2mail.py  -  Click2Mail MOL Pro REST client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the handful of Click2Mail endpoints the tools need:
#
#     POST /documents            multipart upload          → id
#     POST /addressLists         XML address list          → id
#     POST /jobs                 form-encoded job          → id
#     POST /jobs/{id}/submit     form-encoded submission
#     GET  /jobs/{id}            job status                → description
#     POST /jobs/{id}/proof      proof request             → statusUrl
#     GET  /credit               account balance           → balance
#
#   The four "step" functions raise MailToolError subclasses; the letter
#   pipeline (core/letters.py) chains them.  job_status, view_proof and
#   check_balance are complete operations and return a ToolResult.
#
# RESPONSE FORMAT:
#   Click2Mail answers in XML unless asked otherwise, so every request sends
#   "Accept: application/json".
# =============================================================================

import logging
from pathlib import Path
from typing import Optional
from xml.etree import ElementTree

import httpx

from core.auth import basic_auth_header
from core.config import Settings
from core.errors import InvalidInputError, MailToolError
from core.http import http_session, json_body, require_field, send
from core.models import ToolResult

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Fixed production parameters for every letter job
# -----------------------------------------------------------------------------
JOB_LAYOUT = "Address on Separate Page"
JOB_PRODUCTION_TIME = "Next Day"
JOB_ENVELOPE = "#10 Double Window"
JOB_COLOR = "Black and White"
JOB_PAPER_TYPE = "White 24#"
JOB_PRINT_OPTION = "Printing One side"
JOB_MAIL_CLASS = "First Class"
BILLING_TYPE = "User Credit"

# Mapping 1 is Click2Mail's standard single-line address layout.
ADDRESS_MAPPING_ID = "1"

STATUS_NOT_FOUND = "Job status description not found."
PROOF_NOT_FOUND = "Proof status URL not found."
BALANCE_NOT_FOUND = "Balance not found."


def _headers(settings: Settings) -> dict[str, str]:
    headers = basic_auth_header(settings.click2mail_auth)
    headers["Accept"] = "application/json"
    return headers


# =============================================================================
# Pipeline steps
# =============================================================================
def upload_document(
    client: httpx.Client,
    settings: Settings,
    content: bytes,
    document_name: str,
    document_class: str,
    document_format: str = "PDF",
) -> str:
    """Upload a document and return its Click2Mail id."""
    step = "document upload"
    response = send(
        client,
        "POST",
        settings.click2mail_url("documents"),
        step,
        headers=_headers(settings),
        data={
            "documentFormat": document_format,
            "documentClass": document_class,
            "documentName": document_name,
        },
        files={"file": (document_name, content, "application/pdf")},
    )
    data = json_body(response, step)
    document_id = require_field(data, "id", "Document upload response did not include an id.", step)
    return str(document_id)


def split_name(name: str) -> tuple[str, str]:
    """'Ada King Lovelace' → ('Ada King', 'Lovelace'); a single word is a last name."""
    parts = name.strip().split()
    if not parts:
        return "", ""
    if len(parts) == 1:
        return "", parts[0]
    return " ".join(parts[:-1]), parts[-1]


def split_locality(locality: str) -> tuple[str, str]:
    """'Austin, TX' → ('Austin', 'TX').  Without a comma the state is empty."""
    city, sep, state = locality.partition(",")
    if not sep:
        return locality.strip(), ""
    return city.strip(), state.strip()


def build_address_list_xml(
    list_name: str,
    name: str,
    address_lines: str,
    locality: str,
    postal_code: str,
    region_code: str = "US",
) -> bytes:
    """Build the single-recipient <addressList> document."""
    first, last = split_name(name)
    city, state = split_locality(locality)

    root = ElementTree.Element("addressList")
    ElementTree.SubElement(root, "addressListName").text = list_name
    ElementTree.SubElement(root, "addressMappingId").text = ADDRESS_MAPPING_ID
    addresses = ElementTree.SubElement(root, "addresses")
    address = ElementTree.SubElement(addresses, "address")

    fields = [
        ("Firstname", first),
        ("Lastname", last),
        ("Organization", ""),
        ("Address1", address_lines),
        ("Address2", ""),
        ("Address3", ""),
        ("City", city),
        ("State", state),
        ("Postalcode", postal_code),
        ("Country", region_code),
    ]
    for tag, value in fields:
        ElementTree.SubElement(address, tag).text = value

    return ElementTree.tostring(root, encoding="utf-8", xml_declaration=True)


def create_address_list(
    client: httpx.Client,
    settings: Settings,
    name: str,
    address_lines: str,
    locality: str,
    postal_code: str,
    region_code: str = "US",
) -> str:
    """Create a one-address list and return its id."""
    step = "address list creation"
    body = build_address_list_xml(
        list_name=f"{name} {postal_code}".strip(),
        name=name,
        address_lines=address_lines,
        locality=locality,
        postal_code=postal_code,
        region_code=region_code,
    )
    headers = _headers(settings)
    headers["Content-Type"] = "application/xml"
    response = send(
        client,
        "POST",
        settings.click2mail_url("addressLists"),
        step,
        headers=headers,
        content=body,
    )
    data = json_body(response, step)
    address_list_id = require_field(data, "id", "Address list response did not include an id.", step)
    return str(address_list_id)


def job_form(document_class: str, document_id: str, address_list_id: str) -> dict[str, str]:
    return {
        "documentClass": document_class,
        "layout": JOB_LAYOUT,
        "productionTime": JOB_PRODUCTION_TIME,
        "envelope": JOB_ENVELOPE,
        "color": JOB_COLOR,
        "paperType": JOB_PAPER_TYPE,
        "printOption": JOB_PRINT_OPTION,
        "documentId": document_id,
        "addressId": address_list_id,
        "mailClass": JOB_MAIL_CLASS,
    }


def create_job(
    client: httpx.Client,
    settings: Settings,
    document_class: str,
    document_id: str,
    address_list_id: str,
) -> str:
    step = "job creation"
    response = send(
        client,
        "POST",
        settings.click2mail_url("jobs"),
        step,
        headers=_headers(settings),
        data=job_form(document_class, document_id, address_list_id),
    )
    data = json_body(response, step)
    job_id = require_field(data, "id", "Job creation response did not include an id.", step)
    return str(job_id)


def submit_job(client: httpx.Client, settings: Settings, job_id: str) -> None:
    send(
        client,
        "POST",
        settings.click2mail_url(f"jobs/{job_id}/submit"),
        "job submission",
        headers=_headers(settings),
        data={"billingType": BILLING_TYPE},
    )
    logger.info("Submitted job %s", job_id)


def read_document(pdf_file: str) -> tuple[str, bytes]:
    """Load a local document; returns (file name, bytes)."""
    path = Path(pdf_file).expanduser()
    try:
        return path.name, path.read_bytes()
    except OSError as exc:
        raise InvalidInputError(f"Could not read document '{pdf_file}': {exc.strerror or exc}") from exc


# =============================================================================
# Single-call operations
# =============================================================================
def _single_field(
    settings: Settings,
    client: Optional[httpx.Client],
    method: str,
    path: str,
    step: str,
    field_name: str,
    not_found: str,
) -> ToolResult:
    """One authenticated call, one field out of the JSON body."""
    try:
        headers = _headers(settings)
        with http_session(settings, client) as http:
            response = send(http, method, settings.click2mail_url(path), step, headers=headers)
            data = json_body(response, step)
        value = require_field(data, field_name, not_found, step)
    except MailToolError as exc:
        return ToolResult.from_error(exc)
    return ToolResult.success(str(value))


def job_status(settings: Settings, job_id: str, client: Optional[httpx.Client] = None) -> ToolResult:
    """Free-text status description for a job."""
    return _single_field(
        settings, client, "GET", f"jobs/{job_id}", "job status", "description", STATUS_NOT_FOUND
    )


def view_proof(settings: Settings, job_id: str, client: Optional[httpx.Client] = None) -> ToolResult:
    """Request a proof for a job and return the URL to poll for it."""
    return _single_field(
        settings, client, "POST", f"jobs/{job_id}/proof", "proof request", "statusUrl", PROOF_NOT_FOUND
    )


def check_balance(settings: Settings, client: Optional[httpx.Client] = None) -> ToolResult:
    """Current account credit.  A balance of 0 is reported as "0"."""
    return _single_field(
        settings, client, "GET", "credit", "balance check", "balance", BALANCE_NOT_FOUND
    )
