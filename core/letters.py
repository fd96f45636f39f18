# =============================================================================
# core/letters.py  -  The letter-submission pipeline
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends one PDF as a physical letter to one recipient.  Four Click2Mail
#   calls, strictly in order, each needing the id returned by the one before:
#
#     1. upload document        → document id
#     2. create address list    → address list id
#     3. create job             → job id      (needs 1 + 2)
#     4. submit job                           (needs 3)
#
#   The first failure stops the pipeline and its message names the step.
#
# PARTIAL FAILURE:
#   Nothing is rolled back.  If step 3 or 4 fails, the uploaded document and
#   the address list stay in the Click2Mail account.  We log their ids so an
#   operator can remove them by hand.
# =============================================================================

import logging
from typing import Optional

import httpx

from core import click2mail
from core.auth import basic_auth_header
from core.config import Settings
from core.errors import MailToolError
from core.http import http_session
from core.models import ToolResult

logger = logging.getLogger(__name__)


def send_letter(
    settings: Settings,
    pdf_file: str,
    letter_type: str,
    name: str,
    address_lines: str,
    locality: str,
    postal_code: str,
    region_code: str = "US",
    client: Optional[httpx.Client] = None,
) -> ToolResult:
    """Upload a PDF and mail it to a single address.

    Args:
        settings: Click2Mail credentials and base URL.
        pdf_file: Path to the PDF on the local filesystem.
        letter_type: Click2Mail document class, e.g. "Letter 8.5 x 11".
        name: Recipient's full name.
        address_lines: Street line(s) of the recipient.
        locality: City, optionally followed by ", ST".
        postal_code: ZIP / postal code.
        region_code: Country code (default "US").
        client: Optional httpx client (tests pass a mock transport).

    Returns:
        ToolResult whose value is "<letter_type> submitted successfully.
        Job ID: <id>" on success.
    """
    document_id: Optional[str] = None
    address_list_id: Optional[str] = None

    try:
        # Credentials and the document are checked before anything is sent.
        basic_auth_header(settings.click2mail_auth)
        document_name, content = click2mail.read_document(pdf_file)

        with http_session(settings, client) as http:
            document_id = click2mail.upload_document(
                http, settings, content, document_name, letter_type
            )
            logger.info("Uploaded %s as document %s", document_name, document_id)

            address_list_id = click2mail.create_address_list(
                http, settings, name, address_lines, locality, postal_code, region_code
            )
            logger.info("Created address list %s", address_list_id)

            job_id = click2mail.create_job(
                http, settings, letter_type, document_id, address_list_id
            )
            logger.info("Created job %s", job_id)

            click2mail.submit_job(http, settings, job_id)

    except MailToolError as exc:
        if document_id or address_list_id:
            logger.warning(
                "send_letter stopped at %s; left behind document=%s address_list=%s",
                exc.step, document_id, address_list_id,
            )
        return ToolResult.from_error(exc)

    return ToolResult.success(f"{letter_type} submitted successfully. Job ID: {job_id}")
