# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers every Click2Mail / EasyPost / address-validation tool with
#   FastMCP.  Each tool is a thin wrapper around a core/ function:
#
#     1. Build Settings from the environment (fresh for every call)
#     2. Call the core function, which returns a ToolResult
#     3. Log the call and the response
#     4. Return TEXT (validate_address returns a JSON object on success)
#
# ERROR CONTRACT:
#   Configuration errors, HTTP failures and missing response fields all come
#   back as a plain message string.  Nothing is raised to the MCP client.
#
# RUNNING THIS SERVER:
#     python -m tools.mcp_server                      # stdio (default)
#     python -m tools.mcp_server --transport sse      # SSE on :8000
#     python -m tools.mcp_server --transport http     # streamable HTTP
#   MCP_TRANSPORT / MCP_HOST / MCP_PORT set the same options.
# =============================================================================

import argparse
import json
import logging
import os
import sys
from typing import Callable, Union

from dotenv import load_dotenv
from fastmcp import FastMCP

from core.address_validation import validate_address as run_validate_address
from core.click2mail import check_balance as run_check_balance
from core.click2mail import job_status as run_job_status
from core.click2mail import view_proof as run_view_proof
from core.config import Settings
from core.errors import ConfigurationError
from core.letters import send_letter as run_send_letter
from core.models import Address, AddressValidationResult, SendPostcardInput, ToolResult
from core.postcards import send_postcard as run_send_postcard
from core.shipping import create_shipping_label as run_create_shipping_label

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: with the stdio transport, STDOUT carries the MCP JSON
# stream and anything else written there corrupts it.
#
# Colors: CYAN for incoming calls, GREEN for responses, YELLOW for status.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log a failed call's error kind in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: Union[str, dict]) -> Union[str, dict]:
    """Log the tool response in GREEN, then return it."""
    shown = json.dumps(result, separators=(",", ":")) if isinstance(result, dict) else result
    logging.info(f"{_GREEN}  ← {tool_name} response: {shown}{_RESET}")
    return result


def _run(tool_name: str, operation: Callable[[Settings], ToolResult]) -> ToolResult:
    """Load settings for this call and run one core operation."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        return ToolResult.from_error(exc)
    result = operation(settings)
    if not result.ok:
        _log_status(f"{tool_name} failed ({result.kind.value})")
    return result


mcp = FastMCP("Click2mail")


# =============================================================================
# TOOL: create_shipping_label  (EasyPost)
# =============================================================================
@mcp.tool()
def create_shipping_label(
    to_address_name: str,
    to_address_street1: str,
    to_address_city: str,
    to_address_state: str,
    to_address_zip: str,
    to_address_country: str,
    from_address_name: str,
    from_address_street1: str,
    from_address_city: str,
    from_address_state: str,
    from_address_zip: str,
    from_address_country: str,
    parcel_weight: str,
) -> str:
    """Create a Priority shipping label and return the label URL.

    This is a PAID action: confirm with the user before calling it.

    Args:
        to_address_*: Recipient name, street, city, state, ZIP and country.
        from_address_*: Sender name, street, city, state, ZIP and country.
        parcel_weight: Parcel weight in ounces, as text (e.g. "16").

    Returns:
        The label URL, or an error message.
    """
    _log_request(
        "create_shipping_label",
        to_address_zip=to_address_zip, from_address_zip=from_address_zip,
        parcel_weight=parcel_weight,
    )
    to_address = Address(
        name=to_address_name, street=to_address_street1, city=to_address_city,
        state=to_address_state, zip_code=to_address_zip, country=to_address_country,
    )
    from_address = Address(
        name=from_address_name, street=from_address_street1, city=from_address_city,
        state=from_address_state, zip_code=from_address_zip, country=from_address_country,
    )
    result = _run(
        "create_shipping_label",
        lambda settings: run_create_shipping_label(settings, to_address, from_address, parcel_weight),
    )
    return _log_response("create_shipping_label", result.to_text())


# =============================================================================
# TOOL: view_proof
# =============================================================================
@mcp.tool()
def view_proof(jobid: str) -> str:
    """Request a proof for a Click2Mail job.

    Args:
        jobid: The job id returned by send_letter.

    Returns:
        The URL where the proof status can be checked, or an error message.
    """
    _log_request("view_proof", jobid=jobid)
    result = _run("view_proof", lambda settings: run_view_proof(settings, jobid))
    return _log_response("view_proof", result.to_text())


# =============================================================================
# TOOL: job_status
# =============================================================================
@mcp.tool()
def job_status(jobid: str) -> str:
    """Get the current status description of a Click2Mail job."""
    _log_request("job_status", jobid=jobid)
    result = _run("job_status", lambda settings: run_job_status(settings, jobid))
    return _log_response("job_status", result.to_text())


# =============================================================================
# TOOL: check_balance
# =============================================================================
@mcp.tool()
def check_balance() -> str:
    """Get the Click2Mail account credit balance."""
    _log_request("check_balance")
    result = _run("check_balance", run_check_balance)
    return _log_response("check_balance", result.to_text())


# =============================================================================
# TOOL: send_letter
# =============================================================================
# Four Click2Mail calls in a row (upload, address list, job, submit).
# The message of a failure names the step that broke.
# =============================================================================
@mcp.tool()
def send_letter(
    pdf_file: str,
    letter_type: str,
    name: str,
    address_lines: str,
    locality: str,
    postal_code: str,
    region_code: str = "US",
) -> str:
    """Mail a PDF as a physical letter to one recipient.

    This is a PAID action: validate the address first and confirm with the
    user before calling it.

    Args:
        pdf_file: Path to the PDF on the server's filesystem.
        letter_type: "Letter 8.5 x 11" or "Letter 8.5 x 14".
        name: Recipient's full name.
        address_lines: Street address.
        locality: City, optionally with state ("Austin, TX").
        postal_code: ZIP / postal code.
        region_code: Country code, default "US".

    Returns:
        A confirmation containing the job id, or an error message.
    """
    _log_request(
        "send_letter",
        pdf_file=pdf_file, letter_type=letter_type, locality=locality,
        postal_code=postal_code, region_code=region_code,
    )
    result = _run(
        "send_letter",
        lambda settings: run_send_letter(
            settings, pdf_file, letter_type, name, address_lines,
            locality, postal_code, region_code,
        ),
    )
    return _log_response("send_letter", result.to_text())


# =============================================================================
# TOOL: send_postcard  (not implemented)
# =============================================================================
@mcp.tool()
def send_postcard(input: SendPostcardInput, pdf: str) -> str:
    """Send a postcard.  Not available yet; always returns a notice."""
    _log_request("send_postcard", postcard_type=input.postcard_type, pdf=pdf)
    result = _run("send_postcard", lambda settings: run_send_postcard(settings, input, pdf))
    return _log_response("send_postcard", result.to_text())


# =============================================================================
# TOOL: validate_address  (Google Address Validation)
# =============================================================================
@mcp.tool()
def validate_address(
    address_lines: str,
    locality: str,
    postal_code: str,
    region_code: str = "US",
) -> Union[dict, str]:
    """Validate a postal address before mailing to it.

    Returns:
        On success a dict with:
          - is_valid: True when Google confirmed every component
          - corrected_address: Google's postal address for the input
          - original_address: the input, echoed back
          - messages: notes about unconfirmed/inferred/missing parts
        On failure, an error message.
    """
    _log_request(
        "validate_address",
        address_lines=address_lines, locality=locality,
        postal_code=postal_code, region_code=region_code,
    )
    result = _run(
        "validate_address",
        lambda settings: run_validate_address(
            settings, address_lines, locality, postal_code, region_code
        ),
    )
    if result.ok and isinstance(result.value, AddressValidationResult):
        return _log_response("validate_address", result.value.to_dict())
    return _log_response("validate_address", result.to_text())


# =============================================================================
# Server entry point
# =============================================================================
def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Click2Mail MCP tool server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "http"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
    )
    parser.add_argument("--host", default=os.environ.get("MCP_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("MCP_PORT", "8000")))
    args = parser.parse_args(argv)

    if args.transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
