# =============================================================================
# core/postcards.py  -  Postcard sending (not implemented)
# =============================================================================
#
# The tool is registered so the surface is complete, but no request is sent.
# Which Click2Mail product options a postcard job needs (layout, envelope,
# paper) has not been decided yet.
# =============================================================================

import logging

from core.config import Settings
from core.errors import ErrorKind
from core.models import SendPostcardInput, ToolResult

logger = logging.getLogger(__name__)

NOT_IMPLEMENTED = "send_postcard is not implemented yet."


def send_postcard(settings: Settings, postcard: SendPostcardInput, pdf_file: str) -> ToolResult:
    logger.info(
        "send_postcard requested (%s to %s); not implemented",
        postcard.postcard_type.value, postcard.to.zip_code,
    )
    return ToolResult.failure(ErrorKind.UNSUPPORTED, NOT_IMPLEMENTED)
