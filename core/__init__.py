# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the vendor-facing logic for the Click2Mail tool
# server: configuration, auth headers, the HTTP helper, data models, the
# Click2Mail / EasyPost / Google address-validation clients, and the
# letter-submission pipeline.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or Google ADK.  Every function
#   takes a Settings object and (optionally) an httpx.Client, and returns a
#   ToolResult.  The tools/ layer turns that result into text for MCP.
# =============================================================================
