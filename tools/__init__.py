# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrappers around core/.
#
# Each tool builds Settings, calls exactly one core function, and flattens
# the returned ToolResult into text for the MCP client.  Tools hold no
# vendor logic and know nothing about the agent that calls them.
# =============================================================================
