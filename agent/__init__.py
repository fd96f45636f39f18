# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK "mail desk" agent.
#
# The agent holds no vendor logic.  It reads the system prompt
# (agent/prompt.py), discovers the Click2Mail tools over MCP
# (tools/mcp_server.py), and decides which tool to call and when.  Every
# HTTP call happens in core/.
# =============================================================================
