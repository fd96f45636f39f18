# =============================================================================
# agent/mail_agent.py  -  Google ADK Agent Configuration (LLM via LiteLlm)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that talks to the user and calls the
#   Click2Mail tools.
#
#   ┌───────────────────────────┐        ┌──────────────────────────┐
#   │  Google ADK Agent         │  MCP   │  FastMCP Server          │
#   │  prompt + LiteLlm model   │──────▶│  (tools/mcp_server.py)   │
#   └───────────────────────────┘ stdio  └──────────────────────────┘
#                                                     │
#                                                     ▼
#                                        ┌──────────────────────────┐
#                                        │  core/  (httpx clients)  │
#                                        └──────────────────────────┘
#
# MODEL:
#   LiteLlm routes through OpenRouter by default ("openrouter/openai/gpt-4o",
#   key in OPENROUTER_API_KEY).  AGENT_MODEL overrides the model string.
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess ("uv run python -m
#   tools.mcp_server") from the project root and talks to it over
#   stdin/stdout.  The subprocess inherits the environment, so the
#   Click2Mail / EasyPost / Google credentials reach the tools.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import MAIL_DESK_PROMPT

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create the mail-desk agent wired to the Click2Mail MCP server."""
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
            env=dict(os.environ),
        ),
    )

    agent = Agent(
        name="click2mail_desk",
        model=LiteLlm(model=os.environ.get("AGENT_MODEL", DEFAULT_MODEL)),
        instruction=MAIL_DESK_PROMPT,
        tools=[mcp_tools],
    )

    return agent
