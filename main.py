# =============================================================================
# main.py  -  Entry Point for the Click2Mail mail-desk agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (OpenRouter key + Click2Mail / EasyPost / Google keys)
#   2. Creates the Google ADK agent (agent/mail_agent.py), which starts the
#      FastMCP tool server as a subprocess
#   3. Runs an interactive loop: every line you type goes to the agent, the
#      agent calls tools, and its final answer is printed
#
# To expose the tools to another MCP client instead, run the server alone:
#   uv run python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must run before the agent is created: LiteLlm reads OPENROUTER_API_KEY at
# init, and the tool subprocess inherits this environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.mail_agent import create_agent

APP_NAME = "click2mail_desk"
USER_ID = "operator"


async def run_agent():
    """Run the mail-desk agent interactively until the user quits."""
    print("=" * 70)
    print("  CLICK2MAIL MAIL DESK")
    print("  Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent ready. Type 'quit' to exit.\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Working...\n")
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated.")


if __name__ == "__main__":
    asyncio.run(run_agent())
