# =============================================================================
# main.py  —  Entry Point for the Retool Admin Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (RETOOL_URL, RETOOL_API_KEY, OPENROUTER_API_KEY, ...)
#   2. Creates the Google ADK agent (agent/retool_agent.py), which spawns
#      the Retool MCP server (tools/mcp_server.py) over stdio
#   3. Reads questions from the terminal and streams the agent's events:
#      tool calls are printed as they happen, then the final answer
#
# The MCP server alone (no LLM) runs with:  python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must run BEFORE the agent is created: LiteLlm reads its provider key, and
# the spawned MCP server inherits RETOOL_* from this process's environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.retool_agent import create_agent

APP_NAME = "retool_admin"
USER_ID = "admin"


async def run_agent():
    """Run the Retool admin assistant interactively."""
    print("=" * 70)
    print("  RETOOL ADMIN ASSISTANT")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about your Retool apps, users, groups, workflows...")
    print("   (Type 'quit' to exit)\n")
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

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # Tool calls are printed as they stream; only the last text part is
        # shown as the answer.
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
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
