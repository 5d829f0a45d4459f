# =============================================================================
# agent/retool_agent.py  —  Google ADK Agent Configuration (Retool admin)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the Google ADK agent that drives the Retool tool server: an LLM
#   (via LiteLlm) plus an MCP connection to tools/mcp_server.py.
#
#   ┌──────────────────────────────┐        stdio        ┌──────────────────┐
#   │  ADK Agent                   │ ──────────────────▶ │ FastMCP server   │
#   │  prompt + LiteLlm model      │   tools/list        │ tools/mcp_server │
#   │                              │   tools/call        └────────┬─────────┘
#   └──────────────────────────────┘                              │ HTTPS
#                                                                 ▼
#                                                       Retool /api/v2
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess with the same interpreter that is
#   running this code (`<python> -m tools.mcp_server`), with the project
#   root as its working directory, so `core` and `tools` import without an
#   install step.  The subprocess inherits the environment, which is how
#   RETOOL_URL / RETOOL_API_KEY reach it.
#
# MODEL:
#   RETOOL_AGENT_MODEL picks the LiteLlm model string
#   (default "openrouter/openai/gpt-4o"; LiteLlm reads the provider key,
#   e.g. OPENROUTER_API_KEY, from the environment).
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_admin_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters() -> StdioServerParameters:
    """How ADK should launch the Retool MCP server."""
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        env=dict(os.environ),
    )


def create_agent() -> Agent:
    """Create the Retool admin assistant.

    Returns:
        A configured Google ADK Agent with the Retool tools attached.
    """
    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="retool_admin_assistant",
        model=LiteLlm(model=os.environ.get("RETOOL_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_admin_assistant_prompt(),
        tools=[mcp_tools],
    )
