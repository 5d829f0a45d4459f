# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL Retool tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every tool in core/registry.py over MCP.  Nothing here declares
#   a schema: each registry entry becomes one RetoolTool whose description
#   and inputSchema are exactly what core.registry.list_tools() returns, and
#   whose body hands off to the dispatch adapter (core/dispatch.py), which
#   validates, calls Retool once, and renders the result.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g. "retool_get_app")
#   2. FastMCP routes the call to that tool's RetoolTool.run()
#   3. run() passes the raw arguments to core.dispatch.call_tool()
#   4. Success → the pretty-printed JSON text is returned
#      Failure → ToolError("Error: ...") is raised, which FastMCP sends
#                back as a result with isError=true.  Bad arguments take
#                this path too, before any HTTP request is made.
#
# RUNNING THIS SERVER:
#   a) Standalone:         python -m tools.mcp_server
#   b) Installed script:   retool-mcp
#   c) Spawned over stdio by the admin assistant (agent/retool_agent.py)
# =============================================================================

import json
import logging
import sys
from typing import Any, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool, ToolResult

from core.client import RetoolClient
from core.config import RetoolSettings
from core.dispatch import call_tool, render_error
from core.errors import RetoolError
from core.registry import list_tools

SERVER_NAME = "retool-mcp"
SERVER_VERSION = "1.0.0"


# =============================================================================
# Logging Setup
# =============================================================================
# STDERR only: stdout is the MCP transport, and a stray log line there
# corrupts the JSON-RPC stream.
#
#   CYAN   → incoming tool calls (name + arguments)
#   YELLOW → status messages
#   GREEN  → successful responses
#   RED    → error responses
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

# Response bodies (list_users, audit logs) can be huge; the log gets a preview.
_LOG_PREVIEW_CHARS = 500

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _preview(text: str) -> str:
    if len(text) <= _LOG_PREVIEW_CHARS:
        return text
    return f"{text[:_LOG_PREVIEW_CHARS]}... ({len(text)} chars)"


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _compact(text: str) -> str:
    """Single-line form of a JSON response; non-JSON text is returned as is."""
    try:
        parsed = json.loads(text)
    except ValueError:
        return text
    return json.dumps(parsed, separators=(",", ":"), ensure_ascii=False)


def _log_response(tool_name: str, text: str) -> None:
    logging.info(f"{_GREEN}  ← {tool_name} response: {_preview(_compact(text))}{_RESET}")


def _log_error(tool_name: str, text: str) -> None:
    logging.warning(f"{_RED}  ✗ {tool_name} {text}{_RESET}")


# =============================================================================
# Server + Retool client
# =============================================================================
mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

_client: Optional[RetoolClient] = None


def get_client() -> RetoolClient:
    """Return the shared RetoolClient, creating it from the environment once."""
    global _client
    if _client is None:
        settings = RetoolSettings.from_env()
        _log_status(f"Connecting to Retool at {settings.base_url}")
        _client = RetoolClient.from_settings(settings)
    return _client


# =============================================================================
# Registry-backed tools
# =============================================================================
class RetoolTool(Tool):
    """One registry entry served over MCP.

    `parameters` is the registry's inputSchema, so what the agent sees and
    what core.registry.validate_arguments enforces come from the same model.
    FastMCP hands run() the raw arguments; validation happens in dispatch.
    """

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)
        try:
            client = get_client()
        except RetoolError as exc:
            _log_error(self.name, render_error(exc))
            raise ToolError(render_error(exc)) from exc

        response = call_tool(client, self.name, arguments)
        if response.is_error:
            _log_error(self.name, response.text)
            raise ToolError(response.text)
        _log_response(self.name, response.text)
        return ToolResult(content=response.text)


def register_tools(server: FastMCP) -> None:
    """Add one RetoolTool per registry entry to `server`."""
    for entry in list_tools():
        server.add_tool(
            RetoolTool(
                name=entry["name"],
                description=entry["description"],
                parameters=entry["inputSchema"],
            )
        )


register_tools(mcp)


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    load_dotenv()
    mcp.run()


if __name__ == "__main__":
    main()
