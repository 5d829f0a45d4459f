# =============================================================================
# core/__init__.py
# =============================================================================
# The Retool adapter: API client, tool registry and dispatch.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any other
#   protocol/orchestration framework.  The only third-party import is
#   httpx, for talking to Retool.  list_tools() and call_tool() return
#   plain dicts / dataclasses that any MCP host can serve.
# =============================================================================
