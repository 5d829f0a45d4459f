# =============================================================================
# agent/__init__.py
# =============================================================================
# The Google ADK admin assistant.
#
# ARCHITECTURAL ROLE:
#   agent/ is a CLIENT of the tool server, not part of it.  It holds the
#   system prompt and the ADK wiring; every Retool call it makes goes
#   through MCP to tools/mcp_server.py.  Nothing in core/ or tools/ imports
#   from here.
# =============================================================================
