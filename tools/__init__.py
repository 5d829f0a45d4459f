# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP binding for the Retool tool registry.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and core/.  Each served
#   tool:
#     1. Takes its name, description and inputSchema from core.registry
#     2. Passes its raw arguments to core.dispatch.call_tool()
#     3. Returns the rendered text, or raises ToolError on failure
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build HTTP requests (core/client.py does)
#   - They do NOT declare or validate arguments (core/models.py and
#     core/registry.py do)
#   - They do NOT know about Google ADK
# =============================================================================
