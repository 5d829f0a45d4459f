# =============================================================================
# core/dispatch.py  —  The Dispatch Adapter ("call tool")
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns (tool name, arguments) into ONE Retool API call and renders the
#   outcome as a ToolResponse:
#
#     1. get_tool(name)             → UnknownToolError if not registered
#     2. validate_arguments(...)    → ToolArgumentError, no HTTP made
#     3. tool.invoke(client, args)  → exactly one RetoolClient request
#     4. render                     → pretty JSON, or "Error: <message>"
#
# call_tool() NEVER raises.  Every failure becomes an error response, so
# the protocol host always has something to send back to the agent.
# =============================================================================

import json
import logging
from typing import Any, Optional

from core.errors import RetoolError
from core.models import ToolResponse
from core.registry import get_tool, validate_arguments

logger = logging.getLogger(__name__)


def render_result(result: Any) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False, default=str)


def render_error(error: BaseException) -> str:
    message = str(error) or "Unknown error occurred"
    return f"Error: {message}"


def call_tool(
    client, name: str, arguments: Optional[dict[str, Any]] = None
) -> ToolResponse:
    """Run a registered tool against `client` and normalize the outcome.

    Args:
        client: A RetoolClient (or anything with the same methods).
        name: Registered tool name, e.g. "retool_get_app".
        arguments: Raw arguments from the protocol host.

    Returns:
        ToolResponse with the JSON text of the result, or an error response.
    """
    try:
        tool = get_tool(name)
        args = validate_arguments(tool, arguments)
        result = tool.invoke(client, args)
    except RetoolError as exc:
        logger.info("%s failed: %s", name, exc)
        return ToolResponse(text=render_error(exc), is_error=True)
    except Exception as exc:
        logger.exception("Unexpected failure in %s", name)
        return ToolResponse(text=render_error(exc), is_error=True)

    return ToolResponse(text=render_result(result))
