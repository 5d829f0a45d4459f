# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Three shapes flow through the adapter:
#
#   *Arguments      →  pydantic models, one per tool: the ONLY place a
#                      tool's argument names, types, descriptions and
#                      required flags are written down.
#   ToolDefinition  →  what a tool IS: name, description, its Arguments
#                      model, and which RetoolClient call it makes.  The
#                      MCP inputSchema is derived from the Arguments model.
#   ToolResponse    →  what a tool call RETURNS: one block of text, plus a
#                      flag saying whether that text is an error.
#
# Neither ToolDefinition nor ToolResponse knows about FastMCP.  to_mcp() /
# to_envelope() produce plain dicts in the MCP wire shape.
#
# WHY NOT model_json_schema()?
#   pydantic renders Optional[str] as anyOf [string, null] with a null
#   default.  MCP clients expect the plain form, so input_schema maps each
#   field to {"type": ..., "description": ...} itself; the argument is
#   optional by not being in "required".
# =============================================================================

from dataclasses import dataclass
from types import UnionType
from typing import Any, Callable, Optional, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field

_JSON_TYPES = {str: "string", dict: "object"}


def _json_type(annotation: Any) -> str:
    """JSON Schema type name for a field annotation (Optional unwrapped)."""
    if get_origin(annotation) in (Union, UnionType):
        annotation = next(arg for arg in get_args(annotation) if arg is not type(None))
    return _JSON_TYPES[get_origin(annotation) or annotation]


# -----------------------------------------------------------------------------
# Tool arguments
# -----------------------------------------------------------------------------
# strict: "42" is a string, 42 is not; a list is not an object.
# extra="forbid": an argument the tool doesn't declare is an error.
# -----------------------------------------------------------------------------
class ToolArguments(BaseModel):
    """Base for every tool's argument model."""

    model_config = ConfigDict(extra="forbid", strict=True)


class NoArguments(ToolArguments):
    """Tools that take no arguments (the list_* family)."""


class GetAppArguments(ToolArguments):
    app_id: str = Field(description="The ID of the app to retrieve")


class CreateAppArguments(ToolArguments):
    name: str = Field(description="Name of the new app")
    folder_id: Optional[str] = Field(None, description="Optional folder ID to place the app in")


class DeleteAppArguments(ToolArguments):
    app_id: str = Field(description="The ID of the app to delete")


class CreateAppReleaseArguments(ToolArguments):
    app_id: str = Field(description="The ID of the app")
    version: Optional[str] = Field(None, description="Optional version string for the release")


class CreateFolderArguments(ToolArguments):
    name: str = Field(description="Name of the folder")
    parent_folder_id: Optional[str] = Field(
        None, description="Optional parent folder ID for nesting"
    )


class TriggerWorkflowArguments(ToolArguments):
    workflow_id: str = Field(description="The ID of the workflow to trigger")
    data: Optional[dict[str, Any]] = Field(
        None, description="Optional data to pass to the workflow"
    )


class GetResourceArguments(ToolArguments):
    resource_id: str = Field(description="The ID of the resource")


class GetUserArguments(ToolArguments):
    user_id: str = Field(description="The ID of the user")


class CreateUserArguments(ToolArguments):
    email: str = Field(description="Email address of the user")
    first_name: Optional[str] = Field(None, description="First name of the user")
    last_name: Optional[str] = Field(None, description="Last name of the user")


class DeactivateUserArguments(ToolArguments):
    user_id: str = Field(description="The ID of the user to deactivate")


class GetGroupArguments(ToolArguments):
    group_id: str = Field(description="The ID of the group")


class AddUserToGroupArguments(ToolArguments):
    group_id: str = Field(description="The ID of the group")
    user_id: str = Field(description="The ID of the user to add")


class AuditLogArguments(ToolArguments):
    start_date: Optional[str] = Field(None, description="Start date (ISO 8601 format)")
    end_date: Optional[str] = Field(None, description="End date (ISO 8601 format)")


# -----------------------------------------------------------------------------
# ToolDefinition — one registry entry
# -----------------------------------------------------------------------------
# `invoke` receives the RetoolClient and the already-validated arguments and
# must make exactly one client call.
# -----------------------------------------------------------------------------
@dataclass
class ToolDefinition:
    """A Retool endpoint described as a callable tool."""

    name: str                          # "retool_get_app"
    description: str                   # Read by the LLM to decide when to call
    invoke: Callable[[Any, dict[str, Any]], Any]
    arguments: type[ToolArguments] = NoArguments

    @property
    def properties(self) -> dict[str, dict[str, Any]]:
        return {
            name: {"type": _json_type(field.annotation), "description": field.description}
            for name, field in self.arguments.model_fields.items()
        }

    @property
    def required(self) -> list[str]:
        return [
            name
            for name, field in self.arguments.model_fields.items()
            if field.is_required()
        ]

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": self.properties,
            "required": self.required,
        }

    def to_mcp(self) -> dict[str, Any]:
        """The tool as it appears in an MCP tools/list response."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


# -----------------------------------------------------------------------------
# ToolResponse — the normalized result of a tool call
# -----------------------------------------------------------------------------
@dataclass
class ToolResponse:
    """Text result of one tool call."""

    text: str
    is_error: bool = False

    def to_envelope(self) -> dict[str, Any]:
        envelope: dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            envelope["isError"] = True
        return envelope
