# =============================================================================
# core/registry.py  —  The Tool Registry
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every Retool tool exactly once: its name, the description the
#   LLM reads, its pydantic Arguments model (core/models.py), and the client
#   call it maps to.  Everything else (listing, validation, dispatch, the
#   FastMCP binding) reads from TOOL_DEFINITIONS.
#
# TOOL NAMING CONVENTIONS:
#   retool_list_*    → read-only collection fetch
#   retool_get_*     → read-only single-object fetch
#   retool_create_*  → creates something (NOT idempotent)
#   retool_delete_* / retool_deactivate_* / retool_trigger_*
#                    → side effects; the agent prompt asks for confirmation
#
# VALIDATION (validate_arguments):
#   None becomes {}, None-valued arguments are dropped, and what remains is
#   validated by the tool's Arguments model.  Every pydantic error is folded
#   into one ToolArgumentError message.
# =============================================================================

from typing import Any, Optional

from pydantic import ValidationError

from core.errors import ToolArgumentError, UnknownToolError
from core.models import (
    AddUserToGroupArguments,
    AuditLogArguments,
    CreateAppArguments,
    CreateAppReleaseArguments,
    CreateFolderArguments,
    CreateUserArguments,
    DeactivateUserArguments,
    DeleteAppArguments,
    GetAppArguments,
    GetGroupArguments,
    GetResourceArguments,
    GetUserArguments,
    ToolDefinition,
    TriggerWorkflowArguments,
)

TOOL_DEFINITIONS: list[ToolDefinition] = [
    # --- Apps ---------------------------------------------------------------
    ToolDefinition(
        name="retool_list_apps",
        description="List all Retool apps in the organization",
        invoke=lambda client, args: client.list_apps(),
    ),
    ToolDefinition(
        name="retool_get_app",
        description="Get details of a specific Retool app",
        arguments=GetAppArguments,
        invoke=lambda client, args: client.get_app(args["app_id"]),
    ),
    ToolDefinition(
        name="retool_create_app",
        description="Create a new Retool app",
        arguments=CreateAppArguments,
        invoke=lambda client, args: client.create_app(
            args["name"], args.get("folder_id")
        ),
    ),
    ToolDefinition(
        name="retool_delete_app",
        description="Delete a Retool app",
        arguments=DeleteAppArguments,
        invoke=lambda client, args: client.delete_app(args["app_id"]),
    ),
    ToolDefinition(
        name="retool_create_app_release",
        description="Create a new release/version of a Retool app",
        arguments=CreateAppReleaseArguments,
        invoke=lambda client, args: client.create_app_release(
            args["app_id"], args.get("version")
        ),
    ),
    # --- Folders ------------------------------------------------------------
    ToolDefinition(
        name="retool_list_folders",
        description="List all folders in the Retool organization",
        invoke=lambda client, args: client.list_folders(),
    ),
    ToolDefinition(
        name="retool_create_folder",
        description="Create a new folder",
        arguments=CreateFolderArguments,
        invoke=lambda client, args: client.create_folder(
            args["name"], args.get("parent_folder_id")
        ),
    ),
    # --- Workflows ----------------------------------------------------------
    ToolDefinition(
        name="retool_list_workflows",
        description="List all Retool workflows",
        invoke=lambda client, args: client.list_workflows(),
    ),
    ToolDefinition(
        name="retool_trigger_workflow",
        description="Trigger a Retool workflow with optional data",
        arguments=TriggerWorkflowArguments,
        invoke=lambda client, args: client.trigger_workflow(
            args["workflow_id"], args.get("data")
        ),
    ),
    # --- Resources ----------------------------------------------------------
    ToolDefinition(
        name="retool_list_resources",
        description="List all resources (database connections, APIs, etc.)",
        invoke=lambda client, args: client.list_resources(),
    ),
    ToolDefinition(
        name="retool_get_resource",
        description="Get details of a specific resource",
        arguments=GetResourceArguments,
        invoke=lambda client, args: client.get_resource(args["resource_id"]),
    ),
    # --- Users --------------------------------------------------------------
    ToolDefinition(
        name="retool_list_users",
        description="List all users in the organization",
        invoke=lambda client, args: client.list_users(),
    ),
    ToolDefinition(
        name="retool_get_user",
        description="Get details of a specific user",
        arguments=GetUserArguments,
        invoke=lambda client, args: client.get_user(args["user_id"]),
    ),
    ToolDefinition(
        name="retool_create_user",
        description="Create/invite a new user to the organization",
        arguments=CreateUserArguments,
        invoke=lambda client, args: client.create_user(
            args["email"], args.get("first_name"), args.get("last_name")
        ),
    ),
    ToolDefinition(
        name="retool_deactivate_user",
        description="Deactivate a user",
        arguments=DeactivateUserArguments,
        invoke=lambda client, args: client.deactivate_user(args["user_id"]),
    ),
    # --- Groups -------------------------------------------------------------
    ToolDefinition(
        name="retool_list_groups",
        description="List all groups in the organization",
        invoke=lambda client, args: client.list_groups(),
    ),
    ToolDefinition(
        name="retool_get_group",
        description="Get details of a specific group",
        arguments=GetGroupArguments,
        invoke=lambda client, args: client.get_group(args["group_id"]),
    ),
    ToolDefinition(
        name="retool_add_user_to_group",
        description="Add a user to a group",
        arguments=AddUserToGroupArguments,
        invoke=lambda client, args: client.add_user_to_group(
            args["group_id"], args["user_id"]
        ),
    ),
    # --- Source control -----------------------------------------------------
    ToolDefinition(
        name="retool_get_source_control_settings",
        description="Get the organization's source control settings",
        invoke=lambda client, args: client.list_source_control_settings(),
    ),
    # --- Audit logs ---------------------------------------------------------
    ToolDefinition(
        name="retool_get_audit_logs",
        description="Get audit logs for the organization",
        arguments=AuditLogArguments,
        invoke=lambda client, args: client.get_audit_logs(
            args.get("start_date"), args.get("end_date")
        ),
    ),
]

_TOOLS_BY_NAME: dict[str, ToolDefinition] = {tool.name: tool for tool in TOOL_DEFINITIONS}

if len(_TOOLS_BY_NAME) != len(TOOL_DEFINITIONS):
    raise RuntimeError("Duplicate tool name in TOOL_DEFINITIONS")

def list_tools() -> list[dict[str, Any]]:
    """All tools in MCP tools/list shape, in declaration order."""
    return [tool.to_mcp() for tool in TOOL_DEFINITIONS]

def get_tool(name: str) -> ToolDefinition:
    """Look up a tool by name.

    Raises:
        UnknownToolError: no tool is registered under `name`.
    """
    try:
        return _TOOLS_BY_NAME[name]
    except KeyError:
        raise UnknownToolError(name) from None


def validate_arguments(
    tool: ToolDefinition, arguments: Optional[dict[str, Any]]
) -> dict[str, Any]:
    """Check `arguments` against the tool's Arguments model.

    None-valued arguments are dropped from the result, so handlers can use
    args.get(...) for optional fields.

    Raises:
        ToolArgumentError: naming every offending argument.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ToolArgumentError(
            f"Arguments for {tool.name} must be an object, got {type(arguments).__name__}"
        )

    cleaned = {key: value for key, value in arguments.items() if value is not None}
    try:
        tool.arguments.model_validate(cleaned)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ToolArgumentError(f"Invalid arguments for {tool.name}: {problems}") from None
    return cleaned
