"""Tests for the tool registry: declarations, lookup and argument validation."""

import pytest

from core.errors import ToolArgumentError, UnknownToolError
from core.registry import TOOL_DEFINITIONS, get_tool, list_tools, validate_arguments

EXPECTED_TOOLS = [
    "retool_list_apps",
    "retool_get_app",
    "retool_create_app",
    "retool_delete_app",
    "retool_create_app_release",
    "retool_list_folders",
    "retool_create_folder",
    "retool_list_workflows",
    "retool_trigger_workflow",
    "retool_list_resources",
    "retool_get_resource",
    "retool_list_users",
    "retool_get_user",
    "retool_create_user",
    "retool_deactivate_user",
    "retool_list_groups",
    "retool_get_group",
    "retool_add_user_to_group",
    "retool_get_source_control_settings",
    "retool_get_audit_logs",
]


def test_tools_are_declared_in_order():
    assert [tool.name for tool in TOOL_DEFINITIONS] == EXPECTED_TOOLS


def test_required_arguments_are_declared_properties():
    for tool in TOOL_DEFINITIONS:
        assert set(tool.required) <= set(tool.properties), tool.name
        for prop in tool.properties.values():
            assert prop["type"] in ("string", "object")
            assert prop["description"]


def test_list_tools_uses_mcp_shape():
    listed = list_tools()

    assert len(listed) == len(EXPECTED_TOOLS)
    add_member = next(t for t in listed if t["name"] == "retool_add_user_to_group")
    assert add_member == {
        "name": "retool_add_user_to_group",
        "description": "Add a user to a group",
        "inputSchema": {
            "type": "object",
            "properties": {
                "group_id": {"type": "string", "description": "The ID of the group"},
                "user_id": {"type": "string", "description": "The ID of the user to add"},
            },
            "required": ["group_id", "user_id"],
        },
    }


def test_no_argument_tools_have_empty_schema():
    schema = get_tool("retool_list_apps").input_schema
    assert schema == {"type": "object", "properties": {}, "required": []}


def test_optional_arguments_use_plain_types():
    schema = get_tool("retool_create_app").input_schema

    assert schema == {
        "type": "object",
        "properties": {
            "name": {"type": "string", "description": "Name of the new app"},
            "folder_id": {
                "type": "string",
                "description": "Optional folder ID to place the app in",
            },
        },
        "required": ["name"],
    }


def test_object_argument_schema():
    data = get_tool("retool_trigger_workflow").properties["data"]
    assert data == {"type": "object", "description": "Optional data to pass to the workflow"}


def test_get_tool_unknown_name():
    with pytest.raises(UnknownToolError, match="Unknown tool: retool_launch_rocket"):
        get_tool("retool_launch_rocket")


class TestValidateArguments:
    def test_none_arguments_are_empty(self):
        assert validate_arguments(get_tool("retool_list_users"), None) == {}

    def test_none_values_count_as_omitted(self):
        tool = get_tool("retool_create_app")
        assert validate_arguments(tool, {"name": "Ops", "folder_id": None}) == {"name": "Ops"}

    def test_missing_required_argument(self):
        expected = "Invalid arguments for retool_add_user_to_group: user_id: Field required"
        with pytest.raises(ToolArgumentError, match=expected):
            validate_arguments(get_tool("retool_add_user_to_group"), {"group_id": "g1"})

    def test_required_argument_set_to_none_is_missing(self):
        with pytest.raises(ToolArgumentError, match="app_id"):
            validate_arguments(get_tool("retool_get_app"), {"app_id": None})

    def test_string_type_is_enforced(self):
        with pytest.raises(ToolArgumentError, match="app_id: Input should be a valid string"):
            validate_arguments(get_tool("retool_get_app"), {"app_id": 42})

    def test_object_type_is_enforced(self):
        tool = get_tool("retool_trigger_workflow")
        with pytest.raises(ToolArgumentError, match="data: Input should be a valid dictionary"):
            validate_arguments(tool, {"workflow_id": "wf1", "data": ["a", "b"]})

    def test_object_argument_passes_through(self):
        tool = get_tool("retool_trigger_workflow")
        args = {"workflow_id": "wf1", "data": {"order_id": 7}}
        assert validate_arguments(tool, args) == args

    def test_unexpected_argument(self):
        with pytest.raises(ToolArgumentError, match="force: Extra inputs are not permitted"):
            validate_arguments(get_tool("retool_delete_app"), {"app_id": "a1", "force": "yes"})

    def test_every_problem_is_reported(self):
        tool = get_tool("retool_create_user")
        with pytest.raises(ToolArgumentError) as exc_info:
            validate_arguments(tool, {"first_name": 1, "role": "admin"})

        message = str(exc_info.value)
        assert "email: Field required" in message
        assert "first_name: Input should be a valid string" in message
        assert "role: Extra inputs are not permitted" in message

    def test_arguments_must_be_a_dict(self):
        with pytest.raises(ToolArgumentError, match="must be an object"):
            validate_arguments(get_tool("retool_get_app"), ["a1"])

    def test_input_is_not_mutated(self):
        args = {"name": "Ops", "folder_id": None}
        validate_arguments(get_tool("retool_create_app"), args)
        assert args == {"name": "Ops", "folder_id": None}
