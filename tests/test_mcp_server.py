"""Tests for the FastMCP binding, driven through an in-memory MCP client."""

import asyncio
import json

import pytest
from fastmcp import Client

from core.registry import TOOL_DEFINITIONS
from tools import mcp_server


@pytest.fixture
def server_client(retool, monkeypatch):
    monkeypatch.setattr(mcp_server, "_client", retool.client)
    return retool


def _list_tools():
    async def run():
        async with Client(mcp_server.mcp) as client:
            return await client.list_tools()

    return asyncio.run(run())


def _call(name, arguments):
    async def run():
        async with Client(mcp_server.mcp) as client:
            return await client.call_tool_mcp(name, arguments)

    return asyncio.run(run())


def test_server_exposes_every_registry_tool():
    served = [tool.name for tool in _list_tools()]
    assert sorted(served) == sorted(tool.name for tool in TOOL_DEFINITIONS)


def test_served_tools_match_registry():
    served = {tool.name: tool for tool in _list_tools()}

    for tool in TOOL_DEFINITIONS:
        listed = served[tool.name]
        schema = listed.input_schema
        assert listed.description == tool.description
        assert schema["properties"] == tool.properties, tool.name
        assert schema.get("required", []) == tool.required, tool.name


def test_served_schemas_have_no_nullable_unions():
    for listed in _list_tools():
        text = json.dumps(listed.input_schema)
        assert "anyOf" not in text, listed.name
        assert "null" not in text, listed.name
        assert "default" not in text, listed.name


def test_server_reports_its_own_version():
    async def run():
        async with Client(mcp_server.mcp) as client:
            return client.server_info

    info = asyncio.run(run())
    assert info.name == "retool-mcp"
    assert info.version == "1.0.0"


def test_call_returns_retool_json(server_client):
    server_client.respond(200, body={"id": "g1", "members": ["u1"]})

    result = _call("retool_add_user_to_group", {"group_id": "g1", "user_id": "u1"})

    assert not result.is_error
    assert json.loads(result.content[0].text) == {"id": "g1", "members": ["u1"]}
    assert server_client.last.url.path == "/api/v2/groups/g1/members"
    assert server_client.last_body() == {"user_id": "u1"}


def test_omitted_optional_arguments_are_not_sent(server_client):
    _call("retool_create_folder", {"name": "Finance"})
    assert server_client.last_body() == {"name": "Finance"}


def test_missing_argument_is_an_error_result_without_request(server_client):
    result = _call("retool_add_user_to_group", {"group_id": "g1"})

    assert result.is_error
    assert result.content[0].text == (
        "Error: Invalid arguments for retool_add_user_to_group: user_id: Field required"
    )
    assert server_client.requests == []


def test_mistyped_argument_is_an_error_result_without_request(server_client):
    result = _call("retool_trigger_workflow", {"workflow_id": "wf1", "data": [1, 2]})

    assert result.is_error
    assert result.content[0].text.startswith("Error: Invalid arguments")
    assert "data: Input should be a valid dictionary" in result.content[0].text
    assert server_client.requests == []


def test_undeclared_argument_is_an_error_result(server_client):
    result = _call("retool_delete_app", {"app_id": "a1", "force": True})

    assert result.is_error
    assert result.content[0].text.startswith("Error: ")
    assert server_client.requests == []


def test_api_failure_is_an_error_result(server_client):
    server_client.respond(404, text="App not found")

    result = _call("retool_get_app", {"app_id": "nope"})

    assert result.is_error
    assert result.content[0].text == "Error: Retool API error (404): App not found"


def test_bad_configuration_is_an_error_result(monkeypatch):
    monkeypatch.setattr(mcp_server, "_client", None)
    monkeypatch.setenv("RETOOL_TIMEOUT_SECONDS", "soon")

    result = _call("retool_list_apps", {})

    assert result.is_error
    assert result.content[0].text.startswith("Error: ")
    assert "RETOOL_TIMEOUT_SECONDS" in result.content[0].text


def test_compact_log_form():
    assert mcp_server._compact('{\n  "id": "a1"\n}') == '{"id":"a1"}'
    assert mcp_server._compact("plain text") == "plain text"


def test_get_client_builds_from_environment(monkeypatch):
    monkeypatch.setattr(mcp_server, "_client", None)
    monkeypatch.setenv("RETOOL_URL", "https://acme.retool.com")
    monkeypatch.setenv("RETOOL_API_KEY", "retool_abc")

    client = mcp_server.get_client()
    try:
        assert client.base_url == "https://acme.retool.com"
        assert mcp_server.get_client() is client
    finally:
        client.close()
