"""Tests for the MCP server wiring: tool listing, calls and the schema resource."""

import json
from importlib.metadata import version

import pytest
from mcp import types

from config.settings import Profile
from domain.results import ToolResult
from mcp_server.main import build_server
from mcp_server.server import SCHEMA_RESOURCE_NAME, create_mcp_server, to_call_tool_result, to_mcp_tools
from services.schema_resolver import SchemaResolver
from tools.catalog import build_registry

from tests.conftest import OPTIX_ENDPOINT, SAMPLE_SDL, booking


@pytest.fixture
def server(make_settings, make_dispatcher, stub_service, schema_file):
    settings = make_settings(name="optix-test")
    dispatcher = make_dispatcher()
    resolver = SchemaResolver(stub_service, str(schema_file))
    return create_mcp_server(settings, dispatcher.registry, dispatcher, resolver)


def test_sdk_is_the_1x_low_level_server() -> None:
    # create_mcp_server relies on the 1.x decorators and CallToolResult.isError
    assert version("mcp").split(".")[0] == "1"


def test_to_call_tool_result() -> None:
    ok = to_call_tool_result(ToolResult.from_payload({"found": True}))
    assert ok.isError is False
    assert json.loads(ok.content[0].text) == {"found": True}

    failed = to_call_tool_result(ToolResult.error("Unsupported tool: nope"))
    assert failed.isError is True
    assert failed.content[0].text == "Unsupported tool: nope"


def test_to_mcp_tools() -> None:
    tools = to_mcp_tools(build_registry(Profile(enables_extended_tools=False)))
    assert [t.name for t in tools] == [
        "query-graphql", "introspect-schema", "search-schema", "get-enum-values", "generate-query",
    ]
    assert all(t.inputSchema["type"] == "object" for t in tools)


@pytest.mark.asyncio
async def test_list_tools_handler(server) -> None:
    handler = server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    names = [tool.name for tool in result.root.tools]
    assert len(names) == 25
    assert "optix_check_availability" in names


@pytest.mark.asyncio
async def test_call_tool_handler(server, stub_service) -> None:
    stub_service.queue({"bookings": {"data": [booking("B1", is_new=True)], "total": 1}})
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="optix_list_bookings", arguments={"limit": 5}),
    )

    result = (await handler(request)).root

    assert result.isError is False
    payload = json.loads(result.content[0].text)
    assert payload["summary"]["byStatus"] == {"pending": 1}
    assert stub_service.calls[0].variables["limit"] == 5


@pytest.mark.asyncio
async def test_call_tool_error_is_a_result(server, stub_service) -> None:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="optix_cancel_booking", arguments={"bookingId": "B1"}),
    )

    result = (await handler(request)).root

    assert result.isError is True
    assert "Mutations are disabled" in result.content[0].text
    assert stub_service.calls == []


@pytest.mark.asyncio
async def test_schema_resource(server) -> None:
    listed = (await server.request_handlers[types.ListResourcesRequest](
        types.ListResourcesRequest(method="resources/list")
    )).root
    assert [r.name for r in listed.resources] == [SCHEMA_RESOURCE_NAME]
    assert str(listed.resources[0].uri) == OPTIX_ENDPOINT

    read = (await server.request_handlers[types.ReadResourceRequest](
        types.ReadResourceRequest(
            method="resources/read",
            params=types.ReadResourceRequestParams(uri=OPTIX_ENDPOINT),
        )
    )).root
    assert read.contents[0].text == SAMPLE_SDL


def test_build_server(make_settings, tmp_path) -> None:
    server = build_server(make_settings(
        endpoint="https://graphql.example.com/graphql",
        local_schema_file=str(tmp_path / "none.graphql"),
    ))
    assert server.name == "mcp-graphql"
    assert types.CallToolRequest in server.request_handlers
    assert types.ReadResourceRequest in server.request_handlers
