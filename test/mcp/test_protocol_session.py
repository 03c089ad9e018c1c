"""End-to-end tests through an in-memory MCP client session.

These check that the two error conventions survive the SDK: structural
problems arrive as JSON-RPC errors, backend problems as isError results.
"""

import json
from contextlib import asynccontextmanager

import pytest
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND

from erpnext_mcp.exceptions import ListError
from erpnext_mcp.mcp_server import create_server


@asynccontextmanager
async def mcp_session(backend, logger):
    """Context manager for MCP client session"""
    server = create_server(backend, logger=logger)
    async with create_connected_server_and_client_session(server) as session:
        yield session


@pytest.mark.asyncio
async def test_tools_listed_without_credentials(unauthenticated_backend, logger):
    async with mcp_session(unauthenticated_backend, logger) as session:
        tools_result = await session.list_tools()

    assert [tool.name for tool in tools_result.tools] == [
        "get_doctypes",
        "get_doctype_fields",
        "get_documents",
        "create_document",
        "update_document",
        "run_report",
    ]


@pytest.mark.asyncio
async def test_resources_listed_without_credentials(unauthenticated_backend, logger):
    async with mcp_session(unauthenticated_backend, logger) as session:
        resources = await session.list_resources()
        templates = await session.list_resource_templates()

    assert [str(r.uri) for r in resources.resources] == ["erpnext://DocTypes"]
    assert [t.uriTemplate for t in templates.resourceTemplates] == ["erpnext://{doctype}/{name}"]


@pytest.mark.asyncio
async def test_create_document_result(backend, logger):
    async with mcp_session(backend, logger) as session:
        result = await session.call_tool(
            "create_document", {"doctype": "Customer", "data": {"customer_name": "Acme"}}
        )

    assert result.isError is False
    assert result.content[0].text.startswith("Created Customer: CUST-0001")


@pytest.mark.asyncio
async def test_unknown_tool_is_protocol_error(backend, logger):
    async with mcp_session(backend, logger) as session:
        with pytest.raises(McpError) as exc_info:
            await session.call_tool("drop_database", {})

    assert exc_info.value.error.code == METHOD_NOT_FOUND


@pytest.mark.asyncio
async def test_missing_argument_is_protocol_error(backend, logger):
    async with mcp_session(backend, logger) as session:
        with pytest.raises(McpError) as exc_info:
            await session.call_tool("get_documents", {})

    assert exc_info.value.error.code == INVALID_PARAMS
    assert backend.calls == []


@pytest.mark.asyncio
async def test_backend_failure_is_tool_result(backend, logger):
    backend.fail_with = ListError("Customer", "Request failed with status code 500")

    async with mcp_session(backend, logger) as session:
        result = await session.call_tool("get_documents", {"doctype": "Customer"})

    assert result.isError is True
    assert result.content[0].text.startswith("Failed to get Customer documents: ")


@pytest.mark.asyncio
async def test_unauthenticated_tool_is_tool_result(unauthenticated_backend, logger):
    async with mcp_session(unauthenticated_backend, logger) as session:
        result = await session.call_tool("get_doctypes", {})

    assert result.isError is True
    assert unauthenticated_backend.calls == []


@pytest.mark.asyncio
async def test_read_doctypes_resource(backend, logger):
    async with mcp_session(backend, logger) as session:
        result = await session.read_resource("erpnext://DocTypes")

    content = result.contents[0]
    assert content.mimeType == "application/json"
    assert json.loads(content.text) == {"doctypes": ["Customer", "Item"]}


@pytest.mark.asyncio
async def test_read_invalid_resource_is_protocol_error(backend, logger):
    async with mcp_session(backend, logger) as session:
        with pytest.raises(McpError, match="Invalid ERPNext resource URI"):
            await session.read_resource("erpnext://Item")
