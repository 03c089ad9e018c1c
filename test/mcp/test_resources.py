"""Tests for resource listing and URI-keyed resource reads."""

import json

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_REQUEST

from erpnext_mcp.exceptions import FetchError
from erpnext_mcp.mcp_server.auth import NOT_AUTHENTICATED_MESSAGE
from erpnext_mcp.mcp_server.resources import (
    DOCTYPES_URI,
    build_resource_templates,
    build_resources,
    parse_document_uri,
    read_resource,
)


def test_single_static_resource():
    resources = build_resources()

    assert len(resources) == 1
    assert str(resources[0].uri) == "erpnext://DocTypes"
    assert resources[0].name == "All DocTypes"
    assert resources[0].mimeType == "application/json"


def test_document_template():
    templates = build_resource_templates()

    assert [t.uriTemplate for t in templates] == ["erpnext://{doctype}/{name}"]


class TestParseDocumentUri:
    def test_simple(self):
        assert parse_document_uri("erpnext://Item/ITEM-001") == ("Item", "ITEM-001")

    def test_percent_decoded(self):
        assert parse_document_uri("erpnext://Sales%20Order/SO%2F001") == ("Sales Order", "SO/001")

    def test_name_keeps_remaining_slashes(self):
        assert parse_document_uri("erpnext://Item/a/b") == ("Item", "a/b")

    @pytest.mark.parametrize(
        "uri",
        ["erpnext://Item", "erpnext://Item/", "http://Item/ITEM-001", "erpnext:///ITEM-001"],
    )
    def test_rejects_other_forms(self, uri):
        assert parse_document_uri(uri) is None


class TestReadResource:
    @pytest.mark.asyncio
    async def test_document(self, backend, logger):
        text = await read_resource(backend, "erpnext://Item/ITEM-001", logger)

        assert backend.calls == [("get_document", "Item", "ITEM-001")]
        assert json.loads(text) == backend.document

    @pytest.mark.asyncio
    async def test_doctypes(self, backend, logger):
        text = await read_resource(backend, DOCTYPES_URI, logger)

        assert backend.calls == [("get_all_doctypes",)]
        assert json.loads(text) == {"doctypes": ["Customer", "Item"]}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("uri", ["erpnext://Item", "erpnext://doctypes", "file:///etc/passwd"])
    async def test_invalid_uri(self, backend, logger, uri):
        with pytest.raises(McpError) as exc_info:
            await read_resource(backend, uri, logger)

        assert exc_info.value.error.code == INVALID_REQUEST
        assert exc_info.value.error.message == f"Invalid ERPNext resource URI: {uri}"
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_empty_document_is_invalid_uri(self, backend, logger):
        backend.document = {}

        with pytest.raises(McpError, match="Invalid ERPNext resource URI"):
            await read_resource(backend, "erpnext://Item/ITEM-001", logger)

    @pytest.mark.asyncio
    async def test_fetch_failure(self, backend, logger):
        backend.fail_with = FetchError("Item", "ITEM-404", "Request failed with status code 404")

        with pytest.raises(McpError) as exc_info:
            await read_resource(backend, "erpnext://Item/ITEM-404", logger)

        assert exc_info.value.error.code == INVALID_REQUEST
        assert exc_info.value.error.message.startswith("Failed to fetch Item ITEM-404: ")

    @pytest.mark.asyncio
    async def test_unauthenticated(self, unauthenticated_backend, logger):
        with pytest.raises(McpError) as exc_info:
            await read_resource(unauthenticated_backend, "erpnext://Item/ITEM-001", logger)

        assert exc_info.value.error.code == INVALID_REQUEST
        assert exc_info.value.error.message == NOT_AUTHENTICATED_MESSAGE
        assert unauthenticated_backend.calls == []
