"""Document list/create/update tool handlers."""

from __future__ import annotations

from typing import Any, Dict

from erpnext_mcp.exceptions import BackendError
from erpnext_mcp.mcp_server.responses import _success_json, _tool_error
from erpnext_mcp.mcp_server.tool_types import ERPNextBackend, ToolResponse
from erpnext_mcp.validation import CreateDocumentInput, GetDocumentsInput, UpdateDocumentInput


async def _tool_get_documents(client: ERPNextBackend, arguments: Dict[str, Any]) -> ToolResponse:
    payload = GetDocumentsInput.model_validate(arguments)

    try:
        documents = await client.get_doc_list(
            payload.doctype, payload.filters, payload.fields, payload.limit
        )
    except BackendError as exc:
        return _tool_error(f"Failed to get {payload.doctype} documents: {exc}")
    return _success_json(documents)


async def _tool_create_document(client: ERPNextBackend, arguments: Dict[str, Any]) -> ToolResponse:
    payload = CreateDocumentInput.model_validate(arguments)

    try:
        result = await client.create_document(payload.doctype, payload.data)
    except BackendError as exc:
        return _tool_error(f"Failed to create {payload.doctype}: {exc}")

    name = result.get("name") if isinstance(result, dict) else None
    return _success_json(result, heading=f"Created {payload.doctype}: {name}")


async def _tool_update_document(client: ERPNextBackend, arguments: Dict[str, Any]) -> ToolResponse:
    payload = UpdateDocumentInput.model_validate(arguments)

    try:
        result = await client.update_document(payload.doctype, payload.name, payload.data)
    except BackendError as exc:
        return _tool_error(f"Failed to update {payload.doctype} {payload.name}: {exc}")
    return _success_json(result, heading=f"Updated {payload.doctype} {payload.name}")
