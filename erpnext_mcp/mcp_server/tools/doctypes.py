"""DocType discovery tool handlers."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from erpnext_mcp.exceptions import BackendError
from erpnext_mcp.mcp_server.responses import _success_json, _tool_error
from erpnext_mcp.mcp_server.tool_types import ERPNextBackend, ToolResponse
from erpnext_mcp.validation import GetDocTypeFieldsInput

SAMPLE_LENGTH = 50


def _value_kind(value: Any) -> str:
    # Mirrors JSON value kinds: null, arrays and objects all report "object".
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _sample(value: Any) -> Optional[str]:
    if value is None:
        return None
    return _stringify(value)[:SAMPLE_LENGTH] or None


def infer_field_descriptors(document: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Describe a document's fields from its own keys and values."""
    return [
        {"fieldname": field, "value": _value_kind(value), "sample": _sample(value)}
        for field, value in document.items()
    ]


async def _tool_get_doctypes(client: ERPNextBackend, arguments: Dict[str, Any]) -> ToolResponse:
    try:
        doctypes = await client.get_all_doctypes()
    except Exception as exc:  # pragma: no cover - get_all_doctypes degrades instead of raising
        return _tool_error(f"Failed to get DocTypes: {str(exc) or 'Unknown error'}")
    return _success_json(doctypes)


async def _tool_get_doctype_fields(
    client: ERPNextBackend, arguments: Dict[str, Any]
) -> ToolResponse:
    """Infer a DocType's fields from one sample document.

    Fields that are unset on the sample may be absent from the result; there
    is no schema introspection behind this.
    """
    payload = GetDocTypeFieldsInput.model_validate(arguments)
    doctype = payload.doctype

    try:
        documents = await client.get_doc_list(doctype, {}, ["*"], 1)
    except BackendError as exc:
        return _tool_error(f"Failed to get fields for {doctype}: {exc}")

    if not isinstance(documents, list):
        return _tool_error(
            f"Failed to get fields for {doctype}: unexpected response shape {type(documents).__name__}"
        )
    if not documents:
        return _tool_error(f"No documents found for {doctype}. Cannot determine fields.")

    sample = documents[0]
    if not isinstance(sample, dict):
        return _tool_error(
            f"Failed to get fields for {doctype}: unexpected document shape {type(sample).__name__}"
        )
    return _success_json(infer_field_descriptors(sample))
