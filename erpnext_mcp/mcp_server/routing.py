"""Tool routing and dispatch for MCP server."""

from __future__ import annotations

from typing import Any, Dict

from mcp.types import METHOD_NOT_FOUND
from pydantic import ValidationError as PydanticValidationError

from erpnext_mcp.logger import Logger
from erpnext_mcp.mcp_server.auth import verify_tool_auth
from erpnext_mcp.mcp_server.responses import _protocol_error, _tool_error, _validation_error
from erpnext_mcp.mcp_server.tool_types import ERPNextBackend, ToolHandler, ToolResponse
from erpnext_mcp.mcp_server.tools.doctypes import _tool_get_doctype_fields, _tool_get_doctypes
from erpnext_mcp.mcp_server.tools.documents import (
    _tool_create_document,
    _tool_get_documents,
    _tool_update_document,
)
from erpnext_mcp.mcp_server.tools.reports import _tool_run_report


HANDLERS: Dict[str, ToolHandler] = {
    "get_doctypes": _tool_get_doctypes,
    "get_doctype_fields": _tool_get_doctype_fields,
    "get_documents": _tool_get_documents,
    "create_document": _tool_create_document,
    "update_document": _tool_update_document,
    "run_report": _tool_run_report,
}

# Summary used in INVALID_PARAMS errors when a tool's required arguments are missing
REQUIRED_ARGUMENTS: Dict[str, str] = {
    "get_doctype_fields": "Doctype is required",
    "get_documents": "Doctype is required",
    "create_document": "Doctype and data are required",
    "update_document": "Doctype, name, and data are required",
    "run_report": "Report name is required",
}


async def dispatch_tool_call(
    *,
    name: str,
    arguments: Dict[str, Any],
    client: ERPNextBackend,
    logger: Logger,
) -> ToolResponse:
    """Run one tool call.

    Raises:
        McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS for
            missing or malformed arguments. Backend failures are returned as
            tool results with ``isError`` set.
    """
    logger.info("Tool invocation started", tool=name, args_keys=list(arguments.keys()))

    handler = HANDLERS.get(name)
    if handler is None:
        logger.error("Unknown tool requested", tool=name, available_tools=list(HANDLERS.keys()))
        raise _protocol_error(METHOD_NOT_FOUND, f"Unknown tool: {name}")

    auth_error = verify_tool_auth(client)
    if auth_error is not None:
        logger.warning("Tool refused, ERPNext credentials not configured", tool=name)
        return auth_error

    try:
        result = await handler(client, arguments)
    except PydanticValidationError as exc:
        logger.error(
            "Validation error",
            tool=name,
            error_count=len(exc.errors()),
            errors=[{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()],
        )
        raise _validation_error(exc, REQUIRED_ARGUMENTS.get(name, "Invalid arguments")) from exc
    except Exception as exc:  # pragma: no cover
        logger.error(
            "Unexpected tool failure",
            tool=name,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return _tool_error(f"Unexpected error: {exc}")

    if result.isError:
        logger.warning("Tool completed with error", tool=name)
    else:
        logger.info("Tool completed successfully", tool=name)
    return result
