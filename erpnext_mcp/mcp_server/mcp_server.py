"""ERPNext MCP server.

Exposes an ERPNext site through the Model Context Protocol:

Resources:
- erpnext://DocTypes          list of every DocType name
- erpnext://{doctype}/{name}  one document as JSON

Tools: get_doctypes, get_doctype_fields, get_documents, create_document,
update_document, run_report.

Error model:
- Structural problems (unknown tool, missing arguments, bad resource URI,
  unauthenticated resource reads) are JSON-RPC errors.
- Backend failures and unauthenticated tool calls are tool results with
  isError=true.

The backend client is passed in explicitly; nothing here is a module-level
singleton.
"""

from __future__ import annotations

from typing import Any, List, Optional

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents

from erpnext_mcp import __version__
from erpnext_mcp.logger import Logger, session_logger
from erpnext_mcp.mcp_server.resources import (
    JSON_MIME_TYPE,
    build_resource_templates,
    build_resources,
    read_resource,
)
from erpnext_mcp.mcp_server.routing import dispatch_tool_call
from erpnext_mcp.mcp_server.tool_schemas import build_tools
from erpnext_mcp.mcp_server.tool_types import ERPNextBackend

SERVER_NAME = "erpnext-server"


def create_server(client: ERPNextBackend, logger: Optional[Logger] = None) -> Server:
    """Build an MCP server whose handlers all use ``client``."""
    logger = logger or session_logger
    app: Server = Server(SERVER_NAME, version=__version__)

    @app.list_resources()
    async def handle_list_resources() -> List[types.Resource]:
        return build_resources()

    @app.list_resource_templates()
    async def handle_list_resource_templates() -> List[types.ResourceTemplate]:
        return build_resource_templates()

    @app.read_resource()
    async def handle_read_resource(uri: Any) -> List[ReadResourceContents]:
        text = await read_resource(client, str(uri), logger)
        return [ReadResourceContents(content=text, mime_type=JSON_MIME_TYPE)]

    @app.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return build_tools()

    # Registered directly rather than through @app.call_tool(): the decorator
    # turns every exception into an isError result, but missing arguments and
    # unknown tools must reach the client as JSON-RPC errors.
    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await dispatch_tool_call(
            name=request.params.name,
            arguments=dict(request.params.arguments or {}),
            client=client,
            logger=logger,
        )
        return types.ServerResult(result)

    app.request_handlers[types.CallToolRequest] = handle_call_tool
    return app
