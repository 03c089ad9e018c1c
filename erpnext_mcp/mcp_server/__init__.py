"""MCP request adapter for the ERPNext backend."""

from erpnext_mcp.mcp_server.mcp_server import SERVER_NAME, create_server
from erpnext_mcp.mcp_server.routing import HANDLERS, dispatch_tool_call

__all__ = ["SERVER_NAME", "create_server", "dispatch_tool_call", "HANDLERS"]
