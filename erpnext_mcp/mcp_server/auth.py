"""Authentication gate for MCP handlers.

The ERPNext credentials are fixed at startup, so the gate is a flag check.
Listing tools and resources is always allowed; everything that reaches the
backend is refused when the client is unauthenticated, using the error
convention of the request kind.
"""

from __future__ import annotations

from typing import Optional

from mcp.types import INVALID_REQUEST

from erpnext_mcp.mcp_server.responses import _protocol_error, _tool_error
from erpnext_mcp.mcp_server.tool_types import ERPNextBackend, ToolResponse

NOT_AUTHENTICATED_MESSAGE = (
    "Not authenticated with ERPNext. Please configure API key authentication."
)


def verify_tool_auth(client: ERPNextBackend) -> Optional[ToolResponse]:
    """Return a tool-result error if the client is unauthenticated, else None."""
    if client.is_authenticated():
        return None
    return _tool_error(NOT_AUTHENTICATED_MESSAGE)


def require_resource_auth(client: ERPNextBackend) -> None:
    """Raise an INVALID_REQUEST protocol error if the client is unauthenticated."""
    if not client.is_authenticated():
        raise _protocol_error(INVALID_REQUEST, NOT_AUTHENTICATED_MESSAGE)
