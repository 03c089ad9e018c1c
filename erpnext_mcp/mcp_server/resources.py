"""MCP resources: the DocType list and individual documents by URI."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple
from urllib.parse import unquote

from mcp.types import INTERNAL_ERROR, INVALID_REQUEST, Resource, ResourceTemplate

from erpnext_mcp.exceptions import BackendError
from erpnext_mcp.logger import Logger
from erpnext_mcp.mcp_server.auth import require_resource_auth
from erpnext_mcp.mcp_server.responses import _json_dump, _protocol_error
from erpnext_mcp.mcp_server.tool_types import ERPNextBackend

JSON_MIME_TYPE = "application/json"
DOCTYPES_URI = "erpnext://DocTypes"
DOCUMENT_URI_TEMPLATE = "erpnext://{doctype}/{name}"

_DOCUMENT_URI = re.compile(r"^erpnext://([^/]+)/(.+)$")


def build_resources() -> List[Resource]:
    return [
        Resource(
            uri=DOCTYPES_URI,
            name="All DocTypes",
            mimeType=JSON_MIME_TYPE,
            description="List of all available DocTypes in the ERPNext instance",
        )
    ]


def build_resource_templates() -> List[ResourceTemplate]:
    return [
        ResourceTemplate(
            uriTemplate=DOCUMENT_URI_TEMPLATE,
            name="ERPNext Document",
            mimeType=JSON_MIME_TYPE,
            description="Fetch an ERPNext document by doctype and name",
        )
    ]


def parse_document_uri(uri: str) -> Optional[Tuple[str, str]]:
    """Split ``erpnext://{doctype}/{name}`` into percent-decoded parts.

    The doctype runs up to the first ``/``; the rest, slashes included, is the name.
    """
    match = _DOCUMENT_URI.match(uri)
    if match is None:
        return None
    return unquote(match.group(1)), unquote(match.group(2))


async def read_resource(client: ERPNextBackend, uri: str, logger: Logger) -> str:
    """Resolve a resource URI to its JSON text.

    Raises:
        McpError: INVALID_REQUEST when unauthenticated, the URI is not
            recognised, the document cannot be fetched or the result is empty;
            INTERNAL_ERROR when the DocType list cannot be produced.
    """
    require_resource_auth(client)
    logger.info("Resource read", uri=uri)

    result = None
    if uri == DOCTYPES_URI:
        try:
            result = {"doctypes": await client.get_all_doctypes()}
        except Exception as exc:  # pragma: no cover - get_all_doctypes degrades instead of raising
            logger.error("DocType listing failed", uri=uri, error=str(exc))
            raise _protocol_error(
                INTERNAL_ERROR, f"Failed to fetch DocTypes: {str(exc) or 'Unknown error'}"
            ) from exc
    else:
        parts = parse_document_uri(uri)
        if parts is not None:
            doctype, name = parts
            try:
                result = await client.get_document(doctype, name)
            except BackendError as exc:
                logger.warning("Document fetch failed", doctype=doctype, name=name, error=str(exc))
                raise _protocol_error(
                    INVALID_REQUEST, f"Failed to fetch {doctype} {name}: {exc}"
                ) from exc

    if not result:
        raise _protocol_error(INVALID_REQUEST, f"Invalid ERPNext resource URI: {uri}")

    return _json_dump(result)
