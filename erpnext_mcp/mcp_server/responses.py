"""MCP server response helpers.

Two kinds of failure leave the adapter, and they must stay distinct:
- protocol errors (``McpError``) for malformed requests: unknown tool,
  missing arguments, bad resource URI. The client receives a JSON-RPC error.
- tool-result errors (``CallToolResult(isError=True)``) for well-formed calls
  whose backend action failed.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, CallToolResult, ErrorData, TextContent
from pydantic import ValidationError as PydanticValidationError


def _json_dump(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _text(text: str) -> TextContent:
    return TextContent(type="text", text=text)


def _success(text: str) -> CallToolResult:
    return CallToolResult(content=[_text(text)], isError=False)


def _success_json(payload: Any, heading: Optional[str] = None) -> CallToolResult:
    body = _json_dump(payload)
    if heading:
        body = f"{heading}\n\n{body}"
    return _success(body)


def _tool_error(message: str) -> CallToolResult:
    return CallToolResult(content=[_text(message)], isError=True)


def _protocol_error(code: int, message: str, data: Any = None) -> McpError:
    return McpError(ErrorData(code=code, message=message, data=data))


def _validation_error(exc: PydanticValidationError, summary: str) -> McpError:
    """Convert a tool input validation failure into an INVALID_PARAMS error."""
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    missing = [str(e["loc"][0]) for e in errors if e["type"] == "missing" and e["loc"]]
    invalid = [str(e["loc"][0]) for e in errors if e["type"] != "missing" and e["loc"]]

    message = summary
    if missing:
        message += f". MISSING REQUIRED FIELDS: {', '.join(missing)}"
    if invalid:
        message += f". INVALID FIELDS: {', '.join(invalid)}"

    return _protocol_error(
        INVALID_PARAMS,
        message,
        data={"validation_errors": [{"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]} for e in errors]},
    )
