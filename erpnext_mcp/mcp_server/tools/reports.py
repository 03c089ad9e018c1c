"""Report tool handler."""

from __future__ import annotations

from typing import Any, Dict

from erpnext_mcp.exceptions import BackendError
from erpnext_mcp.mcp_server.responses import _success_json, _tool_error
from erpnext_mcp.mcp_server.tool_types import ERPNextBackend, ToolResponse
from erpnext_mcp.validation import RunReportInput


async def _tool_run_report(client: ERPNextBackend, arguments: Dict[str, Any]) -> ToolResponse:
    payload = RunReportInput.model_validate(arguments)

    try:
        result = await client.run_report(payload.report_name, payload.filters)
    except BackendError as exc:
        return _tool_error(f"Failed to run report {payload.report_name}: {exc}")
    return _success_json(result)
