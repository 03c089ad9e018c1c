"""Custom exceptions for the ERPNext MCP server."""

from erpnext_mcp.exceptions.base import ConfigurationError, ERPNextMCPError
from erpnext_mcp.exceptions.backend import (
    BackendError,
    CreateError,
    FetchError,
    ListError,
    ReportError,
    UpdateError,
)

__all__ = [
    "ERPNextMCPError",
    "ConfigurationError",
    "BackendError",
    "FetchError",
    "ListError",
    "CreateError",
    "UpdateError",
    "ReportError",
]
