"""Base exception classes for the ERPNext MCP server.

Every error carries a machine-readable ``code``, a human-readable ``message``
and an optional ``details`` mapping, so handlers can log and map them without
inspecting exception types.
"""

from typing import Any, Dict, Optional


class ERPNextMCPError(Exception):
    """Root of the project exception hierarchy."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ERPNextMCPError):
    """Raised when required configuration is missing or malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)
