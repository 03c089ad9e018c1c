"""Backend (ERPNext REST) failures.

The client never lets transport exceptions escape: every failure is re-wrapped
into one of these, prefixed with the attempted action and its target.
"""

from typing import Any, Dict, Optional

from erpnext_mcp.exceptions.base import ERPNextMCPError

UNKNOWN_ERROR = "Unknown error"


class BackendError(ERPNextMCPError):
    """Base class for failed calls against the ERPNext API."""

    def __init__(
        self,
        code: str,
        action: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.reason = reason or UNKNOWN_ERROR
        super().__init__(code=code, message=f"{action}: {self.reason}", details=details)


class FetchError(BackendError):
    def __init__(self, doctype: str, name: str, reason: str):
        self.doctype = doctype
        self.name = name
        super().__init__(
            code="FETCH_FAILED",
            action=f"Failed to get {doctype} {name}",
            reason=reason,
            details={"doctype": doctype, "name": name},
        )


class ListError(BackendError):
    def __init__(self, doctype: str, reason: str):
        self.doctype = doctype
        super().__init__(
            code="LIST_FAILED",
            action=f"Failed to get {doctype} list",
            reason=reason,
            details={"doctype": doctype},
        )


class CreateError(BackendError):
    def __init__(self, doctype: str, reason: str):
        self.doctype = doctype
        super().__init__(
            code="CREATE_FAILED",
            action=f"Failed to create {doctype}",
            reason=reason,
            details={"doctype": doctype},
        )


class UpdateError(BackendError):
    def __init__(self, doctype: str, name: str, reason: str):
        self.doctype = doctype
        self.name = name
        super().__init__(
            code="UPDATE_FAILED",
            action=f"Failed to update {doctype} {name}",
            reason=reason,
            details={"doctype": doctype, "name": name},
        )


class ReportError(BackendError):
    def __init__(self, report_name: str, reason: str):
        self.report_name = report_name
        super().__init__(
            code="REPORT_FAILED",
            action=f"Failed to run report {report_name}",
            reason=reason,
            details={"report_name": report_name},
        )
