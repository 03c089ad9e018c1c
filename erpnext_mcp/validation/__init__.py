"""Tool input models."""

from erpnext_mcp.validation.inputs import (
    CreateDocumentInput,
    GetDocTypeFieldsInput,
    GetDocumentsInput,
    RunReportInput,
    UpdateDocumentInput,
)

__all__ = [
    "GetDocTypeFieldsInput",
    "GetDocumentsInput",
    "CreateDocumentInput",
    "UpdateDocumentInput",
    "RunReportInput",
]
