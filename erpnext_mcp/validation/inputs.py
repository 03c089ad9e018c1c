"""Input models for MCP server tools.

Only presence and basic shape are checked; the meaning of doctypes, fields
and filters is left to ERPNext.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GetDocTypeFieldsInput(BaseModel):
    """Input for get_doctype_fields.

    Args:
        doctype: ERPNext DocType whose fields are inferred from a sample document
    """

    model_config = ConfigDict(extra="ignore")  # Ignore extra fields from MCP

    doctype: str = Field(min_length=1)


class GetDocumentsInput(BaseModel):
    """Input for get_documents.

    Args:
        doctype: ERPNext DocType to list
        fields: Fields to include; empty or absent means the backend default
        filters: Filters in the format {field: value}
        limit: Maximum number of documents; 0 or absent means the backend default
    """

    model_config = ConfigDict(extra="ignore")

    doctype: str = Field(min_length=1)
    fields: Optional[List[str]] = None
    filters: Optional[Dict[str, Any]] = None
    limit: Optional[int] = None


class CreateDocumentInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    doctype: str = Field(min_length=1)
    data: Dict[str, Any]


class UpdateDocumentInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    doctype: str = Field(min_length=1)
    name: str = Field(min_length=1)
    data: Dict[str, Any]


class RunReportInput(BaseModel):
    """Input for run_report.

    Args:
        report_name: Name of the ERPNext query report
        filters: Report filters
    """

    model_config = ConfigDict(extra="ignore")

    report_name: str = Field(min_length=1)
    filters: Optional[Dict[str, Any]] = None
