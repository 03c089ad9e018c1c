"""MCP tool schemas (list_tools) for the ERPNext service."""

from __future__ import annotations

from typing import List

from mcp.types import Tool

_DOCTYPE_PROPERTY = {
    "type": "string",
    "description": "ERPNext DocType (e.g., Customer, Item)",
}


def build_tools() -> List[Tool]:
    return [
        Tool(
            name="get_doctypes",
            description="Get a list of all available DocTypes",
            inputSchema={"type": "object", "properties": {}},
        ),
        Tool(
            name="get_doctype_fields",
            description="Get fields list for a specific DocType",
            inputSchema={
                "type": "object",
                "properties": {"doctype": _DOCTYPE_PROPERTY},
                "required": ["doctype"],
            },
        ),
        Tool(
            name="get_documents",
            description="Get a list of documents for a specific doctype",
            inputSchema={
                "type": "object",
                "properties": {
                    "doctype": _DOCTYPE_PROPERTY,
                    "fields": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Fields to include (optional)",
                    },
                    "filters": {
                        "type": "object",
                        "additionalProperties": True,
                        "description": "Filters in the format {field: value} (optional)",
                    },
                    "limit": {
                        "type": "number",
                        "description": "Maximum number of documents to return (optional)",
                    },
                },
                "required": ["doctype"],
            },
        ),
        Tool(
            name="create_document",
            description="Create a new document in ERPNext",
            inputSchema={
                "type": "object",
                "properties": {
                    "doctype": _DOCTYPE_PROPERTY,
                    "data": {
                        "type": "object",
                        "additionalProperties": True,
                        "description": "Document data",
                    },
                },
                "required": ["doctype", "data"],
            },
        ),
        Tool(
            name="update_document",
            description="Update an existing document in ERPNext",
            inputSchema={
                "type": "object",
                "properties": {
                    "doctype": _DOCTYPE_PROPERTY,
                    "name": {"type": "string", "description": "Document name/ID"},
                    "data": {
                        "type": "object",
                        "additionalProperties": True,
                        "description": "Document data to update",
                    },
                },
                "required": ["doctype", "name", "data"],
            },
        ),
        Tool(
            name="run_report",
            description="Run an ERPNext report",
            inputSchema={
                "type": "object",
                "properties": {
                    "report_name": {"type": "string", "description": "Name of the report"},
                    "filters": {
                        "type": "object",
                        "additionalProperties": True,
                        "description": "Report filters (optional)",
                    },
                },
                "required": ["report_name"],
            },
        ),
    ]
