"""MCP server exposing an ERPNext site's documents, lists and reports."""

__version__ = "0.1.0"
