"""ERPNext backend client."""

from erpnext_mcp.erpnext.client import ERPNextClient
from erpnext_mcp.erpnext.doctypes import (
    COMMON_DOCTYPES,
    DocTypeSource,
    ResourceListSource,
    SearchLinkSource,
    StaticDocTypeSource,
    resolve_doctypes,
)

__all__ = [
    "ERPNextClient",
    "COMMON_DOCTYPES",
    "DocTypeSource",
    "ResourceListSource",
    "SearchLinkSource",
    "StaticDocTypeSource",
    "resolve_doctypes",
]
