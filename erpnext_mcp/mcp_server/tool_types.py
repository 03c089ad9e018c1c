from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol, Sequence

from mcp.types import CallToolResult


class ERPNextBackend(Protocol):
    """The client surface the adapter depends on."""

    def is_authenticated(self) -> bool: ...

    async def get_document(self, doctype: str, name: str) -> Any: ...

    async def get_doc_list(
        self,
        doctype: str,
        filters: Optional[Dict[str, Any]] = None,
        fields: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ) -> List[Any]: ...

    async def create_document(self, doctype: str, doc: Dict[str, Any]) -> Any: ...

    async def update_document(self, doctype: str, name: str, doc: Dict[str, Any]) -> Any: ...

    async def run_report(self, report_name: str, filters: Optional[Dict[str, Any]] = None) -> Any: ...

    async def get_all_doctypes(self) -> List[str]: ...


ToolResponse = CallToolResult
ToolHandler = Callable[[ERPNextBackend, Dict[str, Any]], Awaitable[ToolResponse]]
