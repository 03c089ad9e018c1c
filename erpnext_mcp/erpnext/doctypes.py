"""DocType discovery as an ordered fallback chain.

Listing every DocType is needed for resource discovery but not for document
operations, so discovery degrades instead of failing: each source is tried in
order, failures are logged, and the chain ends in a static list that cannot
fail.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import List, Sequence

import httpx

from erpnext_mcp.erpnext.errors import describe_failure
from erpnext_mcp.logger import Logger

DOCTYPE_RESOURCE_PATH = "/api/resource/DocType"
SEARCH_LINK_ENDPOINT = "/api/method/frappe.desk.search.search_link"
DOCTYPE_PAGE_LENGTH = 500

COMMON_DOCTYPES: List[str] = [
    "Customer",
    "Supplier",
    "Item",
    "Sales Order",
    "Purchase Order",
    "Sales Invoice",
    "Purchase Invoice",
    "Employee",
    "Lead",
    "Opportunity",
    "Quotation",
    "Payment Entry",
    "Journal Entry",
    "Stock Entry",
]


class DocTypeSource(ABC):
    """One way of obtaining the list of DocType names."""

    name: str = "source"

    @abstractmethod
    async def fetch(self) -> List[str]:
        """Return DocType names; raise on failure."""


class ResourceListSource(DocTypeSource):
    """Standard REST listing of the DocType doctype."""

    name = "resource_list"

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def fetch(self) -> List[str]:
        response = await self._http.get(
            DOCTYPE_RESOURCE_PATH,
            params={
                "fields": json.dumps(["name"], separators=(",", ":")),
                "limit_page_length": DOCTYPE_PAGE_LENGTH,
            },
        )
        response.raise_for_status()
        body = response.json()
        data = body.get("data") if isinstance(body, dict) else None
        if not data:
            return []
        return [item["name"] for item in data]


class SearchLinkSource(DocTypeSource):
    """Link-field search endpoint, available where DocType listing is restricted."""

    name = "search_link"

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def fetch(self) -> List[str]:
        response = await self._http.get(
            SEARCH_LINK_ENDPOINT,
            params={"doctype": "DocType", "txt": "", "limit": DOCTYPE_PAGE_LENGTH},
        )
        response.raise_for_status()
        body = response.json()
        results = body.get("results") if isinstance(body, dict) else None
        if not results:
            return []
        return [item["value"] for item in results]


class StaticDocTypeSource(DocTypeSource):
    """Hardcoded list of common DocTypes. Never fails."""

    name = "static"

    def __init__(self, doctypes: Sequence[str] = COMMON_DOCTYPES):
        self._doctypes = list(doctypes)

    async def fetch(self) -> List[str]:
        return list(self._doctypes)


async def resolve_doctypes(sources: Sequence[DocTypeSource], logger: Logger) -> List[str]:
    """Return the result of the first source that succeeds.

    Returns an empty list only if every source fails and the chain has no
    static terminal source.
    """
    for source in sources:
        try:
            doctypes = await source.fetch()
        except Exception as exc:
            logger.warning(
                "DocType source failed, trying next",
                source=source.name,
                error_type=type(exc).__name__,
                error=describe_failure(exc),
            )
            continue
        logger.debug("DocTypes resolved", source=source.name, count=len(doctypes))
        return doctypes
    return []
