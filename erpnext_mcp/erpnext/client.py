"""Async REST client for the ERPNext/Frappe API.

All public operations re-wrap transport errors, non-2xx responses and
malformed bodies into the backend exceptions from ``erpnext_mcp.exceptions``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

import httpx

from erpnext_mcp.config import ERPNextSettings
from erpnext_mcp.erpnext.doctypes import (
    DocTypeSource,
    ResourceListSource,
    SearchLinkSource,
    StaticDocTypeSource,
    resolve_doctypes,
)
from erpnext_mcp.erpnext.errors import describe_failure
from erpnext_mcp.exceptions import (
    ConfigurationError,
    CreateError,
    FetchError,
    ListError,
    ReportError,
    UpdateError,
)
from erpnext_mcp.logger import Logger, session_logger

RESOURCE_PREFIX = "/api/resource"
REPORT_RUN_ENDPOINT = "/api/method/frappe.desk.query_report.run"

# Errors a single backend call may raise before being re-wrapped
_CALL_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError)


def _encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def _resource_path(doctype: str, name: Optional[str] = None) -> str:
    path = f"{RESOURCE_PREFIX}/{quote(doctype, safe='')}"
    if name is not None:
        path += f"/{quote(name, safe='')}"
    return path


def _field(body: Any, key: str) -> Any:
    if not isinstance(body, dict):
        raise TypeError(f"Expected a JSON object in response, got {type(body).__name__}")
    return body[key]


class ERPNextClient:
    """Holds connection state for one ERPNext site and performs REST calls.

    The authenticated flag is derived once from the settings and never changes.
    """

    def __init__(
        self,
        settings: ERPNextSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[Logger] = None,
    ):
        if not settings.url:
            raise ConfigurationError("ERPNEXT_URL environment variable is required")

        self.logger = logger or session_logger
        self._base_url = settings.url
        self._authenticated = settings.has_credentials

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._authenticated:
            headers["Authorization"] = f"token {settings.api_key}:{settings.api_secret}"
        self._headers = headers

        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=settings.timeout_seconds,
            transport=transport,
        )
        self._doctype_sources: List[DocTypeSource] = [
            ResourceListSource(self._http),
            SearchLinkSource(self._http),
            StaticDocTypeSource(),
        ]

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ERPNextClient":
        """Construct from ERPNEXT_* environment variables.

        Raises:
            ConfigurationError: if ERPNEXT_URL is missing (before any network activity)
        """
        return cls(ERPNextSettings.from_env(), **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def is_authenticated(self) -> bool:
        return self._authenticated

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ERPNextClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._http.request(method, path, **kwargs)
        response.raise_for_status()
        return response.json()

    async def get_document(self, doctype: str, name: str) -> Any:
        """GET /api/resource/{doctype}/{name} and return its ``data``."""
        try:
            body = await self._request_json("GET", _resource_path(doctype, name))
            return _field(body, "data")
        except _CALL_ERRORS as exc:
            raise FetchError(doctype, name, describe_failure(exc)) from exc

    async def get_doc_list(
        self,
        doctype: str,
        filters: Optional[Dict[str, Any]] = None,
        fields: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        """List documents of a doctype.

        A falsy ``limit`` (including 0) is treated as absent and leaves the
        page length to the backend default.
        """
        params: Dict[str, Any] = {}
        if fields:
            params["fields"] = _encode(list(fields))
        if filters is not None:
            params["filters"] = _encode(filters)
        if limit:
            params["limit_page_length"] = limit

        try:
            body = await self._request_json("GET", _resource_path(doctype), params=params)
            return _field(body, "data")
        except _CALL_ERRORS as exc:
            raise ListError(doctype, describe_failure(exc)) from exc

    async def create_document(self, doctype: str, doc: Dict[str, Any]) -> Any:
        try:
            body = await self._request_json("POST", _resource_path(doctype), json={"data": doc})
            return _field(body, "data")
        except _CALL_ERRORS as exc:
            raise CreateError(doctype, describe_failure(exc)) from exc

    async def update_document(self, doctype: str, name: str, doc: Dict[str, Any]) -> Any:
        try:
            body = await self._request_json(
                "PUT", _resource_path(doctype, name), json={"data": doc}
            )
            return _field(body, "data")
        except _CALL_ERRORS as exc:
            raise UpdateError(doctype, name, describe_failure(exc)) from exc

    async def run_report(self, report_name: str, filters: Optional[Dict[str, Any]] = None) -> Any:
        """Run a query report. Report payloads live under ``message``, not ``data``."""
        params: Dict[str, Any] = {"report_name": report_name}
        if filters is not None:
            params["filters"] = _encode(filters)

        try:
            body = await self._request_json("GET", REPORT_RUN_ENDPOINT, params=params)
            return _field(body, "message")
        except _CALL_ERRORS as exc:
            raise ReportError(report_name, describe_failure(exc)) from exc

    async def get_all_doctypes(self) -> List[str]:
        """Names of all DocTypes. Never raises; degrades to a static list."""
        return await resolve_doctypes(self._doctype_sources, self.logger)
