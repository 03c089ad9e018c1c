"""Pytest configuration and fixtures

Provides shared fixtures for all tests:
- ERPNext clients wired to an in-process httpx.MockTransport (no network)
- a FakeBackend standing in for the client in adapter tests
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from erpnext_mcp.config import ERPNextSettings
from erpnext_mcp.erpnext import ERPNextClient
from erpnext_mcp.exceptions import BackendError
from erpnext_mcp.logger import Logger, session_logger

TEST_URL = "https://erp.example.com"
TEST_API_KEY = "test-key"
TEST_API_SECRET = "test-secret"


# ============================================================================
# BACKEND CLIENT (HTTP LEVEL)
# ============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def logger() -> Logger:
    return session_logger


@pytest.fixture
def settings() -> ERPNextSettings:
    return ERPNextSettings(url=TEST_URL, api_key=TEST_API_KEY, api_secret=TEST_API_SECRET)


@pytest.fixture
def make_client(settings, logger):
    """Factory: ERPNextClient whose HTTP calls are answered by ``handler``.

    Returns (client, transport) so tests can inspect the emitted requests.
    """

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        client_settings: Optional[ERPNextSettings] = None,
        client_logger: Optional[Logger] = None,
    ):
        transport = RecordingTransport(handler)
        client = ERPNextClient(
            client_settings or settings, transport=transport, logger=client_logger or logger
        )
        return client, transport

    return _make


# ============================================================================
# ADAPTER LEVEL
# ============================================================================


class FakeBackend:
    """Stand-in for ERPNextClient that records calls and returns canned data.

    Set ``fail_with`` to a BackendError to make every backend call raise it.
    """

    def __init__(self, authenticated: bool = True):
        self.authenticated = authenticated
        self.calls: List[tuple] = []
        self.fail_with: Optional[BackendError] = None

        self.document: Any = {"name": "ITEM-001", "item_name": "Widget"}
        self.doc_list: List[Any] = [{"name": "CUST-0001"}, {"name": "CUST-0002"}]
        self.created: Any = {"name": "CUST-0001", "customer_name": "Acme"}
        self.updated: Any = {"name": "CUST-0001", "customer_name": "Acme Ltd"}
        self.report: Any = {"columns": ["account"], "result": [["Cash"]]}
        self.doctypes: List[str] = ["Customer", "Item"]

    def is_authenticated(self) -> bool:
        return self.authenticated

    def _call(self, *call: Any) -> None:
        self.calls.append(call)
        if self.fail_with is not None:
            raise self.fail_with

    async def get_document(self, doctype: str, name: str) -> Any:
        self._call("get_document", doctype, name)
        return self.document

    async def get_doc_list(self, doctype, filters=None, fields=None, limit=None) -> List[Any]:
        self._call("get_doc_list", doctype, filters, fields, limit)
        return self.doc_list

    async def create_document(self, doctype: str, doc: Dict[str, Any]) -> Any:
        self._call("create_document", doctype, doc)
        return self.created

    async def update_document(self, doctype: str, name: str, doc: Dict[str, Any]) -> Any:
        self._call("update_document", doctype, name, doc)
        return self.updated

    async def run_report(self, report_name: str, filters=None) -> Any:
        self._call("run_report", report_name, filters)
        return self.report

    async def get_all_doctypes(self) -> List[str]:
        self.calls.append(("get_all_doctypes",))
        return self.doctypes


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def unauthenticated_backend() -> FakeBackend:
    return FakeBackend(authenticated=False)
