"""Tests for the command-line entrypoint."""

import pytest

from erpnext_mcp.main_mcp import build_parser, main


def test_parser_defaults(monkeypatch):
    for name in ("ERPNEXT_MCP_TRANSPORT", "ERPNEXT_MCP_HOST", "ERPNEXT_MCP_PORT", "ERPNEXT_MCP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    args = build_parser().parse_args([])

    assert args.transport == "stdio"
    assert args.host == "0.0.0.0"
    assert args.port == 8010
    assert args.log_level == "INFO"


def test_parser_reads_environment(monkeypatch):
    monkeypatch.setenv("ERPNEXT_MCP_TRANSPORT", "http")
    monkeypatch.setenv("ERPNEXT_MCP_PORT", "9100")

    args = build_parser().parse_args(["--log-level", "debug"])

    assert args.transport == "http"
    assert args.port == 9100
    assert args.log_level == "DEBUG"


def test_parser_rejects_unknown_transport():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--transport", "websocket"])


def test_missing_url_exits_with_error(monkeypatch):
    monkeypatch.delenv("ERPNEXT_URL", raising=False)

    assert main([]) == 1


def test_invalid_port_env_is_a_usage_error(monkeypatch):
    monkeypatch.setenv("ERPNEXT_MCP_PORT", "abc")

    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args([])

    assert exc_info.value.code == 2


def test_invalid_log_level_env_exits_with_error(monkeypatch):
    monkeypatch.setenv("ERPNEXT_URL", "https://erp.example.com")
    monkeypatch.setenv("ERPNEXT_MCP_LOG_LEVEL", "verbose")

    assert main([]) == 1
