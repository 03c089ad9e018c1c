"""Command-line entrypoint for the ERPNext MCP server.

Diagnostics go to stderr; with the stdio transport stdout carries the protocol.
"""

import argparse
import asyncio
import os
import sys

from erpnext_mcp.config import ERPNextSettings
from erpnext_mcp.config_docs import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MCP_PORT,
    DEFAULT_TRANSPORT,
    LOG_LEVELS,
    TRANSPORTS,
)
from erpnext_mcp.erpnext import ERPNextClient
from erpnext_mcp.exceptions import ConfigurationError
from erpnext_mcp.logger import Logger, session_logger
from erpnext_mcp.mcp_server import create_server
from erpnext_mcp.mcp_server.server import run_http, run_stdio


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ERPNext MCP Server - ERPNext documents, lists and reports via Model Context Protocol"
    )
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default=os.environ.get("ERPNEXT_MCP_TRANSPORT", DEFAULT_TRANSPORT),
        help="Transport to serve on (default: stdio, or ERPNEXT_MCP_TRANSPORT env var)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=os.environ.get("ERPNEXT_MCP_HOST", DEFAULT_HOST),
        help="Host address to bind to for http transport (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=os.environ.get("ERPNEXT_MCP_PORT", str(DEFAULT_MCP_PORT)),
        help="Port for http transport (default: 8010, or ERPNEXT_MCP_PORT env var)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get("ERPNEXT_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        help="Logging verbosity (default: INFO, or ERPNEXT_MCP_LOG_LEVEL env var)",
    )
    return parser


async def serve(args: argparse.Namespace, settings: ERPNextSettings, logger: Logger) -> None:
    async with ERPNextClient(settings, logger=logger) as client:
        app = create_server(client, logger=logger)
        if args.transport == "http":
            await run_http(
                app,
                logger,
                host=args.host,
                port=args.port,
                authenticated=client.is_authenticated(),
            )
        else:
            await run_stdio(app, logger)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger: Logger = session_logger

    try:
        if args.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {args.log_level}",
                details={"valid_levels": list(LOG_LEVELS)},
            )
        logger.set_level(args.log_level)
        settings = ERPNextSettings.from_env()
    except ConfigurationError as e:
        logger.error("FATAL: Configuration error", error=str(e))
        return 1

    if settings.has_credentials:
        logger.info("ERPNext API key authentication configured", url=settings.url)
    else:
        logger.warning(
            "ERPNEXT_API_KEY/ERPNEXT_API_SECRET not both set; tools and resource reads will be refused",
            url=settings.url,
        )

    try:
        asyncio.run(serve(args, settings, logger))
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        return 0
    except Exception as e:
        logger.error("Server error", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
