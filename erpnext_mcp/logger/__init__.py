"""
Logger module for erpnext-mcp

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Everything is written to stderr: when the server runs over stdio, stdout
carries the MCP protocol stream.

Usage:
    from erpnext_mcp.logger import Logger, ConsoleLogger

    logger = ConsoleLogger()
    logger.info("Tool invocation started", tool="get_documents")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from .base import Logger
from .console_logger import ConsoleLogger

# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(level=logging.INFO)

__all__ = [
    "Logger",
    "ConsoleLogger",
    "session_logger",
]
