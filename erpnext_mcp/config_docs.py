"""Centralized configuration documentation and defaults for the ERPNext MCP server.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# ERPNext Connection
# ------------------
# ERPNEXT_URL: Base URL of the ERPNext/Frappe site (required)
# ERPNEXT_API_KEY: API key for token authentication
# ERPNEXT_API_SECRET: API secret for token authentication
#   Both key and secret must be set; otherwise the server runs unauthenticated
#   and every tool and resource read is refused.
# ERPNEXT_TIMEOUT_SECONDS: HTTP timeout for backend calls (default: none)
#
# Server
# ------
# ERPNEXT_MCP_TRANSPORT: "stdio" (default) or "http"
# ERPNEXT_MCP_HOST: Bind address for http transport (default: 0.0.0.0)
# ERPNEXT_MCP_PORT: Port for http transport (default: 8010)
# ERPNEXT_MCP_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_TRANSPORT = "stdio"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_MCP_PORT = 8010
DEFAULT_LOG_LEVEL = "INFO"

TRANSPORTS = ("stdio", "http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Secrets are reported as set/unset only.
    """
    import os

    return {
        "erpnext_url": os.getenv("ERPNEXT_URL"),
        "api_key_set": bool(os.getenv("ERPNEXT_API_KEY")),
        "api_secret_set": bool(os.getenv("ERPNEXT_API_SECRET")),
        "timeout_seconds": os.getenv("ERPNEXT_TIMEOUT_SECONDS"),
        "transport": os.getenv("ERPNEXT_MCP_TRANSPORT", DEFAULT_TRANSPORT),
        "host": os.getenv("ERPNEXT_MCP_HOST", DEFAULT_HOST),
        "port": os.getenv("ERPNEXT_MCP_PORT", str(DEFAULT_MCP_PORT)),
        "log_level": os.getenv("ERPNEXT_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    }


def validate_configuration() -> tuple[bool, list[str]]:
    """Validate current configuration for completeness and consistency.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    import os

    errors = []

    url = os.getenv("ERPNEXT_URL", "").strip()
    if not url:
        errors.append("ERPNEXT_URL is required but not set")
    elif not url.startswith(("http://", "https://")):
        errors.append(f"ERPNEXT_URL='{url}' must start with http:// or https://")

    has_key = bool(os.getenv("ERPNEXT_API_KEY"))
    has_secret = bool(os.getenv("ERPNEXT_API_SECRET"))
    if has_key != has_secret:
        missing = "ERPNEXT_API_SECRET" if has_key else "ERPNEXT_API_KEY"
        errors.append(f"{missing} not set; both key and secret are needed for authentication")

    timeout = os.getenv("ERPNEXT_TIMEOUT_SECONDS")
    if timeout:
        try:
            if float(timeout) <= 0:
                errors.append(f"ERPNEXT_TIMEOUT_SECONDS={timeout} must be positive")
        except ValueError:
            errors.append(f"ERPNEXT_TIMEOUT_SECONDS='{timeout}' is not a number")

    transport = os.getenv("ERPNEXT_MCP_TRANSPORT", DEFAULT_TRANSPORT)
    if transport not in TRANSPORTS:
        errors.append(f"ERPNEXT_MCP_TRANSPORT='{transport}' must be one of {', '.join(TRANSPORTS)}")

    port_str = os.getenv("ERPNEXT_MCP_PORT", str(DEFAULT_MCP_PORT))
    try:
        port = int(port_str)
        if not (1024 <= port <= 65535):
            errors.append(f"ERPNEXT_MCP_PORT={port} out of valid range (1024-65535)")
    except ValueError:
        errors.append(f"ERPNEXT_MCP_PORT='{port_str}' is not a valid integer")

    log_level = os.getenv("ERPNEXT_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        errors.append(f"ERPNEXT_MCP_LOG_LEVEL='{log_level}' must be one of {', '.join(LOG_LEVELS)}")

    return len(errors) == 0, errors


def print_configuration_help() -> None:
    """Print configuration help to stderr."""
    import sys

    help_text = """
ERPNEXT MCP CONFIGURATION REFERENCE
===================================

ERPNEXT CONNECTION
  ERPNEXT_URL              Base URL of the ERPNext site (required)
                           Example: https://erp.example.com
  ERPNEXT_API_KEY          API key (User > API Access > Generate Keys)
  ERPNEXT_API_SECRET       API secret paired with the key
  ERPNEXT_TIMEOUT_SECONDS  HTTP timeout for backend calls
                           Default: none (calls wait indefinitely)

SERVER
  ERPNEXT_MCP_TRANSPORT    stdio | http        Default: stdio
  ERPNEXT_MCP_HOST         Bind address (http) Default: 0.0.0.0
  ERPNEXT_MCP_PORT         Port (http)         Default: 8010
  ERPNEXT_MCP_LOG_LEVEL    DEBUG | INFO | WARNING | ERROR | CRITICAL
                           Default: INFO

QUICK START
  export ERPNEXT_URL=https://erp.example.com
  export ERPNEXT_API_KEY=...
  export ERPNEXT_API_SECRET=...
  python -m erpnext_mcp.main_mcp
"""
    print(help_text, file=sys.stderr)


if __name__ == "__main__":
    import json
    import sys

    print_configuration_help()
    print(json.dumps(get_config_summary(), indent=2), file=sys.stderr)

    is_valid, errors = validate_configuration()
    if is_valid:
        print("Configuration is valid", file=sys.stderr)
    else:
        print("Configuration errors:", file=sys.stderr)
        for error in errors:
            print(f"   - {error}", file=sys.stderr)
