"""Short failure reasons for backend calls."""

import httpx


def describe_failure(exc: BaseException) -> str:
    """Human-readable reason for a failed call."""
    if isinstance(exc, httpx.HTTPStatusError):
        return f"Request failed with status code {exc.response.status_code}"
    if isinstance(exc, KeyError):
        return f"Response missing '{exc.args[0]}' field" if exc.args else "Malformed response"
    return str(exc) or type(exc).__name__
