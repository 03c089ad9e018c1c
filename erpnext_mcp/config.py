"""Connection settings for the ERPNext backend."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from erpnext_mcp.exceptions import ConfigurationError

ENV_URL = "ERPNEXT_URL"
ENV_API_KEY = "ERPNEXT_API_KEY"
ENV_API_SECRET = "ERPNEXT_API_SECRET"
ENV_TIMEOUT = "ERPNEXT_TIMEOUT_SECONDS"


class ERPNextSettings(BaseModel):
    """Immutable connection configuration.

    ``url`` is stored with one trailing slash removed. Credentials are only
    used when both halves are present.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    timeout_seconds: Optional[float] = Field(default=None, gt=0)

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{ENV_URL} environment variable is required")
        if value.endswith("/"):
            value = value[:-1]
        if not value:
            raise ValueError(f"{ENV_URL} must not be just '/'")
        return value

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key) and bool(self.api_secret)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ERPNextSettings":
        """Build settings from environment variables.

        Raises:
            ConfigurationError: if ERPNEXT_URL is missing or a value is malformed
        """
        env = os.environ if environ is None else environ

        url = env.get(ENV_URL, "")
        if not url.strip():
            raise ConfigurationError(f"{ENV_URL} environment variable is required")

        timeout_raw = env.get(ENV_TIMEOUT)
        try:
            return cls(
                url=url,
                api_key=env.get(ENV_API_KEY) or None,
                api_secret=env.get(ENV_API_SECRET) or None,
                timeout_seconds=float(timeout_raw) if timeout_raw else None,
            )
        except (ValidationError, ValueError) as exc:
            raise ConfigurationError(f"Invalid ERPNext configuration: {exc}") from exc
