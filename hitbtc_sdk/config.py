"""Client configuration."""

import os
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.hitbtc.com/api/2"
DEFAULT_TIMEOUT = 3.0
DEFAULT_USER_AGENT = "HitBTC API Client (hitbtc-sdk python package)"


class ClientConfig(BaseModel):
    """
    Immutable settings shared by every request a client issues.

    Example:
        ```python
        config = ClientConfig(timeout=10.0)
        sandbox = config.with_overrides(base_url="https://api.demo.hitbtc.com/api/2")
        ```
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def root_url(self) -> str:
        """Base URL without a trailing slash."""
        return self.base_url.rstrip("/")

    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request, extra headers last."""
        return {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
            **self.headers,
        }

    def with_overrides(self, **changes: Any) -> "ClientConfig":
        """Return a validated copy with the given fields replaced."""
        return self.model_validate({**self.model_dump(), **changes})

    @classmethod
    def from_env(cls, prefix: str = "HITBTC_") -> "ClientConfig":
        """
        Build a config from ``{prefix}BASE_URL`` and ``{prefix}TIMEOUT``.

        Unset variables keep their defaults.
        """
        values: dict[str, Any] = {}
        base_url = os.environ.get(f"{prefix}BASE_URL")
        if base_url:
            values["base_url"] = base_url
        timeout = os.environ.get(f"{prefix}TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)
        return cls(**values)
