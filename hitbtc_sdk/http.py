"""HTTP transport built on aiohttp."""

import json
from enum import Enum
from typing import Any, Mapping, Optional

import aiohttp

from .config import ClientConfig
from .types import HitBTCResponse


def encode_query(params: Optional[Mapping[str, Any]]) -> Optional[dict[str, str]]:
    """
    Encode query parameters.

    None values are dropped, booleans become "true"/"false" and everything
    else is stringified.

    Returns:
        Encoded parameters, or None when nothing is left to send
    """
    if not params:
        return None
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            encoded[key] = value.value
        else:
            encoded[key] = str(value)
    return encoded or None


class HTTPClient:
    """Async HTTP client wrapper holding one lazily created session."""

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config = config or ClientConfig()
        self.timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers=self.config.default_headers()
            )
        return self._session

    def url_for(self, endpoint: str) -> str:
        """Absolute URL of an endpoint path relative to the base URL."""
        return f"{self.config.root_url}/{endpoint.lstrip('/')}"

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Optional[Mapping[str, Any]] = None,
        auth: Optional[aiohttp.BasicAuth] = None,
    ) -> HitBTCResponse:
        """
        Send a request and read the whole response.

        Non-2xx statuses are returned, not raised; transport failures
        propagate as aiohttp or timeout exceptions.
        """
        async with self.session.request(
            method,
            self.url_for(endpoint),
            params=encode_query(params),
            json=json_body,
            auth=auth,
        ) as response:
            text = await response.text(errors="replace")
            return HitBTCResponse(
                status=response.status,
                headers=response.headers,
                data=_decode(text),
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _decode(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text
