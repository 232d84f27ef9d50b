"""Request agent: builds, authenticates and sends requests to HitBTC."""

import asyncio
from typing import Any, Mapping, Optional

import aiohttp

from .config import ClientConfig
from .exceptions import APIError, AuthRequiredError, unwrap_error
from .http import HTTPClient
from .logger import Logger, NoopLogger
from .signing import sign_message
from .types import ApiAuth, HitBTCResponse

# Verbs whose parameters travel in the query string; the rest send a JSON body.
_QUERY_METHODS = frozenset({"GET", "DELETE"})


class RawAgent:
    """
    Forwards requests to public and private endpoints.

    An agent never changes its credentials; :meth:`upgrade` returns a new
    agent that shares the configuration, logger and HTTP session.

    Example:
        ```python
        agent = RawAgent()
        response = await agent.get_public_endpoint("public/orderbook/ETHBTC", {"limit": 5})
        agent = agent.upgrade(ApiAuth(public_key="...", private_key="..."))
        balances = await agent.get_from_private_endpoint("trading/balance")
        ```
    """

    sign_message = staticmethod(sign_message)

    def __init__(
        self,
        auth: Optional[ApiAuth] = None,
        config: Optional[ClientConfig] = None,
        logger: Optional[Logger] = None,
        http: Optional[HTTPClient] = None,
    ):
        """
        Initialize the agent.

        Args:
            auth: API key pair; private endpoints fail without it
            config: Client configuration, unused when http is given
            logger: Logger instance
            http: HTTP transport to reuse
        """
        if http is None:
            http = HTTPClient(config)
        self._auth = auth
        self._http = http
        self.config = http.config
        self.logger = logger or NoopLogger()

    @property
    def auth(self) -> Optional[ApiAuth]:
        return self._auth

    def is_upgraded(self) -> bool:
        """Check whether API keys are present."""
        return self._auth is not None

    def upgrade(self, new_auth: ApiAuth) -> "RawAgent":
        """Return an agent using ``new_auth`` over the same session."""
        self.logger.debug("Upgrading agent with new API keys")
        return RawAgent(auth=new_auth, logger=self.logger, http=self._http)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> "RawAgent":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ========================================================================
    # Public endpoints
    # ========================================================================

    async def public_request(
        self,
        endpoint: str,
        query_params: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
    ) -> HitBTCResponse:
        """Send an unauthenticated request."""
        return await self._send(method.upper(), endpoint, params=query_params)

    async def get_public_endpoint(
        self, endpoint: str, query_params: Optional[Mapping[str, Any]] = None
    ) -> HitBTCResponse:
        """Fetch data from a public endpoint."""
        return await self.public_request(endpoint, query_params)

    # ========================================================================
    # Private endpoints
    # ========================================================================

    async def private_request(
        self,
        endpoint: str,
        method: str,
        data_params: Optional[Mapping[str, Any]] = None,
    ) -> HitBTCResponse:
        """
        Send a request authenticated with HTTP Basic Auth.

        ``data_params`` go to the query string for GET and DELETE and to the
        JSON body otherwise.

        Raises:
            AuthRequiredError: If the agent has no API keys. Nothing is sent.
            APIError: If the request fails.
        """
        if self._auth is None:
            raise AuthRequiredError()

        method = method.upper()
        auth = aiohttp.BasicAuth(self._auth.public_key, self._auth.private_key)
        if method in _QUERY_METHODS:
            return await self._send(method, endpoint, params=data_params, auth=auth)
        return await self._send(method, endpoint, body=data_params, auth=auth)

    async def get_from_private_endpoint(
        self, endpoint: str, query_params: Optional[Mapping[str, Any]] = None
    ) -> HitBTCResponse:
        return await self.private_request(endpoint, "GET", query_params)

    async def post_to_private_endpoint(
        self, endpoint: str, data: Optional[Mapping[str, Any]] = None
    ) -> HitBTCResponse:
        return await self.private_request(endpoint, "POST", data)

    async def put_to_private_endpoint(
        self, endpoint: str, data: Optional[Mapping[str, Any]] = None
    ) -> HitBTCResponse:
        return await self.private_request(endpoint, "PUT", data)

    async def patch_to_private_endpoint(
        self, endpoint: str, data: Optional[Mapping[str, Any]] = None
    ) -> HitBTCResponse:
        return await self.private_request(endpoint, "PATCH", data)

    async def delete_from_private_endpoint(
        self, endpoint: str, query_params: Optional[Mapping[str, Any]] = None
    ) -> HitBTCResponse:
        return await self.private_request(endpoint, "DELETE", query_params)

    # ========================================================================
    # Transport
    # ========================================================================

    async def _send(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
        auth: Optional[aiohttp.BasicAuth] = None,
    ) -> HitBTCResponse:
        self.logger.debug(f"{method} {endpoint}")
        try:
            response = await self._http.request(
                method, endpoint, params=params, json_body=body, auth=auth
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as error:
            self.logger.debug(f"{method} {endpoint} failed: {error!r}")
            raise APIError(unwrap_error(None, error)) from error

        if not response.ok:
            self.logger.debug(f"{method} {endpoint} returned {response.status}")
            raise APIError(unwrap_error(response), status=response.status)
        return response
