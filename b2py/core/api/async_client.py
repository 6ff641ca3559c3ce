"""
Async B2 API client.

Thin transport over aiohttp: sends one JSON request, raises for non-2xx
statuses and returns the decoded body. No retries are attempted.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import aiohttp

from .config import APIConfig
from ..logging import get_logger


class AsyncAPIClient:
    """
    Asynchronous B2 API transport.

    Features:
    - Full async/await support
    - Configurable proxy, SSL, timeouts
    - Connection pooling through a lazily created aiohttp session

    Example:
        >>> async with AsyncAPIClient(APIConfig.default()) as client:
        ...     data = await client.request('GET', url, headers={...})
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize async API client.

        Args:
            config: API configuration (uses defaults if not provided)
            session: Externally owned aiohttp session; it is not closed by close()
        """
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None
        self._logger = get_logger('b2py.api')
        # Only set level if root logger has no handlers (basicConfig not called)
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def __aenter__(self) -> 'AsyncAPIClient':
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=connector,
                **self._config.get_session_kwargs()
            )
            self._owns_session = True
        return self._session

    async def close(self):
        """Close client and release resources."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Send one request and decode the JSON response.

        Args:
            method: HTTP method
            url: Absolute URL
            json: Request body, serialized as JSON
            headers: Extra request headers

        Returns:
            Decoded response body

        Raises:
            aiohttp.ClientResponseError: On a non-2xx status
            aiohttp.ClientError: On connection failures
            ValueError: If the body is not valid JSON
        """
        session = await self._ensure_session()
        proxy = self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None

        self._logger.debug(f"{method} {url}")

        async with session.request(
            method,
            url,
            json=json,
            headers=headers,
            proxy=proxy
        ) as response:
            self._logger.debug(f"{method} {url} -> {response.status}")

            if response.status >= 400:
                body = await response.text()
                self._logger.debug(f"Error body: {body[:500]}")
                response.raise_for_status()

            return await response.json(content_type=None)

    async def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """Make GET request."""
        return await self.request('GET', url, headers=headers)

    async def post(
        self,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """Make POST request."""
        return await self.request('POST', url, json=json, headers=headers)

    def bind(self, base_url: str, authorization_token: str) -> 'SessionBoundSender':
        """Create a sender pre-configured with a base URL and session token."""
        return SessionBoundSender(self, base_url, authorization_token)


@dataclass(frozen=True)
class SessionBoundSender:
    """
    Request sender bound to one authorized session.

    Endpoints are joined to ``base_url`` and every request carries the
    session token as its Authorization header.
    """
    client: AsyncAPIClient
    base_url: str
    authorization_token: str = field(repr=False)

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    async def post(self, endpoint: str, body: Dict[str, Any]) -> Any:
        """POST a JSON body to an API endpoint, e.g. ``b2_create_key``."""
        return await self.client.post(
            self.url_for(endpoint),
            json=body,
            headers={'Authorization': self.authorization_token}
        )
