"""
ghrepo async client.

Async counterpart of GitHubClient for callers running on asyncio.
"""

from typing import Any

import httpx

from ghrepo.async_clients import AsyncReposClient
from ghrepo.async_transport import AsyncHTTPTransport
from ghrepo.client import resolve_config
from ghrepo.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig


class AsyncGitHubClient:
    """
    Async client for the GitHub repositories API.

    Example:
        ```python
        async with AsyncGitHubClient(token="ghp_...") as client:
            repo = await client.repos.get("alice", "demo")
        ```
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        config: ClientConfig | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = resolve_config(token, config, base_url, timeout)

        self._transport = AsyncHTTPTransport(self.config, http_transport=http_transport)

        self.repos = AsyncReposClient(self._transport)

    @classmethod
    def from_env(
        cls, http_transport: httpx.AsyncBaseTransport | None = None
    ) -> "AsyncGitHubClient":
        """Create a client from environment variables (see ClientConfig.from_env)."""
        return cls(config=ClientConfig.from_env(), http_transport=http_transport)

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release pooled connections."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
