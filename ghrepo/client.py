"""
ghrepo main client.

Provides the primary interface for talking to the GitHub repositories API.
"""

from typing import Any

import httpx

from ghrepo.clients import ReposClient
from ghrepo.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from ghrepo.exceptions import ConfigurationError
from ghrepo.transport import HTTPTransport


def resolve_config(
    token: str | None,
    config: ClientConfig | None,
    base_url: str,
    timeout: float,
) -> ClientConfig:
    """Pick an explicit ClientConfig or build one from keyword arguments."""
    if config is not None:
        if token is not None:
            raise ConfigurationError("pass either token or config, not both")
        return config
    if token is None:
        raise ConfigurationError("a GitHub token is required")
    return ClientConfig(token=token, base_url=base_url, timeout=timeout)


class GitHubClient:
    """
    Main client for the GitHub repositories API.

    Built once from a static credential at provider-configuration time and
    shared by every lifecycle transition. It holds no mutable state, so
    concurrent calls for different repositories need no locking.

    Example:
        ```python
        from ghrepo import GitHubClient, CreateRepositoryRequest

        with GitHubClient(token="ghp_...") as client:
            repo = client.repos.create(CreateRepositoryRequest(name="demo"))
            print(repo.full_name)
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        config: ClientConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: GitHub personal access token
            base_url: API root (default: https://api.github.com)
            timeout: Per-request timeout in seconds (default: 30.0)
            config: A prebuilt ClientConfig, instead of token/base_url/timeout
            http_transport: Optional httpx transport, mostly for tests

        Raises:
            ConfigurationError: If no token is given or both token and config are
        """
        self.config = resolve_config(token, config, base_url, timeout)

        self._transport = HTTPTransport(self.config, http_transport=http_transport)

        self.repos = ReposClient(self._transport)

    @classmethod
    def from_env(cls, http_transport: httpx.BaseTransport | None = None) -> "GitHubClient":
        """
        Create a client from GITHUB_TOKEN, GITHUB_BASE_URL and GITHUB_TIMEOUT.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(config=ClientConfig.from_env(), http_transport=http_transport)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release pooled connections."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
