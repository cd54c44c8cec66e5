"""
Client configuration for ghrepo.

The configuration is built once at provider-configuration time and never
mutated afterwards, so one instance can be shared by every client call.
"""

import os
from dataclasses import dataclass

from ghrepo.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_ACCEPT = "application/vnd.github.v3+json"
DEFAULT_USER_AGENT = "ghrepo"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings shared by the sync and async clients."""

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_accept: str = DEFAULT_ACCEPT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.token:
            raise ConfigurationError("a GitHub token is required")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    def __repr__(self) -> str:
        # Keep the token out of tracebacks and log lines.
        return (
            f"ClientConfig(token='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Environment variables:
            GITHUB_TOKEN: Personal access token (required)
            GITHUB_BASE_URL: API root (optional, default: https://api.github.com)
            GITHUB_TIMEOUT: Per-request timeout in seconds (optional, default: 30)

        Raises:
            ConfigurationError: If the token is missing or the timeout is invalid
        """
        token = os.environ.get("GITHUB_TOKEN")
        base_url = os.environ.get("GITHUB_BASE_URL", DEFAULT_BASE_URL)
        timeout_str = os.environ.get("GITHUB_TIMEOUT")

        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable not set")

        timeout = DEFAULT_TIMEOUT
        if timeout_str:
            try:
                timeout = float(timeout_str)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid GITHUB_TIMEOUT: {timeout_str!r}. Must be a number of seconds"
                ) from None

        return cls(token=token, base_url=base_url, timeout=timeout)
