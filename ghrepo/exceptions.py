"""ghrepo exception classes."""



class GitHubProviderError(Exception):
    """Base exception for all ghrepo errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitHubProviderError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class TransportError(GitHubProviderError):
    """Raised when no HTTP response was obtained.

    Covers connection and TLS failures, timeouts and cancelled contexts.
    """

    def __init__(self, message: str, code: str = "TRANSPORT_ERROR") -> None:
        super().__init__(code, message)


class RemoteError(GitHubProviderError):
    """Raised when the API answers with an unexpected status code."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__("REMOTE_ERROR", message or f"HTTP {status_code}")


class NotFoundError(RemoteError):
    """Raised when a repository lookup returns 404."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(404, message or "repository not found")
        self.code = "NOT_FOUND"


class DecodeError(GitHubProviderError):
    """Raised when a response body cannot be decoded into the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__("DECODE_ERROR", message)
