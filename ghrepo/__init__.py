"""ghrepo - GitHub repository resource for declarative provisioning tools."""

from ghrepo.async_client import AsyncGitHubClient
from ghrepo.client import GitHubClient
from ghrepo.config import ClientConfig
from ghrepo.context import RequestContext
from ghrepo.exceptions import (
    ConfigurationError,
    DecodeError,
    GitHubProviderError,
    NotFoundError,
    RemoteError,
    TransportError,
)
from ghrepo.logging import configure_logging, get_logger
from ghrepo.resources import RepositoryResource, Resource, requires_replace
from ghrepo.transport import HTTPTransport
from ghrepo.types import (
    CreateRepositoryRequest,
    Diagnostic,
    LifecycleResult,
    Repository,
    RepositoryOwner,
    RepositoryState,
    UpdateRepositoryRequest,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "GitHubClient",
    "AsyncGitHubClient",
    "ClientConfig",
    "RequestContext",
    # Resources
    "Resource",
    "RepositoryResource",
    "requires_replace",
    # Types
    "Repository",
    "RepositoryOwner",
    "CreateRepositoryRequest",
    "UpdateRepositoryRequest",
    "RepositoryState",
    "Diagnostic",
    "LifecycleResult",
    # Exceptions
    "GitHubProviderError",
    "ConfigurationError",
    "TransportError",
    "RemoteError",
    "NotFoundError",
    "DecodeError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
