"""ghrepo async resource clients."""

from ghrepo.async_clients.repos import AsyncReposClient

__all__ = [
    "AsyncReposClient",
]
