"""ghrepo resource clients."""

from ghrepo.clients.repos import ReposClient

__all__ = [
    "ReposClient",
]
