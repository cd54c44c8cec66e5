"""Managed resources exposed to the provisioning tool."""

from ghrepo.resources.base import Resource
from ghrepo.resources.repository import RepositoryResource, requires_replace

__all__ = [
    "Resource",
    "RepositoryResource",
    "requires_replace",
]
