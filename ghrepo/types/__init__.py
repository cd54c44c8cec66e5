"""ghrepo type definitions.

This module exports all data model types used by the package.
"""

from ghrepo.types.repos import (
    CreateRepositoryRequest,
    Repository,
    RepositoryOwner,
    UpdateRepositoryRequest,
)
from ghrepo.types.state import Diagnostic, LifecycleResult, RepositoryState

__all__ = [
    # Wire types
    "Repository",
    "RepositoryOwner",
    "CreateRepositoryRequest",
    "UpdateRepositoryRequest",
    # State types
    "RepositoryState",
    "Diagnostic",
    "LifecycleResult",
]
