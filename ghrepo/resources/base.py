"""
Lifecycle interface the provisioning tool drives.

Any resource implementing these five methods can be handed to the
orchestrator; it serializes calls per resource instance.
"""

from abc import ABC, abstractmethod

from ghrepo.context import RequestContext
from ghrepo.types.state import LifecycleResult, RepositoryState


class Resource(ABC):
    """Abstract base class for managed resources."""

    @abstractmethod
    def create(
        self, planned: RepositoryState, context: RequestContext | None = None
    ) -> LifecycleResult:
        """Create the remote object described by the planned state."""
        pass

    @abstractmethod
    def read(
        self, prior: RepositoryState, context: RequestContext | None = None
    ) -> LifecycleResult:
        """Refresh state from the remote object; state=None if it is gone."""
        pass

    @abstractmethod
    def update(
        self,
        planned: RepositoryState,
        prior: RepositoryState,
        context: RequestContext | None = None,
    ) -> LifecycleResult:
        """Apply in-place changes; on failure the returned state is prior."""
        pass

    @abstractmethod
    def delete(
        self, prior: RepositoryState, context: RequestContext | None = None
    ) -> LifecycleResult:
        """Destroy the remote object; state=None on success."""
        pass

    @abstractmethod
    def import_state(self, import_id: str) -> LifecycleResult:
        """Seed a minimal state from an external identifier, without I/O."""
        pass
