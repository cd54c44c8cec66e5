"""
Cancellable execution context for client calls.

A RequestContext is created by the caller for one lifecycle transition and
passed down to every client call it makes. Cancelling it (from any thread)
or letting its deadline pass makes pending and future calls fail with
TransportError.
"""

import threading
import time

from ghrepo.exceptions import TransportError


class RequestContext:
    """Cancellation flag with an optional deadline."""

    def __init__(self, timeout: float | None = None) -> None:
        """
        Args:
            timeout: Seconds from now until the context expires (None = no deadline)
        """
        self._cancelled = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        """Cancel the context. Safe to call from another thread."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self) -> None:
        """
        Raise if the context can no longer be used.

        Raises:
            TransportError: If the context was cancelled or its deadline passed
        """
        if self.cancelled:
            raise TransportError("context cancelled", code="CANCELLED")
        if self.expired:
            raise TransportError("context deadline exceeded", code="DEADLINE_EXCEEDED")

    @classmethod
    def background(cls) -> "RequestContext":
        """A context that is never cancelled and has no deadline."""
        return cls()
