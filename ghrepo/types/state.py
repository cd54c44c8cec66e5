"""Managed-resource records exchanged with the provisioning tool."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class RepositoryState:
    """
    Declared/observed state of one managed repository.

    Owned by the provisioning tool's state store. The reconciler reads a
    record and returns a new one; it never keeps a reference between calls.
    """

    # Changing any of these forces destroy-and-recreate.
    REPLACE_FIELDS: ClassVar[tuple[str, ...]] = ("name",)

    name: str
    owner: str | None = None
    id: str | None = None
    description: str | None = None
    private: bool = False
    has_issues: bool = True
    has_wiki: bool = True
    auto_init: bool = False
    full_name: str | None = None


@dataclass(frozen=True)
class Diagnostic:
    """A message reported back to the orchestrator."""

    severity: str  # "error" or "warning"
    summary: str
    detail: str = ""

    @classmethod
    def error(cls, summary: str, detail: str = "") -> "Diagnostic":
        return cls("error", summary, detail)

    @classmethod
    def warning(cls, summary: str, detail: str = "") -> "Diagnostic":
        return cls("warning", summary, detail)


@dataclass
class LifecycleResult:
    """Outcome of one lifecycle transition.

    ``state`` is the record the orchestrator should store; ``None`` means
    the resource must be removed from (or never written to) state.
    """

    state: RepositoryState | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_error(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    @property
    def removed(self) -> bool:
        """True when the resource no longer exists and has no error."""
        return self.state is None and not self.has_error
