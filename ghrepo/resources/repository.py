"""
GitHub repository resource.

Maps the provisioning tool's lifecycle transitions onto ReposClient calls.
Each transition returns a LifecycleResult and never raises for client
failures: errors become diagnostics and the returned state is exactly what
the orchestrator should keep.
"""

from dataclasses import replace
from typing import TYPE_CHECKING

from ghrepo.exceptions import GitHubProviderError, NotFoundError
from ghrepo.logging import log_transition
from ghrepo.resources.base import Resource
from ghrepo.types.repos import CreateRepositoryRequest, UpdateRepositoryRequest
from ghrepo.types.state import Diagnostic, LifecycleResult, RepositoryState

if TYPE_CHECKING:
    from ghrepo.client import GitHubClient
    from ghrepo.context import RequestContext

TYPE_NAME = "github_repository"


def _key(state: RepositoryState) -> str:
    return f"{state.owner}/{state.name}"


def _client_error(action: str, error: Exception) -> Diagnostic:
    return Diagnostic.error(
        "Client Error", f"Unable to {action} repository, got error: {error}"
    )


def _missing_key(action: str, state: RepositoryState) -> Diagnostic | None:
    if state.owner and state.name:
        return None
    return Diagnostic.error(
        "Incomplete Repository Key",
        f"Unable to {action} repository: owner and name are both required, got {_key(state)!r}",
    )


def requires_replace(prior: RepositoryState, planned: RepositoryState) -> bool:
    """True when a replacement-forcing attribute changed between states."""
    return any(
        getattr(prior, attr) != getattr(planned, attr)
        for attr in RepositoryState.REPLACE_FIELDS
    )


class RepositoryResource(Resource):
    """Reconciler for one GitHub repository type."""

    type_name = TYPE_NAME

    def __init__(self, client: "GitHubClient") -> None:
        """
        Args:
            client: Configured client, shared across resources
        """
        self.client = client

    def create(
        self,
        planned: RepositoryState,
        context: "RequestContext | None" = None,
    ) -> LifecycleResult:
        request = CreateRepositoryRequest(
            name=planned.name,
            description=planned.description,
            private=planned.private,
            has_issues=planned.has_issues,
            has_wiki=planned.has_wiki,
            auto_init=planned.auto_init,
        )

        try:
            repo = self.client.repos.create(request, context=context)
        except GitHubProviderError as e:
            log_transition("create", planned.name, "failed", str(e))
            return LifecycleResult(state=None, diagnostics=[_client_error("create", e)])

        state = replace(
            planned,
            id=str(repo.id),
            name=repo.name,
            description=repo.description,
            private=repo.private,
            has_issues=repo.has_issues,
            has_wiki=repo.has_wiki,
            full_name=repo.full_name,
            owner=repo.owner.login,
        )
        log_transition("create", repo.full_name, "ok", f"id={repo.id}")
        return LifecycleResult(state=state)

    def read(
        self,
        prior: RepositoryState,
        context: "RequestContext | None" = None,
    ) -> LifecycleResult:
        """
        Refresh the observable attributes of an existing repository.

        id, owner and name are the lookup key and are kept as they are. A
        repository that no longer exists yields state=None with a warning,
        telling the orchestrator to drop it from state and plan a create.
        """
        missing = _missing_key("read", prior)
        if missing is not None:
            log_transition("read", _key(prior), "failed", "incomplete key")
            return LifecycleResult(state=prior, diagnostics=[missing])

        try:
            repo = self.client.repos.get(prior.owner, prior.name, context=context)
        except NotFoundError as e:
            log_transition("read", _key(prior), "removed", str(e))
            return LifecycleResult(
                state=None,
                diagnostics=[
                    Diagnostic.warning(
                        "Resource Not Found",
                        f"Repository {_key(prior)} no longer exists and was removed from state",
                    )
                ],
            )
        except GitHubProviderError as e:
            log_transition("read", _key(prior), "failed", str(e))
            return LifecycleResult(state=prior, diagnostics=[_client_error("read", e)])

        state = replace(
            prior,
            description=repo.description,
            private=repo.private,
            has_issues=repo.has_issues,
            has_wiki=repo.has_wiki,
            full_name=repo.full_name,
        )
        log_transition("read", _key(prior), "ok")
        return LifecycleResult(state=state)

    def update(
        self,
        planned: RepositoryState,
        prior: RepositoryState,
        context: "RequestContext | None" = None,
    ) -> LifecycleResult:
        """
        Apply description, visibility and feature-flag changes in place.

        The repository is addressed by the planned owner and name. Renames
        are not updates: if a replacement-forcing attribute differs from
        prior, nothing is sent and an error is reported. Any failure hands
        back prior untouched.
        """
        missing = _missing_key("update", planned)
        if missing is not None:
            log_transition("update", _key(planned), "failed", "incomplete key")
            return LifecycleResult(state=prior, diagnostics=[missing])

        if requires_replace(prior, planned):
            log_transition("update", _key(prior), "failed", "name changed")
            return LifecycleResult(
                state=prior,
                diagnostics=[
                    Diagnostic.error(
                        "Replacement Required",
                        f"Cannot rename {_key(prior)} to {planned.name} in place; "
                        "the repository must be destroyed and recreated",
                    )
                ],
            )

        request = UpdateRepositoryRequest(
            description=planned.description,
            private=planned.private,
            has_issues=planned.has_issues,
            has_wiki=planned.has_wiki,
        )

        try:
            repo = self.client.repos.update(
                planned.owner, planned.name, request, context=context
            )
        except GitHubProviderError as e:
            log_transition("update", _key(planned), "failed", str(e))
            return LifecycleResult(state=prior, diagnostics=[_client_error("update", e)])

        state = replace(
            planned,
            description=repo.description,
            private=repo.private,
            has_issues=repo.has_issues,
            has_wiki=repo.has_wiki,
        )
        log_transition("update", _key(planned), "ok")
        return LifecycleResult(state=state)

    def delete(
        self,
        prior: RepositoryState,
        context: "RequestContext | None" = None,
    ) -> LifecycleResult:
        """Delete the repository. On failure, including 404, the prior state is kept."""
        missing = _missing_key("delete", prior)
        if missing is not None:
            log_transition("delete", _key(prior), "failed", "incomplete key")
            return LifecycleResult(state=prior, diagnostics=[missing])

        try:
            self.client.repos.delete(prior.owner, prior.name, context=context)
        except GitHubProviderError as e:
            log_transition("delete", _key(prior), "failed", str(e))
            return LifecycleResult(state=prior, diagnostics=[_client_error("delete", e)])

        log_transition("delete", _key(prior), "ok")
        return LifecycleResult(state=None)

    def import_state(self, import_id: str) -> LifecycleResult:
        """
        Seed state from an "owner/name" identifier.

        Only the key is filled in; the following read populates the rest.
        """
        owner, sep, name = import_id.partition("/")
        if not sep or not owner or not name or "/" in name:
            log_transition("import", import_id, "failed", "malformed id")
            return LifecycleResult(
                state=None,
                diagnostics=[
                    Diagnostic.error(
                        "Unexpected Import Identifier",
                        f"Expected import identifier with format: owner/name. Got: {import_id!r}",
                    )
                ],
            )

        state = RepositoryState(name=name, owner=owner, full_name=import_id)
        log_transition("import", import_id, "ok")
        return LifecycleResult(state=state)
