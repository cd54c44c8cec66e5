"""Async Repositories resource client."""

from typing import TYPE_CHECKING

from ghrepo.clients.repos import check_status, decode_repository, repo_path
from ghrepo.exceptions import NotFoundError
from ghrepo.types.repos import (
    CreateRepositoryRequest,
    Repository,
    UpdateRepositoryRequest,
)

if TYPE_CHECKING:
    from ghrepo.async_transport import AsyncHTTPTransport
    from ghrepo.context import RequestContext


class AsyncReposClient:
    """Async client for repository-related operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def get(
        self,
        owner: str,
        name: str,
        context: "RequestContext | None" = None,
    ) -> Repository:
        """Get a repository; raises NotFoundError on 404."""
        response = await self.transport.request(
            "GET", repo_path(owner, name), context=context
        )

        if response.status_code == 404:
            raise NotFoundError(f"repository {owner}/{name} not found")
        check_status(response, 200, "get repo")

        return decode_repository(response)

    async def create(
        self,
        request: CreateRepositoryRequest,
        context: "RequestContext | None" = None,
    ) -> Repository:
        """Create a repository for the authenticated user."""
        response = await self.transport.request(
            "POST", "/user/repos", body=request.to_dict(), context=context
        )
        check_status(response, 201, "create repo")
        return decode_repository(response)

    async def update(
        self,
        owner: str,
        name: str,
        request: UpdateRepositoryRequest,
        context: "RequestContext | None" = None,
    ) -> Repository:
        """Update a repository's description, visibility and feature flags."""
        response = await self.transport.request(
            "PATCH", repo_path(owner, name), body=request.to_dict(), context=context
        )
        check_status(response, 200, "update repo")
        return decode_repository(response)

    async def delete(
        self,
        owner: str,
        name: str,
        context: "RequestContext | None" = None,
    ) -> None:
        """Delete a repository."""
        response = await self.transport.request(
            "DELETE", repo_path(owner, name), context=context
        )
        check_status(response, 204, "delete repo")
