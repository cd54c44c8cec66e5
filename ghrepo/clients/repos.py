"""Repositories resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from ghrepo.exceptions import DecodeError, NotFoundError, RemoteError
from ghrepo.types.repos import (
    CreateRepositoryRequest,
    Repository,
    RepositoryOwner,
    UpdateRepositoryRequest,
)

if TYPE_CHECKING:
    from ghrepo.context import RequestContext
    from ghrepo.transport import HTTPTransport


def repo_path(owner: str, name: str) -> str:
    """Build /repos/{owner}/{name} with both segments URL-quoted."""
    return f"/repos/{quote(owner, safe='')}/{quote(name, safe='')}"


def _typed(data: dict[str, Any], key: str, kinds: tuple[type, ...], default: Any = ...) -> Any:
    if key not in data:
        if default is ...:
            raise DecodeError(f"malformed repository payload: missing {key!r}")
        return default
    value = data[key]
    # bool is an int subclass; an integer field never accepts true/false
    if not isinstance(value, kinds) or (bool not in kinds and isinstance(value, bool)):
        raise DecodeError(
            f"malformed repository payload: {key!r} has type {type(value).__name__}"
        )
    return value


def parse_repository(data: Any) -> Repository:
    """
    Decode a repository JSON object.

    Values are taken as-is: a field of the wrong JSON type is an error, not
    something to coerce.

    Raises:
        DecodeError: If the payload is not an object, lacks id, name or
            owner.login, or carries a field of the wrong type
    """
    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")

    owner = _typed(data, "owner", (dict,))
    login = _typed(owner, "login", (str,))
    name = _typed(data, "name", (str,))
    full_name = _typed(data, "full_name", (str, type(None)), None)

    return Repository(
        id=_typed(data, "id", (int,)),
        name=name,
        full_name=full_name or f"{login}/{name}",
        description=_typed(data, "description", (str, type(None)), None),
        private=_typed(data, "private", (bool,), False),
        has_issues=_typed(data, "has_issues", (bool,), False),
        has_wiki=_typed(data, "has_wiki", (bool,), False),
        owner=RepositoryOwner(login=login),
    )


def decode_repository(response: httpx.Response) -> Repository:
    """Parse a response body as a repository."""
    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(f"failed to decode response: {e}") from e
    return parse_repository(data)


def check_status(response: httpx.Response, expected: int, action: str) -> None:
    """
    Raise unless the response carries the expected status.

    Args:
        response: A fully read response
        expected: The operation's success status
        action: Short verb phrase used in the error message

    Raises:
        RemoteError: With the received status and the API's message when present
    """
    if response.status_code == expected:
        return

    try:
        data = response.json()
    except ValueError:
        data = {}
    api_message = data.get("message") if isinstance(data, dict) else None

    message = f"failed to {action}: HTTP {response.status_code}"
    if api_message:
        message = f"{message} ({api_message})"
    raise RemoteError(response.status_code, message)


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(
        self,
        owner: str,
        name: str,
        context: "RequestContext | None" = None,
    ) -> Repository:
        """
        Get a repository.

        Args:
            owner: Login of the owning account
            name: Repository name
            context: Cancellable execution context

        Returns:
            The repository as currently stored on the server

        Raises:
            NotFoundError: If the repository does not exist
            RemoteError: On any other non-200 status
            TransportError: If no response was obtained
            DecodeError: If the body is not a repository
        """
        response = self.transport.request("GET", repo_path(owner, name), context=context)

        if response.status_code == 404:
            raise NotFoundError(f"repository {owner}/{name} not found")
        check_status(response, 200, "get repo")

        return decode_repository(response)

    def create(
        self,
        request: CreateRepositoryRequest,
        context: "RequestContext | None" = None,
    ) -> Repository:
        """
        Create a repository for the authenticated user.

        Raises:
            RemoteError: On any non-201 status (nothing was created)
            TransportError: If no response was obtained
            DecodeError: If the body is not a repository
        """
        response = self.transport.request(
            "POST", "/user/repos", body=request.to_dict(), context=context
        )
        check_status(response, 201, "create repo")
        return decode_repository(response)

    def update(
        self,
        owner: str,
        name: str,
        request: UpdateRepositoryRequest,
        context: "RequestContext | None" = None,
    ) -> Repository:
        """
        Update a repository's description, visibility and feature flags.

        Raises:
            RemoteError: On any non-200 status
            TransportError: If no response was obtained
            DecodeError: If the body is not a repository
        """
        response = self.transport.request(
            "PATCH", repo_path(owner, name), body=request.to_dict(), context=context
        )
        check_status(response, 200, "update repo")
        return decode_repository(response)

    def delete(
        self,
        owner: str,
        name: str,
        context: "RequestContext | None" = None,
    ) -> None:
        """
        Delete a repository.

        Raises:
            RemoteError: On any non-204 status, 404 included
            TransportError: If no response was obtained
        """
        response = self.transport.request("DELETE", repo_path(owner, name), context=context)
        check_status(response, 204, "delete repo")
