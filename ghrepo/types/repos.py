"""Repository-related data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class RepositoryOwner:
    """Account that owns a repository."""

    login: str


@dataclass
class Repository:
    """Repository as observed on the server."""

    id: int
    name: str
    full_name: str  # "owner/name", server-derived
    description: str | None
    private: bool
    has_issues: bool
    has_wiki: bool
    owner: RepositoryOwner


@dataclass
class CreateRepositoryRequest:
    """Body of POST /user/repos."""

    name: str
    description: str | None = None
    private: bool = False
    has_issues: bool = True
    has_wiki: bool = True
    auto_init: bool = False

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "name": self.name,
            "private": self.private,
            "has_issues": self.has_issues,
            "has_wiki": self.has_wiki,
        }
        if self.description is not None:
            body["description"] = self.description
        if self.auto_init:
            body["auto_init"] = True
        return body


@dataclass
class UpdateRepositoryRequest:
    """Body of PATCH /repos/{owner}/{name}.

    There is deliberately no name field; renames go through destroy/create.
    """

    description: str | None = None
    private: bool = False
    has_issues: bool = True
    has_wiki: bool = True

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "private": self.private,
            "has_issues": self.has_issues,
            "has_wiki": self.has_wiki,
        }
        if self.description is not None:
            body["description"] = self.description
        return body
