"""
Pytest fixtures for ghrepo testing.

Provides common fixtures for testing orchestrators that drive the
repository resource.
"""

from typing import Generator

import pytest

from ghrepo.resources.repository import RepositoryResource
from ghrepo.testing.mock import MockGitHubClient
from ghrepo.types.repos import Repository, RepositoryOwner
from ghrepo.types.state import RepositoryState


def create_mock_repository(
    name: str = "sample-repo",
    owner: str = "sample-owner",
    repo_id: int = 1,
    **overrides: object,
) -> Repository:
    """Build a Repository with sensible defaults and a consistent full_name."""
    repo = Repository(
        id=repo_id,
        name=name,
        full_name=f"{owner}/{name}",
        description="A sample repository for testing",
        private=False,
        has_issues=True,
        has_wiki=True,
        owner=RepositoryOwner(login=owner),
    )
    for key, value in overrides.items():
        setattr(repo, key, value)
    return repo


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repos.configure_create(response=my_repo)
            result = RepositoryResource(mock_client).create(planned)
            assert mock_client.was_called("repos.create")
        ```
    """
    client = MockGitHubClient(login="sample-owner")
    yield client
    client.reset()


@pytest.fixture
def repository_resource(mock_client: MockGitHubClient) -> RepositoryResource:
    """Provide a RepositoryResource wired to the mock client."""
    return RepositoryResource(mock_client)


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository object."""
    return create_mock_repository()


@pytest.fixture
def sample_state() -> RepositoryState:
    """Provide a state record for sample-owner/sample-repo as if already created."""
    return RepositoryState(
        id="1",
        name="sample-repo",
        owner="sample-owner",
        description="A sample repository for testing",
        full_name="sample-owner/sample-repo",
    )
