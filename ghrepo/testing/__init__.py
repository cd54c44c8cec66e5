"""ghrepo testing utilities.

Provides a mock client and fixtures for testing code that drives the
repository resource.
"""

from ghrepo.testing.fixtures import create_mock_repository
from ghrepo.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
]
