"""
Pytest plugin for ghrepo testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghrepo.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from ghrepo.testing.fixtures import (
    mock_client,
    repository_resource,
    sample_repository,
    sample_state,
)

__all__ = [
    "mock_client",
    "repository_resource",
    "sample_repository",
    "sample_state",
]
