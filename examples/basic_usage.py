#!/usr/bin/env python3
"""
Basic ghrepo usage example.

Drives the repository resource the way a provisioning tool would.
Run with: GITHUB_TOKEN=... python examples/basic_usage.py <repo-name>
"""

import logging
import sys

from ghrepo import (
    GitHubClient,
    GitHubProviderError,
    RepositoryResource,
    RepositoryState,
    RequestContext,
    configure_logging,
)

configure_logging(level=logging.INFO)

name = sys.argv[1] if len(sys.argv) > 1 else "ghrepo-example"

try:
    client = GitHubClient.from_env()
except GitHubProviderError as e:
    print(f"Configuration failed: {e}")
    sys.exit(1)

with client:
    resource = RepositoryResource(client)

    # 1. Create
    planned = RepositoryState(name=name, description="created by ghrepo", auto_init=True)
    result = resource.create(planned, context=RequestContext(timeout=60))
    if result.has_error:
        for diag in result.diagnostics:
            print(f"{diag.summary}: {diag.detail}")
        sys.exit(1)
    state = result.state
    print(f"Created {state.full_name} (id={state.id})")

    # 2. Refresh
    state = resource.read(state).state or state
    print(f"Private: {state.private}, issues: {state.has_issues}, wiki: {state.has_wiki}")

    # 3. Destroy
    result = resource.delete(state)
    print("Deleted" if result.removed else f"Delete failed: {result.diagnostics}")
