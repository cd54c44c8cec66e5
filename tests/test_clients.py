"""
Tests for the repository client operations.

Feature: ghrepo
"""

import json

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ghrepo.client import GitHubClient
from ghrepo.clients.repos import parse_repository, repo_path
from ghrepo.context import RequestContext
from ghrepo.exceptions import DecodeError, NotFoundError, RemoteError, TransportError
from ghrepo.types.repos import CreateRepositoryRequest, UpdateRepositoryRequest

from tests.conftest import TEST_TOKEN, repo_payload

login_strategy = st.text(
    min_size=1,
    max_size=39,
    alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters="-"),
)
name_strategy = st.text(
    min_size=1,
    max_size=50,
    alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters="-_."),
)
unexpected_status_strategy = st.sampled_from([400, 401, 403, 409, 410, 422, 500, 502, 503])


# ============================================================================
# get
# ============================================================================


def test_get_decodes_repository(make_client) -> None:
    client, recorder = make_client(
        httpx.Response(200, json=repo_payload(description="hello", private=True))
    )

    repo = client.repos.get("alice", "demo")

    assert recorder.requests[0].method == "GET"
    assert recorder.requests[0].url.path == "/repos/alice/demo"
    assert repo.id == 1
    assert repo.full_name == "alice/demo"
    assert repo.owner.login == "alice"
    assert repo.description == "hello"
    assert repo.private is True


def test_get_404_is_not_found(make_client) -> None:
    client, _ = make_client(httpx.Response(404, json={"message": "Not Found"}))

    with pytest.raises(NotFoundError) as exc_info:
        client.repos.get("alice", "missing")

    assert exc_info.value.status_code == 404
    assert isinstance(exc_info.value, RemoteError)


@given(status=unexpected_status_strategy)
@settings(max_examples=30)
def test_get_other_statuses_are_generic_remote_errors(status: int) -> None:
    """A non-200, non-404 answer is a RemoteError that is not a NotFoundError."""
    transport = httpx.MockTransport(lambda request: httpx.Response(status, json={}))
    with GitHubClient(token=TEST_TOKEN, http_transport=transport) as client:
        with pytest.raises(RemoteError) as exc_info:
            client.repos.get("alice", "demo")

    assert not isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.status_code == status


def test_get_quotes_path_segments(make_client) -> None:
    client, recorder = make_client(httpx.Response(200, json=repo_payload(name="a b")))

    client.repos.get("alice", "a b")

    assert recorder.requests[0].url.raw_path == b"/repos/alice/a%20b"


def test_get_invalid_json_is_decode_error(make_client) -> None:
    client, _ = make_client(httpx.Response(200, content=b"<html>oops</html>"))

    with pytest.raises(DecodeError):
        client.repos.get("alice", "demo")


def test_get_missing_fields_is_decode_error(make_client) -> None:
    client, _ = make_client(httpx.Response(200, json={"name": "demo"}))

    with pytest.raises(DecodeError):
        client.repos.get("alice", "demo")


# ============================================================================
# create
# ============================================================================


def test_create_posts_directive(make_client) -> None:
    client, recorder = make_client(httpx.Response(201, json=repo_payload()))

    client.repos.create(CreateRepositoryRequest(
        name="demo", private=False, has_issues=True, has_wiki=True, auto_init=True,
    ))

    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/user/repos"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "name": "demo",
        "private": False,
        "has_issues": True,
        "has_wiki": True,
        "auto_init": True,
    }


def test_create_omits_auto_init_when_false(make_client) -> None:
    client, recorder = make_client(httpx.Response(201, json=repo_payload()))

    client.repos.create(CreateRepositoryRequest(name="demo", description="d"))

    body = json.loads(recorder.requests[0].content)
    assert "auto_init" not in body
    assert body["description"] == "d"


@given(login=login_strategy, name=name_strategy)
@settings(max_examples=50)
def test_created_full_name_is_owner_slash_name(login: str, name: str) -> None:
    """
    For any well-formed 201 response, the decoded full_name equals
    owner.login + "/" + name.
    """
    transport = httpx.MockTransport(
        lambda request: httpx.Response(201, json=repo_payload(name=name, owner=login))
    )
    with GitHubClient(token=TEST_TOKEN, http_transport=transport) as client:
        repo = client.repos.create(CreateRepositoryRequest(name=name))

    assert repo.full_name == f"{repo.owner.login}/{repo.name}"


@given(status=st.sampled_from([200, 400, 401, 403, 404, 422, 500]))
@settings(max_examples=30)
def test_create_requires_201(status: int) -> None:
    """Creation is all-or-nothing: anything but 201 raises, even a 200 with a body."""
    transport = httpx.MockTransport(
        lambda request: httpx.Response(status, json=repo_payload())
    )
    with GitHubClient(token=TEST_TOKEN, http_transport=transport) as client:
        with pytest.raises(RemoteError) as exc_info:
            client.repos.create(CreateRepositoryRequest(name="demo"))

    assert exc_info.value.status_code == status


def test_create_error_includes_api_message(make_client) -> None:
    client, _ = make_client(httpx.Response(
        422, json={"message": "Repository creation failed.", "errors": []}
    ))

    with pytest.raises(RemoteError) as exc_info:
        client.repos.create(CreateRepositoryRequest(name="demo"))

    assert exc_info.value.status_code == 422
    assert "Repository creation failed." in str(exc_info.value)


# ============================================================================
# update
# ============================================================================


def test_update_patches_without_name(make_client) -> None:
    client, recorder = make_client(httpx.Response(200, json=repo_payload(description="hi")))

    client.repos.update(
        "alice", "demo", UpdateRepositoryRequest(description="hi", private=True)
    )

    request = recorder.requests[0]
    assert request.method == "PATCH"
    assert request.url.path == "/repos/alice/demo"
    body = json.loads(request.content)
    assert "name" not in body
    assert body == {"description": "hi", "private": True, "has_issues": True, "has_wiki": True}


@given(
    description=st.text(max_size=100),
    private=st.booleans(),
    has_issues=st.booleans(),
    has_wiki=st.booleans(),
)
@settings(max_examples=50)
def test_update_values_survive_server_echo(
    description: str, private: bool, has_issues: bool, has_wiki: bool
) -> None:
    """
    Encoding an update and decoding the server's echo preserves description,
    visibility and both feature flags.
    """
    def echo(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=repo_payload(**json.loads(request.content)))

    with GitHubClient(token=TEST_TOKEN, http_transport=httpx.MockTransport(echo)) as client:
        repo = client.repos.update("alice", "demo", UpdateRepositoryRequest(
            description=description,
            private=private,
            has_issues=has_issues,
            has_wiki=has_wiki,
        ))

    assert repo.description == description
    assert repo.private == private
    assert repo.has_issues == has_issues
    assert repo.has_wiki == has_wiki


def test_update_non_200_is_remote_error(make_client) -> None:
    client, _ = make_client(httpx.Response(403, json={"message": "Must have admin rights"}))

    with pytest.raises(RemoteError) as exc_info:
        client.repos.update("alice", "demo", UpdateRepositoryRequest())

    assert exc_info.value.status_code == 403


# ============================================================================
# delete
# ============================================================================


def test_delete_succeeds_on_204(make_client) -> None:
    client, recorder = make_client(httpx.Response(204))

    assert client.repos.delete("alice", "demo") is None
    assert recorder.requests[0].method == "DELETE"
    assert recorder.requests[0].url.path == "/repos/alice/demo"


def test_delete_404_is_remote_error(make_client) -> None:
    client, _ = make_client(httpx.Response(404, json={"message": "Not Found"}))

    with pytest.raises(RemoteError) as exc_info:
        client.repos.delete("alice", "demo")

    assert exc_info.value.status_code == 404


def test_delete_then_get_observes_absence(make_client) -> None:
    client, _ = make_client(
        httpx.Response(204),
        httpx.Response(404, json={"message": "Not Found"}),
    )

    client.repos.delete("alice", "demo")
    with pytest.raises(NotFoundError):
        client.repos.get("alice", "demo")


# ============================================================================
# context
# ============================================================================


@pytest.mark.parametrize("operation", ["get", "create", "update", "delete"])
def test_cancelled_context_skips_network(make_client, operation: str) -> None:
    client, recorder = make_client()
    context = RequestContext()
    context.cancel()

    calls = {
        "get": lambda: client.repos.get("alice", "demo", context=context),
        "create": lambda: client.repos.create(CreateRepositoryRequest(name="demo"), context=context),
        "update": lambda: client.repos.update("alice", "demo", UpdateRepositoryRequest(), context=context),
        "delete": lambda: client.repos.delete("alice", "demo", context=context),
    }

    with pytest.raises(TransportError):
        calls[operation]()

    assert recorder.requests == []


# ============================================================================
# helpers
# ============================================================================


def test_repo_path_quotes_slashes() -> None:
    assert repo_path("alice", "a/b") == "/repos/alice/a%2Fb"


def test_parse_repository_derives_missing_full_name() -> None:
    payload = repo_payload()
    del payload["full_name"]

    assert parse_repository(payload).full_name == "alice/demo"


def test_parse_repository_rejects_non_object() -> None:
    with pytest.raises(DecodeError):
        parse_repository(["not", "a", "repo"])


@pytest.mark.parametrize(
    "overrides",
    [
        {"private": "false"},
        {"has_issues": 1},
        {"has_wiki": None},
        {"id": "12"},
        {"id": 1.9},
        {"id": True},
        {"name": 42},
        {"owner": {"login": ["alice"]}},
        {"owner": "alice"},
        {"description": 5},
        {"full_name": {"owner": "alice"}},
    ],
)
def test_parse_repository_rejects_wrongly_typed_fields(overrides: dict) -> None:
    with pytest.raises(DecodeError):
        parse_repository(repo_payload(**overrides))


def test_wrongly_typed_boolean_from_server_is_decode_error(make_client) -> None:
    client, _ = make_client(httpx.Response(200, json=repo_payload(private="false")))

    with pytest.raises(DecodeError):
        client.repos.get("alice", "demo")


def test_parse_repository_defaults_absent_flags() -> None:
    payload = repo_payload()
    del payload["private"], payload["has_wiki"]

    repo = parse_repository(payload)

    assert repo.private is False
    assert repo.has_wiki is False
    assert repo.has_issues is True
