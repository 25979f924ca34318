"""Tests for the GitHub adapter, using httpx.MockTransport."""

import asyncio

import httpx
import pytest

from gitfolio.datasources.github_adapter import GitHubAdapter, parse_repositories
from gitfolio.services.exceptions import NetworkError, ParseError

from conftest import make_settings, payload


def make_adapter(handler, **overrides) -> GitHubAdapter:
    return GitHubAdapter(make_settings(**overrides), transport=httpx.MockTransport(handler))


def test_request_shape(sample_repos) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=sample_repos)

    adapter = make_adapter(handler, github_token="secret")
    data = asyncio.run(adapter.list_user_repositories("octo"))

    assert data == sample_repos
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/users/octo/repos"
    assert request.url.params["per_page"] == "100"
    assert request.url.params["sort"] == "updated"
    assert request.headers["Accept"] == "application/vnd.github+json"
    assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"
    assert request.headers["Authorization"] == "Bearer secret"


def test_no_token_sends_no_authorization() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    asyncio.run(make_adapter(handler, github_token=None).list_user_repositories("octo"))
    assert "Authorization" not in seen[0].headers


def test_non_success_status_raises_network_error() -> None:
    adapter = make_adapter(lambda request: httpx.Response(403, json={"message": "rate limited"}))
    with pytest.raises(NetworkError) as excinfo:
        asyncio.run(adapter.list_user_repositories("octo"))
    assert excinfo.value.status_code == 403
    assert str(excinfo.value) == "GitHub API error: 403"


def test_transport_failure_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError) as excinfo:
        asyncio.run(make_adapter(handler).list_user_repositories("octo"))
    assert excinfo.value.status_code is None


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, content=b"<html>not json</html>"),
        httpx.Response(200, json={"message": "not a list"}),
        httpx.Response(200, content=b"[\xff\xfe\xfa]"),
    ],
    ids=["malformed", "wrong-shape", "invalid-utf8"],
)
def test_bad_body_raises_parse_error(response: httpx.Response) -> None:
    with pytest.raises(ParseError):
        asyncio.run(make_adapter(lambda request: response).list_user_repositories("octo"))


class TestParseRepositories:
    """Test conversion of raw payloads into records."""

    def test_defaults_for_missing_fields(self) -> None:
        [record] = parse_repositories([payload("b", fork=True)])
        assert record.fork is True
        assert record.topics == []
        assert record.stargazers_count == 0
        assert record.pushed_at is None

    def test_unknown_fields_ignored(self, sample_repos) -> None:
        raw = dict(sample_repos[0], owner={"login": "octo"}, forks_count=9)
        [record] = parse_repositories([raw])
        assert record.name == "tooling"
        assert record.pushed_at is not None and record.pushed_at.year == 2024

    @pytest.mark.parametrize(
        "raw",
        [
            [{"description": "no name"}],
            [{"name": "x"}],
            [payload("x", stargazers_count=-1)],
            ["not an object"],
        ],
        ids=["missing-name", "missing-html-url", "negative-stars", "not-object"],
    )
    def test_invalid_payloads(self, raw) -> None:
        with pytest.raises(ParseError):
            parse_repositories(raw)
