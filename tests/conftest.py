"""Shared test fixtures for gitfolio."""

from typing import Any

import pytest

from gitfolio.config import Settings
from gitfolio.services.exceptions import NetworkError
from gitfolio.services.storage import InMemoryStorage


def make_settings(**overrides: Any) -> Settings:
    """Create a Settings instance with test defaults."""
    defaults: dict[str, Any] = {
        "github_username": "octo",
        "featured_repos": ["Showcase"],
        "excluded_repos": ["Hidden-Repo"],
        "custom_descriptions": {"tooling": "Internal tooling scripts."},
        "custom_homepages": {"Showcase": "https://octo.example.com/showcase"},
        "project_images": {"Showcase": "images/showcase.png"},
        "owner_name": "Octo Cat",
        "portfolio_url": "https://octo.example.com/",
        "portfolio_title": "Octo Cat | Portfolio",
        "portfolio_text": "Check out Octo Cat's portfolio",
        "cache_ttl_seconds": 600,
    }
    return Settings(**(defaults | overrides))


def payload(name: str, **fields: Any) -> dict[str, Any]:
    """Minimal raw repository object as the GitHub API would return it."""
    return {"name": name, "html_url": f"https://github.com/octo/{name}", **fields}


class FakeSource:
    """Stands in for the GitHub adapter; records every call."""

    def __init__(self, repos: list[dict[str, Any]] | None = None, error: Exception | None = None):
        self.repos = repos or []
        self.error = error
        self.calls: list[str] = []

    async def list_user_repositories(self, username: str) -> list[dict[str, Any]]:
        self.calls.append(username)
        if self.error is not None:
            raise self.error
        return self.repos


class ClosableSource(FakeSource):
    """Fake source that owns a client which must be closed on shutdown."""

    def __init__(self, repos: list[dict[str, Any]] | None = None):
        super().__init__(repos)
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sample_repos() -> list[dict[str, Any]]:
    """Raw GitHub payloads in the order the API returns them."""
    return [
        {
            "name": "tooling",
            "description": None,
            "language": "Python",
            "topics": ["cli", "automation"],
            "stargazers_count": 3,
            "pushed_at": "2024-03-01T10:00:00Z",
            "homepage": "",
            "html_url": "https://github.com/octo/tooling",
            "fork": False,
        },
        {
            "name": "Showcase",
            "description": "The best thing I built",
            "language": "TypeScript",
            "topics": ["react", "portfolio", "web", "design", "ui"],
            "stargazers_count": 1,
            "pushed_at": "2023-06-15T08:30:00Z",
            "homepage": None,
            "html_url": "https://github.com/octo/Showcase",
            "fork": False,
        },
        {
            "name": "starred-lib",
            "description": "A popular library",
            "language": "Go",
            "topics": [],
            "stargazers_count": 42,
            "pushed_at": "2024-01-10T12:00:00Z",
            "homepage": "https://lib.example.com",
            "html_url": "https://github.com/octo/starred-lib",
            "fork": False,
        },
        {
            "name": "someone-elses",
            "description": "Forked",
            "language": "C",
            "topics": [],
            "stargazers_count": 100,
            "pushed_at": "2024-05-01T00:00:00Z",
            "homepage": None,
            "html_url": "https://github.com/octo/someone-elses",
            "fork": True,
        },
        {
            "name": "hidden-repo",
            "description": "Should never show",
            "language": "Rust",
            "topics": [],
            "stargazers_count": 7,
            "pushed_at": "2024-04-01T00:00:00Z",
            "homepage": None,
            "html_url": "https://github.com/octo/hidden-repo",
            "fork": False,
        },
    ]


@pytest.fixture
def failing_source() -> FakeSource:
    return FakeSource(error=NetworkError("GitHub API error: 403", status_code=403))
