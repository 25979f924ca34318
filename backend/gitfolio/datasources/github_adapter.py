from typing import Any, Iterable, List, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..schemas import RepositoryRecord
from ..services.exceptions import NetworkError, ParseError
from .base import RepoPayload, RepoSource


class GitHubAdapter(RepoSource):
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.settings.github_api_version,
            "User-Agent": "gitfolio",
        }
        if self.settings.github_token:
            headers["Authorization"] = f"Bearer {self.settings.github_token}"
        self.headers = headers
        client_kwargs: dict[str, Any] = {
            "base_url": str(self.settings.github_base_url),
        }
        if self.settings.github_proxy:
            client_kwargs["proxy"] = self.settings.github_proxy
        if transport is not None:
            client_kwargs["transport"] = transport
        self.client = httpx.AsyncClient(**client_kwargs)

    async def list_user_repositories(self, username: str) -> List[RepoPayload]:
        params = {"per_page": 100, "sort": "updated"}
        logger.info(f"[github] fetching repositories for {username}")
        try:
            resp = await self.client.get(
                f"/users/{username}/repos", params=params, headers=self.headers, timeout=20
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise NetworkError(f"GitHub API error: {status}", status_code=status) from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"GitHub request error: {type(exc).__name__} {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise ParseError(f"GitHub returned malformed JSON: {exc}") from exc
        if not isinstance(data, list):
            raise ParseError(f"Expected a list of repositories, got {type(data).__name__}")
        logger.info(f"[github] received {len(data)} repositories for {username}")
        return data

    async def aclose(self) -> None:
        await self.client.aclose()


def parse_repositories(raw: Iterable[Any]) -> List[RepositoryRecord]:
    try:
        return [RepositoryRecord.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise ParseError(f"Invalid repository data: {exc.error_count()} error(s)") from exc
