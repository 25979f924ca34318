from dataclasses import dataclass
from typing import List

from loguru import logger

from ..datasources.base import RepoPayload, RepoSource
from ..datasources.github_adapter import parse_repositories
from ..schemas import RepositoryRecord
from .cache import RepoCache
from .exceptions import ParseError


@dataclass(frozen=True)
class FetchResult:
    data: List[RepoPayload]
    records: List[RepositoryRecord]
    source: str  # "cache" or "remote"


class RepoFetcher:
    def __init__(self, source: RepoSource, cache: RepoCache, username: str):
        self.source = source
        self.cache = cache
        self.username = username

    async def fetch_repos(self, force: bool = False) -> FetchResult:
        """Return cached repositories when fresh, otherwise fetch and re-cache.

        NetworkError and ParseError from the source propagate. The cache is only
        written after a remote payload has parsed, so a bad response never
        replaces a good entry. Unparseable cached data counts as a miss.
        """
        if not force:
            cached = self.cache.load(self.username)
            if cached is not None:
                try:
                    records = parse_repositories(cached)
                except ParseError:
                    logger.warning("[fetch] cached repositories are invalid, refetching")
                else:
                    logger.info(f"[fetch] loaded {len(records)} repositories from cache")
                    return FetchResult(data=cached, records=records, source="cache")

        data = await self.source.list_user_repositories(self.username)
        records = parse_repositories(data)
        self.cache.save(self.username, data)
        return FetchResult(data=data, records=records, source="remote")
