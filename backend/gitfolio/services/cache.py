import json
import time
from typing import Callable, List, Optional

from loguru import logger
from pydantic import ValidationError

from ..datasources.base import RepoPayload
from ..schemas import CacheEntry
from .exceptions import ParseError
from .storage import StorageClient


def cache_key(username: str) -> str:
    return f"gh_repos_{username}"


class RepoCache:
    def __init__(
        self,
        storage: StorageClient,
        ttl_seconds: int,
        clock: Callable[[], float] = time.time,
    ):
        self.storage = storage
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def read_entry(self, username: str) -> Optional[CacheEntry]:
        raw = self.storage.get_item(cache_key(username))
        if raw is None:
            return None
        try:
            return CacheEntry.model_validate_json(raw)
        except ValidationError as exc:
            raise ParseError(f"Corrupt cache entry for {username}") from exc

    def load(self, username: str) -> Optional[List[RepoPayload]]:
        """Cached repositories if the entry is younger than the TTL, else None."""
        try:
            entry = self.read_entry(username)
        except ParseError as exc:
            logger.warning(f"[cache] {exc}; ignoring")
            return None
        if entry is None:
            return None
        age_ms = self._now_ms() - entry.saved_at
        if age_ms >= self.ttl_seconds * 1000:
            logger.debug(f"[cache] entry for {username} expired ({age_ms} ms old)")
            return None
        return entry.data

    def save(self, username: str, data: List[RepoPayload]) -> None:
        entry = {"savedAt": self._now_ms(), "data": data}
        self.storage.set_item(cache_key(username), json.dumps(entry, ensure_ascii=False))
