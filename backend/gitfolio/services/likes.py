import json
from typing import Dict

from loguru import logger

from .storage import StorageClient

LIKES_KEY = "projectLikes"


class LikeStore:
    """Per-repository like counters kept in local storage.

    Single user, single writer: every increment reads the whole map, bumps one
    entry and writes the whole map back.
    """

    def __init__(self, storage: StorageClient):
        self.storage = storage

    def _read(self) -> Dict[str, int]:
        raw = self.storage.get_item(LIKES_KEY)
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("[likes] stored likes are not valid JSON, starting from empty")
            return {}
        if not isinstance(data, dict):
            return {}
        return {
            name: count
            for name, count in data.items()
            if isinstance(count, int) and not isinstance(count, bool) and count >= 0
        }

    def _write(self, likes: Dict[str, int]) -> None:
        self.storage.set_item(LIKES_KEY, json.dumps(likes, ensure_ascii=False))

    def get_likes(self, name: str) -> int:
        return self._read().get(name, 0)

    def all_likes(self) -> Dict[str, int]:
        return self._read()

    def set_likes(self, name: str, count: int) -> None:
        if count < 0:
            raise ValueError("like count must be non-negative")
        likes = self._read()
        likes[name] = count
        self._write(likes)

    def increment_likes(self, name: str) -> int:
        likes = self._read()
        likes[name] = likes.get(name, 0) + 1
        self._write(likes)
        return likes[name]
