import json
from pathlib import Path
from typing import Dict, Optional, Protocol

from loguru import logger


class StorageClient(Protocol):
    """Synchronous string key-value store, shaped like browser local storage."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class InMemoryStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.store: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.store.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.store[key] = value

    def remove_item(self, key: str) -> None:
        self.store.pop(key, None)


class JsonFileStorage:
    """All keys live in a single JSON object on disk.

    The file is re-read on every access so that edits made by another process
    between requests are picked up; a missing or corrupt file reads as empty.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(f"[storage] unreadable store {self.path}, treating as empty: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"[storage] store {self.path} is not an object, treating as empty")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)
