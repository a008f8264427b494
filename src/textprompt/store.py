"""Key-value store persisted as a single JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Store(Protocol):
    """Minimal persistence contract used by prompt history."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class JsonStore:
    """Stores JSON-serializable values under string keys in one file.

    The file is read lazily on first access and rewritten on every change.
    A missing or empty file reads as an empty store.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            if self.path.exists():
                text = self.path.read_text(encoding="utf-8")
                self._data = json.loads(text) if text.strip() else {}
                logger.debug("Loaded %d keys from %s", len(self._data), self.path)
            else:
                self._data = {}
        return self._data

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self._load(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        logger.debug("Saved %s", self.path)

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._load()[key] = value
        self._save()

    def has(self, key: str) -> bool:
        return key in self._load()

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save()

    def clear(self) -> None:
        self._data = {}
        self._save()
