"""
Key-value backends for session persistence.

A backend stores string values under string keys:
- get(key) -> str or None
- set(key, value)
- remove(key)

Backends may raise; SessionStore absorbs their failures.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..utils.config import STORAGE_DIR
from ..utils.logger import setup_logger

logger = setup_logger("kv_store")


class KeyValueStore(ABC):
    """String key-value storage interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Value for key, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key. Missing keys are ignored."""


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store, mainly for tests and short-lived hosts."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Stores each key in its own file.

    Values are written as given (callers pass JSON text), one
    `<key>.json` file per key under the storage directory.
    """

    def __init__(self, storage_dir: Optional[Path] = None):
        """
        Initialize file store.

        Args:
            storage_dir: Directory for value files. Default: STORAGE_DIR
        """
        if storage_dir is None:
            storage_dir = STORAGE_DIR

        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"JsonFileKeyValueStore initialized, storage: {self.storage_dir}")

    def _path(self, key: str) -> Path:
        safe_key = re.sub(r'[^A-Za-z0-9_.-]', '_', key)
        return self.storage_dir / f"{safe_key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix('.json.tmp')
        with open(tmp_path, 'w', encoding='utf-8') as f:
            f.write(value)
        tmp_path.replace(path)

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
