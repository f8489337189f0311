"""Key-value store port and its implementations.

The engine persists saved filters and search history as JSON strings under
two keys. The store is the host's collaborator; the engine only reads and
writes through ``get``/``set`` and tolerates any failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import os
from pathlib import Path

import orjson


logger = logging.getLogger(__name__)


class AbstractKeyValueStore(ABC):
    """String-to-string store, in the shape of browser local storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored string, or None when the key is absent."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class InMemoryKeyValueStore(AbstractKeyValueStore):
    """Process-local store; the default for sessions and tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data


class JsonFileKeyValueStore(AbstractKeyValueStore):
    """All keys in a single JSON object file, replaced atomically on write.

    Read and decode errors propagate; the repositories above decide how to
    degrade.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(f"Stored value for {key!r} is {type(value).__name__}, expected str")
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_bytes(orjson.dumps(data, option=orjson.OPT_SORT_KEYS))
        os.replace(tmp_path, self.path)
        logger.debug("Wrote key %s to %s", key, self.path)

    def _read(self) -> dict[str, object]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        data = orjson.loads(raw)
        if not isinstance(data, dict):
            raise TypeError(f"{self.path} does not contain a JSON object")
        return data
