"""A thread-safe in-memory string key-value store."""

from __future__ import annotations

import threading
from collections.abc import Iterable


class Store:
    """String keys mapped to string values, guarded by a lock."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        """Return the value for ``key``, or ``None`` if it is absent."""
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        with self._lock:
            self._data[key] = value

    def delete(self, keys: Iterable[str]) -> int:
        """Remove the given keys and return how many were present."""
        with self._lock:
            return sum(self._data.pop(key, None) is not None for key in keys)