"""Lightweight in-memory cache for generated assets (QR data URIs)."""

from __future__ import annotations

from collections import OrderedDict
from threading import RLock
from typing import Any, Callable, Hashable, Optional


class Cache:
    """Concurrent-safe cache with size control; least recently used entries go first."""

    def __init__(self, max_size: int = 64) -> None:
        self.max_size = max(1, int(max_size))
        self._entries: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = RLock()

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            if key not in self._entries:
                return None
            self._entries.move_to_end(key)
            return self._entries[key]

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_or_set(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        with self._lock:
            cached = self.get(key)
            if cached is not None:
                return cached
            value = factory()
            self.set(key, value)
            return value
