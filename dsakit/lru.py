"""A least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any


class LRUCache:
    """Maps keys to values, evicting the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Any:
        """Return the value for key and mark it most recently used, or -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Insert or update key as most recently used, evicting the oldest if full."""
        self._entries.pop(key, None)
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value