"""Per-rule geometry cache."""

from __future__ import annotations
from collections import OrderedDict

from steelbuilder.models.primitives import Primitive


class GeometryCache:
    """
    LRU map from a rule's cache key to the primitives it produced.

    Keys already include the rule id, so one cache serves every rule.
    Cached lists are never mutated by the generator; primitives are
    treated as immutable.
    """

    def __init__(self, max_size: int = 256) -> None:
        self.max_size = max_size
        self._entries: OrderedDict[str, list[Primitive]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> list[Primitive] | None:
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        return entry

    def put(self, key: str, primitives: list[Primitive]) -> None:
        self._entries[key] = primitives
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
