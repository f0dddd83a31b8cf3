"""Widget Cache - key-value store of fetched payloads with lazy TTL expiry.

Invariants:
    - An entry older than ttl_seconds is never returned; it is evicted on the read that finds it stale
    - set() always overwrites and re-stamps the entry
    - No capacity bound, no LRU: size grows with distinct keys until clear()
    - None is a cacheable payload; callers pass MISSING as default to tell "absent" apart

Design Decisions:
    - Injected clock (defaults to time.monotonic): TTL tests drive time without sleeping
    - Owned object passed to the orchestrator, not a module-level dict
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wallboard.core.domain_types import CACHE_TTL_SECONDS, CacheKey


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    written_at: float


# Sentinel for "no fresh entry" when None is a legitimate payload
MISSING = object()


def make_cache_key(widget_type: str, widget_id: str) -> CacheKey:
    return (widget_type, widget_id)


class WidgetCache:
    """Time-bounded payload cache keyed by (widget_type, widget_id)."""

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[CacheKey, CacheEntry] = {}

    def get(self, key: CacheKey, default: Any = None) -> Any:
        """Return the cached value, or default when missing or stale."""
        entry = self._entries.get(key)
        if entry is None:
            return default
        if self._clock() - entry.written_at > self.ttl_seconds:
            del self._entries[key]
            return default
        return entry.value

    def set(self, key: CacheKey, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, written_at=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def size(self) -> int:
        """Number of stored entries, stale ones included until read."""
        return len(self._entries)

    def __len__(self) -> int:
        return self.size()
