"""Per-key, TTL-based cache of formatted profile context strings.

Entries expire lazily: a stale entry stays in the map until it is
overwritten or invalidated, but ``get`` treats it as absent. The cache is a
process-local optimization only; the profile store stays the source of truth.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from ..utils.constants import CREATOR_PROFILE_FALLBACK, INSTAGRAM_INTELLIGENCE_FALLBACK

logger = structlog.get_logger()

Clock = Callable[[], int]


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class CacheEntry:
    key: str
    formatted_profile: str
    written_at_ms: int


@dataclass(frozen=True)
class CacheEntryInfo:
    """Read-only view of one entry for monitoring."""

    key: str
    age_ms: int
    written_at_ms: int
    is_fallback: bool


@dataclass(frozen=True)
class CacheStats:
    size: int
    entries: tuple[CacheEntryInfo, ...]


class ProfileContextCache:
    """Memoize formatted profile strings per cache key for ``ttl_ms``."""

    def __init__(self, ttl_ms: int, clock: Clock = epoch_millis) -> None:
        if ttl_ms < 0:
            raise ValueError(f"ttl_ms must be >= 0, got {ttl_ms}")
        self.ttl_ms = ttl_ms
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def now(self) -> int:
        return self._clock()

    def get(self, key: str) -> str | None:
        """Return the cached value iff present and younger than the TTL."""
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Profile context cache miss", cache_key=key)
            return None
        if self.now() - entry.written_at_ms >= self.ttl_ms:
            logger.debug("Profile context cache entry expired", cache_key=key)
            return None
        logger.debug("Profile context cache hit", cache_key=key)
        return entry.formatted_profile

    def put(self, key: str, formatted_profile: str, now: int | None = None) -> None:
        """Store ``formatted_profile`` under ``key``; last writer wins."""
        written_at = self.now() if now is None else now
        self._entries[key] = CacheEntry(key=key, formatted_profile=formatted_profile, written_at_ms=written_at)
        logger.debug("Profile context cached", cache_key=key)

    def invalidate(self, key: str | None = None) -> None:
        """Drop one entry, or every entry when ``key`` is omitted."""
        if key is None:
            self._entries.clear()
            logger.debug("Profile context cache cleared")
        else:
            self._entries.pop(key, None)
            logger.debug("Profile context cache invalidated", cache_key=key)

    def contains_fresh(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and self.now() - entry.written_at_ms < self.ttl_ms

    def stats(self) -> CacheStats:
        """Snapshot of the current entries, expired ones included."""
        now = self.now()
        entries = tuple(
            CacheEntryInfo(
                key=entry.key,
                age_ms=now - entry.written_at_ms,
                written_at_ms=entry.written_at_ms,
                is_fallback=entry.formatted_profile in (CREATOR_PROFILE_FALLBACK, INSTAGRAM_INTELLIGENCE_FALLBACK),
            )
            for entry in self._entries.values()
        )
        return CacheStats(size=len(self._entries), entries=entries)

    def __len__(self) -> int:
        return len(self._entries)
