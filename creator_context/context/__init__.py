"""Creator profile context: cache, formatting and builders."""

from .builder import CreatorContextBuilder, is_fallback
from .cache import CacheEntry, CacheEntryInfo, CacheStats, ProfileContextCache

__all__ = [
    "CacheEntry",
    "CacheEntryInfo",
    "CacheStats",
    "CreatorContextBuilder",
    "ProfileContextCache",
    "is_fallback",
]
