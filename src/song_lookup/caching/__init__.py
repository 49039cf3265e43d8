"""
Caching Layer.

Provides the memoization store used by the caching song service:
    - SongCache: Unbounded, write-once mapping of song id to song
    - CacheStats: Hit/miss counters kept by the caching service
"""

from song_lookup.caching.song_cache import CacheStats, SongCache

__all__ = [
    "CacheStats",
    "SongCache",
]
