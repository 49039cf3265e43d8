"""
Caching Song Service - Caching Proxy for Song Services.

Wraps any SongService implementation and memoizes point lookups.

Design Notes:
    - Proxy pattern: same interface as the wrapped service
    - Caches search_by_id() results that are present; never caches absence
    - search_by_title() / search_by_album() always delegate
    - No invalidation: the catalog behind the service never changes
    - Reports the source of each point lookup ("cache" or "server") via
      logging and an optional MetricsCollector
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from song_lookup.caching.song_cache import CacheStats, SongCache
from song_lookup.domain.entities import Song
from song_lookup.interfaces.song_service import MetricsCollector, SongService

logger = logging.getLogger(__name__)

SOURCE_CACHE = "cache"
SOURCE_SERVER = "server"


class CachingSongService:
    """
    Caching proxy for SongService implementations.

    The wrapped service is referenced, not owned: it may be shared with
    other callers and is never closed or reconfigured here.

    Usage:
        service = InMemorySongService(SongCatalog.default())
        cached_service = CachingSongService(service)

        # First call: cache miss, fetches from the service
        song = cached_service.search_by_id(1)

        # Second call with the same id: cache hit, no latency
        song = cached_service.search_by_id(1)
    """

    def __init__(
        self,
        service: SongService,
        cache: Optional[SongCache] = None,
        metrics_collector: Optional[MetricsCollector] = None,
        enabled: bool = True,
    ) -> None:
        """
        Initialize caching service.

        Args:
            service: Underlying song service to wrap
            cache: Song cache instance (creates one if None)
            metrics_collector: Optional metrics collector for hit/miss events
            enabled: If False, every lookup is delegated and nothing is stored
        """
        self.service = service
        self.cache = cache if cache is not None else SongCache()
        self.metrics = metrics_collector
        self.enabled = enabled

        self._stats = CacheStats()

    def search_by_id(self, song_id: int) -> Optional[Song]:
        """
        Look up a song by identifier, serving repeats from the cache.

        Args:
            song_id: Identifier of the song

        Returns:
            The matching song, or None if the service has no such song
        """
        if self.enabled:
            cached = self.cache.get(song_id)
            if cached is not None:
                self._record(SOURCE_CACHE, song_id)
                logger.info(f"Fetching song metadata from cache for song ID: {song_id}")
                return cached

        self._record(SOURCE_SERVER, song_id)
        song = self.service.search_by_id(song_id)

        if song is None:
            logger.info(f"Song ID {song_id} not found on server")
            return None

        logger.info(f"Fetching song metadata from server for song ID: {song_id}")
        if self.enabled:
            self.cache.put(song_id, song)
        return song

    def search_by_title(self, title: str) -> List[Song]:
        """
        Find songs by title.

        Note: Never cached; scan results are not keyed by a single id.
        """
        return self.service.search_by_title(title)

    def search_by_album(self, album: str) -> List[Song]:
        """
        Find songs by album.

        Note: Never cached; scan results are not keyed by a single id.
        """
        return self.service.search_by_album(album)

    def get_cache_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dict with point lookup hit/miss counts and cache size
        """
        return {
            "enabled": self.enabled,
            "hits": self._stats.hits,
            "misses": self._stats.misses,
            "hit_rate": self._stats.hit_rate,
            "entries": len(self.cache),
        }

    def _record(self, source: str, song_id: int) -> None:
        """Record where a point lookup was answered from."""
        if source == SOURCE_CACHE:
            self._stats.hits += 1
            name = "cache_hit"
        else:
            self._stats.misses += 1
            name = "cache_miss"

        if self.metrics:
            self.metrics.record_metric(
                name,
                1.0,
                tags={"source": source, "song_id": str(song_id)},
            )
