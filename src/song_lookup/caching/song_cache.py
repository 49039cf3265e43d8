"""
Song Cache - Write-Once Memoization of Point Lookups.

Holds songs fetched by identifier for the lifetime of the cache.

Design Notes:
    - Keyed by the identifier that was looked up
    - Unbounded: no eviction, no expiry
    - Write-once per key: a stored song never changes
    - Only present songs are stored; absence is never memoized
    - Hit/miss counting lives in the caching service, not here
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from song_lookup.domain.entities import Song

logger = logging.getLogger(__name__)


@dataclass
class CacheStats:
    """Point lookup statistics."""

    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class SongCache:
    """
    In-memory mapping from looked-up identifier to song.

    Entries move through two states only: absent, then present. Once a
    song is stored for an identifier it stays there unchanged.
    """

    def __init__(self) -> None:
        self._entries: Dict[int, Song] = {}

    def get(self, song_id: int) -> Optional[Song]:
        """Cached song for the identifier, or None if not cached."""
        return self._entries.get(song_id)

    def put(self, song_id: int, song: Song) -> None:
        """
        Store a song under the identifier it was looked up by.

        Storing an equal song again is a no-op.

        Args:
            song_id: Identifier the song was requested with
            song: Song returned for that identifier

        Raises:
            ValueError: If a different song is already cached for the id
        """
        existing = self._entries.get(song_id)
        if existing is not None:
            if existing != song:
                raise ValueError(f"Cache entry for song_id {song_id} is already set")
            return

        self._entries[song_id] = song
        logger.debug(f"Cache SET: song_id={song_id}")

    def __contains__(self, song_id: object) -> bool:
        return song_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
