"""
In-Memory Song Service.

The "real" song metadata service. Answers lookups against an injected
SongCatalog and waits on a latency strategy before every answer, as if
each call went to a remote server.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from song_lookup.adapters.latency import SleepDelay
from song_lookup.domain.catalog import SongCatalog
from song_lookup.domain.entities import Song
from song_lookup.interfaces.song_service import LatencyStrategy

logger = logging.getLogger(__name__)


class InMemorySongService:
    """Song service backed by an immutable catalog with simulated latency."""

    def __init__(
        self,
        catalog: SongCatalog,
        latency: Optional[LatencyStrategy] = None,
    ) -> None:
        """
        Initialize service.

        Args:
            catalog: Songs to serve
            latency: Delay applied to every lookup (1 second if None)
        """
        self.catalog = catalog
        self.latency = latency if latency is not None else SleepDelay()

    def search_by_id(self, song_id: int) -> Optional[Song]:
        """Look up a song by identifier, or None if it does not exist."""
        self._simulate_latency("search_by_id")
        return self.catalog.get(song_id)

    def search_by_title(self, title: str) -> List[Song]:
        """Linear scan for songs with the given title, ignoring case."""
        self._simulate_latency("search_by_title")
        return self.catalog.find_by_title(title)

    def search_by_album(self, album: str) -> List[Song]:
        """Linear scan for songs on the given album, ignoring case."""
        self._simulate_latency("search_by_album")
        return self.catalog.find_by_album(album)

    def _simulate_latency(self, operation: str) -> None:
        """Wait on the latency strategy; an early exit is not an error."""
        completed = self.latency.wait()
        if not completed:
            logger.debug(f"{operation}: delay ended early, continuing")
