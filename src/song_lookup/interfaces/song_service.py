"""
Song Service Protocol.

Defines the interface shared by every song lookup implementation. The real
in-memory service and the caching wrapper both satisfy it, so callers never
need to know which one they hold.

The service is responsible for:
    - Point lookups by song identifier (at most one result)
    - Scan lookups by title and by album (zero or more results)

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - "Not found" is None or an empty list, never an exception
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from song_lookup.domain.entities import Song


@runtime_checkable
class SongService(Protocol):
    """Abstract interface for song metadata lookups."""

    def search_by_id(self, song_id: int) -> Optional[Song]:
        """
        Look up a song by its identifier.

        Args:
            song_id: Identifier of the song

        Returns:
            The matching song, or None if no song has that identifier
        """
        ...

    def search_by_title(self, title: str) -> List[Song]:
        """
        Find songs whose title matches, ignoring case.

        Args:
            title: Title to match exactly (case-insensitive)

        Returns:
            Matching songs, empty if none
        """
        ...

    def search_by_album(self, album: str) -> List[Song]:
        """
        Find songs on an album, ignoring case.

        Args:
            album: Album name to match exactly (case-insensitive)

        Returns:
            Matching songs, empty if none
        """
        ...


@runtime_checkable
class LatencyStrategy(Protocol):
    """Simulated I/O delay applied before every provider lookup."""

    def wait(self) -> bool:
        """Block for the delay. Returns False if the wait ended early."""
        ...


class MetricsCollector(Protocol):
    """Protocol for metrics collection."""

    def record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a metric."""
        ...

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        ...
