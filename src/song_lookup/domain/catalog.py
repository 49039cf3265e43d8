"""
Song Catalog - Immutable Record Collection.

The catalog is built once, explicitly, and handed to a service at
construction time. It never changes afterwards, which is what keeps the
caching layer coherent without any invalidation.

Design Notes:
    - Keyed by song_id, iterated in ascending id order
    - Read-only mapping view; no add/remove operations
    - Duplicate identifiers are rejected on construction
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from song_lookup.domain.entities import Song

# Seed records: (song_id, title, artist, album, duration_seconds)
DEFAULT_SONGS = (
    (1, "Water", "Tyla", "Album 1", 200),
    (2, "The Way I Are", "Timbaland, Keri Hilson, D.O.E.", "Shock Value", 179),
    (
        3,
        "Skate",
        "Bruno Mars, Anderson .Paak, Silk Sonic",
        "An Evening With Silk Sonic",
        203,
    ),
    (4, "Crush", "SEVENTEEN", "Attacca", 170),
    (5, "Closer", "Ne-Yo", "Year Of The Gentleman", 234),
    (6, "Water", "Kehlani", "It Was Good Until It Wasn't", 124),
)


class SongCatalog:
    """
    Immutable collection of songs keyed by identifier.

    Usage:
        catalog = SongCatalog.default()
        catalog.get(1)            # Song(song_id=1, title='Water', ...)
        [s.song_id for s in catalog]  # [1, 2, 3, 4, 5, 6]
    """

    def __init__(self, songs: Iterable[Song]) -> None:
        """
        Build a catalog from songs.

        Args:
            songs: Songs to include, in any order

        Raises:
            ValueError: If two songs share an identifier
        """
        by_id: Dict[int, Song] = {}
        for song in songs:
            if song.song_id in by_id:
                raise ValueError(f"Duplicate song_id in catalog: {song.song_id}")
            by_id[song.song_id] = song

        self._songs: Mapping[int, Song] = MappingProxyType(
            {song_id: by_id[song_id] for song_id in sorted(by_id)}
        )

    @classmethod
    def default(cls) -> SongCatalog:
        """Catalog holding the built-in seed songs."""
        return cls(
            Song(
                song_id=song_id,
                title=title,
                artist=artist,
                album=album,
                duration_seconds=duration,
            )
            for song_id, title, artist, album, duration in DEFAULT_SONGS
        )

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> SongCatalog:
        """
        Build a catalog from plain mappings (e.g. parsed YAML).

        Args:
            records: Mappings with Song field names as keys

        Returns:
            Validated catalog
        """
        return cls(Song.model_validate(dict(record)) for record in records)

    def get(self, song_id: int) -> Optional[Song]:
        """Song with the given identifier, or None."""
        return self._songs.get(song_id)

    def find_by_title(self, title: str) -> List[Song]:
        """All songs whose title matches, ignoring case."""
        return [song for song in self if song.matches_title(title)]

    def find_by_album(self, album: str) -> List[Song]:
        """All songs whose album matches, ignoring case."""
        return [song for song in self if song.matches_album(album)]

    @property
    def song_ids(self) -> List[int]:
        return list(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs.values())

    def __len__(self) -> int:
        return len(self._songs)

    def __contains__(self, song_id: object) -> bool:
        return song_id in self._songs

    def __repr__(self) -> str:
        return f"SongCatalog({len(self)} songs)"
