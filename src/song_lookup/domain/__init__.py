"""
Domain Layer - Core Entities.

Contains the song entity and the immutable catalog the lookup services
operate on. No infrastructure dependencies.
"""

from song_lookup.domain.catalog import DEFAULT_SONGS, SongCatalog
from song_lookup.domain.entities import Song

__all__ = [
    "DEFAULT_SONGS",
    "Song",
    "SongCatalog",
]
