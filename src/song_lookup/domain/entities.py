"""
Core Domain Entities.

This module defines the song record that every lookup returns. Songs are
immutable values; a catalog creates them once and nothing mutates them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Song(BaseModel):
    """Metadata for a single song."""

    song_id: int = Field(..., ge=1, description="Unique song identifier")
    title: str = Field(..., min_length=1, description="Song title")
    artist: str = Field(..., min_length=1, description="Performing artist(s)")
    album: str = Field(..., min_length=1, description="Album the song appears on")
    duration_seconds: int = Field(..., ge=0, description="Track length in seconds")

    model_config = {"frozen": True}

    def matches_title(self, title: str) -> bool:
        """Case-insensitive exact comparison against the title."""
        return self.title.casefold() == title.casefold()

    def matches_album(self, album: str) -> bool:
        """Case-insensitive exact comparison against the album."""
        return self.album.casefold() == album.casefold()

    def __str__(self) -> str:
        return f"{self.title} by {self.artist}"
