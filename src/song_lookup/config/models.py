"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class LatencyConfig(BaseModel):
    """Simulated server latency."""

    delay_seconds: float = Field(default=1.0, ge=0)


class CacheSettings(BaseModel):
    """Configuration for the caching song service."""

    enabled: bool = True


class DemoConfig(BaseModel):
    """Lookups performed by the demo run."""

    song_ids: List[int] = Field(default_factory=lambda: [1, 2, 3, 4])
    title: str = Field(default="Water", min_length=1)
    album: str = Field(default="Shock Value", min_length=1)
    repeat: bool = False


class CatalogConfig(BaseModel):
    """Songs to serve. An empty list selects the built-in catalog."""

    songs: List[Dict[str, Any]] = Field(default_factory=list)


class AppConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    latency: LatencyConfig = Field(default_factory=LatencyConfig)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    demo: DemoConfig = Field(default_factory=DemoConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
