"""
Configuration Package - Models and Loaders.

    - Pydantic models for type-safe configuration
    - Layered YAML loader (file, profile, overrides) with validation
    - Support for configuration profiles (e.g. "fast" for zero latency)

Configuration Structure:
    - AppConfig: Root configuration object
    - LatencyConfig: Simulated server delay
    - CacheSettings: Caching proxy on/off
    - DemoConfig: Lookups performed by the demo run
    - CatalogConfig: Optional replacement song list
"""

from song_lookup.config.loader import ConfigLoader
from song_lookup.config.models import (
    AppConfig,
    CacheSettings,
    CatalogConfig,
    DemoConfig,
    LatencyConfig,
)

__all__ = [
    "AppConfig",
    "CacheSettings",
    "CatalogConfig",
    "ConfigLoader",
    "DemoConfig",
    "LatencyConfig",
]
