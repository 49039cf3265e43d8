"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List
from unittest.mock import Mock

import pytest

from song_lookup.adapters.cached_service import CachingSongService
from song_lookup.adapters.catalog_service import InMemorySongService
from song_lookup.adapters.latency import NoDelay
from song_lookup.adapters.metrics_collector import InMemoryMetricsCollector
from song_lookup.config.models import AppConfig, LatencyConfig
from song_lookup.domain.catalog import SongCatalog
from song_lookup.domain.entities import Song


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def catalog() -> SongCatalog:
    """Built-in seed catalog."""
    return SongCatalog.default()


@pytest.fixture
def song_service(catalog) -> InMemorySongService:
    """Real in-memory service with no simulated delay."""
    return InMemorySongService(catalog, latency=NoDelay())


@pytest.fixture
def spy_service(song_service) -> Mock:
    """Mock wrapping the real service so calls are counted."""
    return Mock(wraps=song_service)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def caching_service(spy_service, metrics_collector) -> CachingSongService:
    """Caching proxy over the spied service."""
    return CachingSongService(spy_service, metrics_collector=metrics_collector)


@pytest.fixture
def fast_config() -> AppConfig:
    """Default configuration with the delay switched off."""
    return AppConfig(latency=LatencyConfig(delay_seconds=0))


@pytest.fixture
def sample_songs() -> List[Song]:
    """A small unordered song list."""
    return [
        Song(
            song_id=20,
            title="Midnight City",
            artist="M83",
            album="Hurry Up, We're Dreaming",
            duration_seconds=243,
        ),
        Song(
            song_id=10,
            title="Intro",
            artist="The xx",
            album="xx",
            duration_seconds=127,
        ),
        Song(
            song_id=30,
            title="Intro",
            artist="M83",
            album="Hurry Up, We're Dreaming",
            duration_seconds=322,
        ),
    ]
