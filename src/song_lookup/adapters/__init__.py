"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the protocols defined in
the interfaces package, following the Ports & Adapters pattern.

Services:
    - InMemorySongService: Catalog-backed service with simulated latency
    - CachingSongService: Caching proxy around any SongService

Latency:
    - SleepDelay: Real, cancellable blocking delay
    - NoDelay: Zero delay for tests

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection
"""

from song_lookup.adapters.cached_service import CachingSongService
from song_lookup.adapters.catalog_service import InMemorySongService
from song_lookup.adapters.latency import NoDelay, SleepDelay, build_delay
from song_lookup.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "CachingSongService",
    "InMemoryMetricsCollector",
    "InMemorySongService",
    "NoDelay",
    "SleepDelay",
    "build_delay",
]
