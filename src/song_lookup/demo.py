"""
Demo Run - End-to-End Lookup Sequence.

Wires catalog, service and caching proxy from configuration and performs
the demonstration sequence: point lookups by id, then a title scan, then
an album scan.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO, TypeVar

from song_lookup.adapters.cached_service import CachingSongService
from song_lookup.adapters.catalog_service import InMemorySongService
from song_lookup.adapters.latency import build_delay
from song_lookup.config.models import AppConfig, DemoConfig
from song_lookup.domain.catalog import SongCatalog
from song_lookup.domain.entities import Song
from song_lookup.interfaces.song_service import MetricsCollector, SongService

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class DemoReport:
    """What a demo run looked up and how long each lookup took."""

    point_results: List[tuple[int, Optional[Song], float]] = field(
        default_factory=list
    )
    title_results: List[Song] = field(default_factory=list)
    album_results: List[Song] = field(default_factory=list)


def build_catalog(config: AppConfig) -> SongCatalog:
    """Catalog from configuration, or the built-in seed catalog."""
    if config.catalog.songs:
        return SongCatalog.from_records(config.catalog.songs)
    return SongCatalog.default()


def build_service(
    config: AppConfig,
    metrics_collector: Optional[MetricsCollector] = None,
) -> CachingSongService:
    """
    Wire the caching song service described by configuration.

    Args:
        config: Application configuration
        metrics_collector: Optional collector for cache hit/miss events

    Returns:
        Caching proxy wrapping an in-memory song service
    """
    catalog = build_catalog(config)
    latency = build_delay(config.latency)
    logger.debug(f"Built {catalog!r} with {latency!r}")

    return CachingSongService(
        InMemorySongService(catalog, latency=latency),
        metrics_collector=metrics_collector,
        enabled=config.cache.enabled,
    )


def run_demo(
    service: SongService,
    demo: Optional[DemoConfig] = None,
    out: Optional[TextIO] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> DemoReport:
    """
    Perform the demonstration lookups and print the results.

    Args:
        service: Service to query (normally a CachingSongService)
        demo: Which ids, title and album to look up
        out: Stream to print to (stdout if None)
        metrics_collector: Optional collector for point lookup timings

    Returns:
        DemoReport with every result and point lookup timing
    """
    demo = demo or DemoConfig()
    report = DemoReport()

    def emit(line: str) -> None:
        print(line, file=out)

    passes = 2 if demo.repeat else 1
    for _ in range(passes):
        for song_id in demo.song_ids:
            song, elapsed = _timed(lambda: service.search_by_id(song_id))
            report.point_results.append((song_id, song, elapsed))
            if metrics_collector:
                metrics_collector.record_timing(
                    "search_by_id_seconds",
                    elapsed,
                    tags={"song_id": str(song_id)},
                )
            if song is None:
                emit(f"Song {song_id}: not found ({elapsed:.3f}s)")
            else:
                emit(f"Song {song_id}: {song} ({elapsed:.3f}s)")

    report.title_results = service.search_by_title(demo.title)
    emit(f"\nSongs with title '{demo.title}': {len(report.title_results)}")

    report.album_results = service.search_by_album(demo.album)
    emit(f"Songs in album '{demo.album}': {len(report.album_results)}")

    return report


def _timed(fn: Callable[[], T]) -> tuple[T, float]:
    """Call fn and return its result with elapsed wall time."""
    start = time.perf_counter()
    result = fn()
    return result, time.perf_counter() - start
