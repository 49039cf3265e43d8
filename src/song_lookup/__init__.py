"""
Song Lookup - Cached Song Metadata Lookup Service.

A small lookup service for song metadata that demonstrates request caching
through the proxy pattern. A "real" service answers lookups over an
in-memory catalog with simulated latency; a caching wrapper serves repeated
point lookups from memory.

Architecture:
    - Ports & Adapters: services implement the SongService protocol
    - Dependency Injection: catalog and latency strategy are passed in
    - Configuration-driven wiring via YAML

Main Components:
    - domain: Song entity and the immutable SongCatalog
    - interfaces: SongService protocol
    - adapters: InMemorySongService, CachingSongService, delay strategies
    - caching: SongCache (unbounded, write-once memoization)
    - config: Configuration models and loaders

Example:
    >>> from song_lookup import CachingSongService, InMemorySongService, SongCatalog
    >>> service = CachingSongService(InMemorySongService(SongCatalog.default()))
    >>> service.search_by_id(1).title
    'Water'

"""

import logging

__version__ = "0.2.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Song Lookup.

    Call this at application startup to see cache source messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import song_lookup
        >>> song_lookup.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("song_lookup").setLevel(level)


from song_lookup.adapters.cached_service import CachingSongService  # noqa: E402
from song_lookup.adapters.catalog_service import InMemorySongService  # noqa: E402
from song_lookup.domain.catalog import SongCatalog  # noqa: E402
from song_lookup.domain.entities import Song  # noqa: E402

__all__ = [
    "CachingSongService",
    "InMemorySongService",
    "Song",
    "SongCatalog",
    "configure_logging",
]
