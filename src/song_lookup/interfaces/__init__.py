"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - SongService: Point and scan lookups over song metadata
    - LatencyStrategy: Simulated I/O delay
    - MetricsCollector: Cache event recording

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
"""

from song_lookup.interfaces.song_service import (
    LatencyStrategy,
    MetricsCollector,
    SongService,
)

__all__ = [
    "LatencyStrategy",
    "MetricsCollector",
    "SongService",
]
