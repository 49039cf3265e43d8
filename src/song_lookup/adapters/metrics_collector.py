"""
In-Memory Metrics Collector.

A simple metrics collector that stores cache events and lookup timings in
memory.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        """Initialize the metrics collector."""
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}

    def record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a counter-style metric (e.g. cache_hit)."""
        self._record(name, "count", value, tags)

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        self._record(name, "timing", duration_seconds, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric name: count, total and last value."""
        summary = {}
        for name, entries in self._metrics.items():
            if entries:
                values = [e["value"] for e in entries]
                summary[name] = {
                    "count": len(values),
                    "total": sum(values),
                    "last": values[-1],
                }
        return summary

    def get_events(self, name: str) -> List[Dict[str, Any]]:
        """Raw recorded entries for one metric name, oldest first."""
        return list(self._metrics.get(name, []))

    def clear(self) -> None:
        """Clear all metrics."""
        self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: Any,
        tags: Optional[Dict[str, str]],
    ) -> None:
        """Internal recording method."""
        if name not in self._metrics:
            self._metrics[name] = []

        self._metrics[name].append(
            {
                "type": metric_type,
                "value": value,
                "tags": tags or {},
                "timestamp": datetime.now().isoformat(),
            }
        )
