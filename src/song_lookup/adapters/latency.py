"""
Latency Strategies - Simulated I/O Delay.

The in-memory service waits on one of these before answering, to behave
like a remote metadata server. Production wiring uses a real delay; tests
inject NoDelay.

Design Notes:
    - SleepDelay is cancellable from another thread via cancel()
    - An early exit is reported by wait() returning False, never raised
"""

from __future__ import annotations

import logging
import threading

from song_lookup.config.models import LatencyConfig

logger = logging.getLogger(__name__)


class NoDelay:
    """Latency strategy that returns immediately."""

    def wait(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "NoDelay()"


class SleepDelay:
    """
    Blocking delay of a fixed duration.

    The wait runs on a threading.Event so another thread can end it early
    with cancel(). Cancellation only shortens the delay; the lookup that
    was waiting still completes normally.
    """

    def __init__(self, seconds: float = 1.0) -> None:
        """
        Initialize delay.

        Args:
            seconds: Duration of each wait in seconds

        Raises:
            ValueError: If seconds is negative
        """
        if seconds < 0:
            raise ValueError(f"Delay must be non-negative, got {seconds}")
        self.seconds = seconds
        self._cancelled = threading.Event()

    def wait(self) -> bool:
        """
        Block for the configured duration.

        Returns:
            True if the full delay elapsed, False if it was cancelled
        """
        if self._cancelled.wait(self.seconds):
            logger.debug(f"Simulated delay cancelled ({self.seconds}s)")
            self._cancelled.clear()
            return False
        return True

    def cancel(self) -> None:
        """End the current (or next) wait early."""
        self._cancelled.set()

    def __repr__(self) -> str:
        return f"SleepDelay(seconds={self.seconds})"


def build_delay(config: LatencyConfig) -> NoDelay | SleepDelay:
    """
    Create the latency strategy described by configuration.

    Args:
        config: Latency configuration

    Returns:
        NoDelay for a zero delay, otherwise SleepDelay
    """
    if config.delay_seconds == 0:
        return NoDelay()
    return SleepDelay(config.delay_seconds)
