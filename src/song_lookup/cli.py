"""Command-line entry point for the song lookup demo.

Usage::

    song-lookup
    song-lookup --latency 0.2 --repeat
    song-lookup --config config/default.yaml --profile fast --verbose

Builds the caching song service from configuration and runs the demo
sequence: point lookups by id, a title scan, then an album scan.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from song_lookup import configure_logging
from song_lookup.adapters.metrics_collector import InMemoryMetricsCollector
from song_lookup.config.loader import ConfigLoader
from song_lookup.config.models import AppConfig
from song_lookup.demo import build_service, run_demo

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``song-lookup`` command."""
    parser = argparse.ArgumentParser(
        prog="song-lookup",
        description="Look up songs through a caching proxy with simulated latency.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (built-in defaults if omitted)",
    )
    parser.add_argument(
        "--profile",
        default=None,
        help="Profile from config/profiles/ merged over the configuration",
    )
    parser.add_argument(
        "--latency",
        type=float,
        default=None,
        help="Override simulated server latency in seconds",
    )
    parser.add_argument(
        "--repeat",
        action="store_true",
        help="Repeat the point lookups to show cache hits",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show cache source log messages",
    )
    return parser


def cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Configuration layer built from command-line flags."""
    overrides: Dict[str, Any] = {}
    if args.latency is not None:
        overrides["latency"] = {"delay_seconds": args.latency}
    if args.repeat:
        overrides["demo"] = {"repeat": True}
    return overrides


def load_app_config(args: argparse.Namespace) -> AppConfig:
    """Configuration from file and profile, with command-line overrides."""
    loader = ConfigLoader(base_path=Path.cwd())
    return loader.load(args.config, args.profile, overrides=cli_overrides(args))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the demo from the command line.

    Args:
        argv: Arguments without the program name (sys.argv if None)

    Returns:
        Process exit status: 0 on success, 2 for invalid configuration
    """
    args = build_parser().parse_args(argv)
    configure_logging(logging.INFO if args.verbose else logging.WARNING)

    try:
        config = load_app_config(args)
        metrics = InMemoryMetricsCollector()
        service = build_service(config, metrics_collector=metrics)
    except (FileNotFoundError, ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG_ERROR

    run_demo(service, config.demo, metrics_collector=metrics)

    for name, summary in sorted(metrics.get_metrics().items()):
        logger.info(
            f"Metric {name}: count={summary['count']} "
            f"total={summary['total']:.3f} last={summary['last']:.3f}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
