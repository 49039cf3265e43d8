"""
Integration Tests for the demo run and command-line entry point.

Test Aspects Covered:
    ✅ Business Logic: Lookup sequence and printed results
    ✅ Error Handling: Bad configuration exits with status 2
    ✅ Integration: Config -> wiring -> lookups
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from unittest.mock import Mock

import pytest

from song_lookup.adapters.cached_service import CachingSongService
from song_lookup.adapters.latency import NoDelay, SleepDelay
from song_lookup.adapters.metrics_collector import InMemoryMetricsCollector
from song_lookup.cli import EXIT_CONFIG_ERROR, build_parser, cli_overrides, main
from song_lookup.config.loader import ConfigLoader
from song_lookup.config.models import AppConfig, CacheSettings, DemoConfig, LatencyConfig
from song_lookup.demo import build_catalog, build_service, run_demo


class TestBuildService:
    """Wiring from configuration."""

    def test_default_wiring(self) -> None:
        service = build_service(AppConfig())

        assert isinstance(service, CachingSongService)
        assert isinstance(service.service.latency, SleepDelay)
        assert service.enabled is True
        assert len(service.service.catalog) == 6

    def test_zero_latency_and_disabled_cache(self) -> None:
        config = AppConfig(
            latency=LatencyConfig(delay_seconds=0),
            cache=CacheSettings(enabled=False),
        )

        service = build_service(config)

        assert isinstance(service.service.latency, NoDelay)
        assert service.enabled is False

    def test_catalog_from_config(self, sample_config_path) -> None:
        config = ConfigLoader().load(sample_config_path)

        catalog = build_catalog(config)

        assert catalog.song_ids == [1, 7]
        assert catalog.get(7).album == "Collage"


class TestRunDemo:
    """The demonstration sequence."""

    def test_operation_sequence(self) -> None:
        """Four point lookups, then a title scan, then an album scan."""
        service = Mock()
        service.search_by_id.return_value = None
        service.search_by_title.return_value = []
        service.search_by_album.return_value = []

        run_demo(service, out=io.StringIO())

        names = [c[0] for c in service.method_calls]
        assert names == [
            "search_by_id",
            "search_by_id",
            "search_by_id",
            "search_by_id",
            "search_by_title",
            "search_by_album",
        ]
        assert [c.args for c in service.method_calls] == [
            (1,), (2,), (3,), (4,), ("Water",), ("Shock Value",),
        ]

    def test_output_with_seed_catalog(self, fast_config) -> None:
        out = io.StringIO()
        service = build_service(fast_config)

        report = run_demo(service, fast_config.demo, out=out)

        text = out.getvalue()
        assert "Song 1: Water by Tyla" in text
        assert "Song 4: Crush by SEVENTEEN" in text
        assert "Songs with title 'Water': 2" in text
        assert "Songs in album 'Shock Value': 1" in text
        assert [song_id for song_id, _, _ in report.point_results] == [1, 2, 3, 4]
        assert len(report.title_results) == 2
        assert len(report.album_results) == 1

    def test_reports_missing_song(self, fast_config) -> None:
        out = io.StringIO()
        demo = DemoConfig(song_ids=[999])

        report = run_demo(build_service(fast_config), demo, out=out)

        assert "Song 999: not found" in out.getvalue()
        assert report.point_results[0][1] is None

    def test_repeat_serves_second_pass_from_cache(self, fast_config, caplog) -> None:
        service = build_service(fast_config)
        demo = DemoConfig(song_ids=[1, 2], repeat=True)

        with caplog.at_level(logging.INFO, logger="song_lookup"):
            report = run_demo(service, demo, out=io.StringIO())

        assert len(report.point_results) == 4
        assert caplog.text.count("from server") == 2
        assert caplog.text.count("from cache") == 2
        assert service.get_cache_stats()["hits"] == 2

    def test_records_point_lookup_timings(self, fast_config) -> None:
        metrics = InMemoryMetricsCollector()
        demo = DemoConfig(song_ids=[1, 999])

        report = run_demo(
            build_service(fast_config), demo, out=io.StringIO(), metrics_collector=metrics
        )

        events = metrics.get_events("search_by_id_seconds")
        assert [e["tags"] for e in events] == [{"song_id": "1"}, {"song_id": "999"}]
        assert all(e["type"] == "timing" for e in events)
        assert [e["value"] for e in events] == [
            elapsed for _, _, elapsed in report.point_results
        ]

    def test_no_timings_without_collector(self, fast_config) -> None:
        report = run_demo(build_service(fast_config), out=io.StringIO())

        assert len(report.point_results) == 4


class TestCli:
    """Command-line entry point."""

    def test_runs_with_zero_latency(self, capsys) -> None:
        exit_code = main(["--latency", "0"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Song 2: The Way I Are by Timbaland, Keri Hilson, D.O.E." in out
        assert "Songs with title 'Water': 2" in out

    def test_runs_with_config_file(self, sample_config_path, capsys) -> None:
        exit_code = main(["--config", str(sample_config_path)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Song 2: not found" in out
        assert "Songs with title 'Closer': 1" in out
        assert "Songs in album 'Attacca': 0" in out

    def test_repeat_flag(self, capsys) -> None:
        assert main(["--latency", "0", "--repeat"]) == 0

        out = capsys.readouterr().out
        assert out.count("Song 1: Water by Tyla") == 2

    def test_missing_config_file_exits_with_error(self, tmp_path: Path) -> None:
        assert main(["--config", str(tmp_path / "missing.yaml")]) == EXIT_CONFIG_ERROR

    def test_negative_latency_exits_with_error(self) -> None:
        assert main(["--latency", "-1"]) == EXIT_CONFIG_ERROR

    def test_invalid_catalog_exits_with_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "dupes.yaml"
        config_file.write_text(
            "catalog:\n"
            "  songs:\n"
            "    - {song_id: 1, title: A, artist: B, album: C, duration_seconds: 1}\n"
            "    - {song_id: 1, title: D, artist: E, album: F, duration_seconds: 2}\n"
        )

        assert main(["--config", str(config_file)]) == EXIT_CONFIG_ERROR

    @pytest.mark.parametrize("argv", [["--profile", "missing-profile"]])
    def test_missing_profile_exits_with_error(self, argv) -> None:
        assert main(argv) == EXIT_CONFIG_ERROR

    def test_verbose_logs_metrics_summary(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="song_lookup"):
            assert main(["--latency", "0", "--repeat", "--verbose"]) == 0

        assert "Metric search_by_id_seconds: count=8" in caplog.text
        assert "Metric cache_hit: count=4" in caplog.text
        assert "Metric cache_miss: count=4" in caplog.text


class TestCliOverrides:
    """Command-line flags as a configuration layer."""

    def test_no_flags_no_overrides(self) -> None:
        assert cli_overrides(build_parser().parse_args([])) == {}

    def test_latency_and_repeat(self) -> None:
        args = build_parser().parse_args(["--latency", "0.25", "--repeat"])

        assert cli_overrides(args) == {
            "latency": {"delay_seconds": 0.25},
            "demo": {"repeat": True},
        }

    def test_latency_flag_wins_over_config_file(self, tmp_path: Path, capsys) -> None:
        config_file = tmp_path / "slow.yaml"
        config_file.write_text(
            "latency:\n  delay_seconds: 5\ndemo:\n  song_ids: [1]\n  title: Crush\n"
        )

        exit_code = main(["--config", str(config_file), "--latency", "0", "--repeat"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.count("Song 1: Water by Tyla (0.0") == 2
        assert "Songs with title 'Crush': 1" in out
