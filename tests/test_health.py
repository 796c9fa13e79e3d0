"""Tests for health helpers."""

from __future__ import annotations

import sys
from datetime import datetime, timezone

import pytest

from dashboard_api.system import health


class TestUptime:
    def test_elapsed(self) -> None:
        assert health.uptime_seconds(100.0, now=112.5) == 12.5

    def test_never_negative(self) -> None:
        assert health.uptime_seconds(200.0, now=100.0) == 0.0


class TestTimestamp:
    def test_utc_zulu_format(self) -> None:
        ts = health.utc_timestamp(datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc))
        assert ts == "2024-03-01T12:00:00.000Z"


class TestSnapshot:
    def test_snapshot_fields(self) -> None:
        snap = health.basic_health_snapshot(app_start_time=0.0, version="1.0.0")
        assert snap["status"] == "OK"
        assert snap["version"] == "1.0.0"
        assert snap["uptime"] > 0

    def test_version_optional(self) -> None:
        snap = health.basic_health_snapshot(app_start_time=0.0)
        assert "version" not in snap


class _Usage:
    def __init__(self, ru_maxrss):
        self.ru_maxrss = ru_maxrss


class TestMemoryUsage:
    def test_linux_reports_kilobytes(self, monkeypatch) -> None:
        resource = pytest.importorskip("resource")
        monkeypatch.setattr(resource, "getrusage", lambda who: _Usage(51200))
        monkeypatch.setattr(sys, "platform", "linux")
        assert health.memory_usage() == {"peak_rss_mb": 50.0}

    def test_macos_reports_bytes(self, monkeypatch) -> None:
        resource = pytest.importorskip("resource")
        monkeypatch.setattr(resource, "getrusage", lambda who: _Usage(50 * 1024 * 1024))
        monkeypatch.setattr(sys, "platform", "darwin")
        assert health.memory_usage() == {"peak_rss_mb": 50.0}

    def test_missing_resource_module(self, monkeypatch) -> None:
        # a None entry in sys.modules makes the import raise ImportError
        monkeypatch.setitem(sys.modules, "resource", None)
        assert health.memory_usage() is None
