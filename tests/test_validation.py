"""Tests for date parsing and range checks."""

from __future__ import annotations

from datetime import date

import pytest

from dashboard_api.utils.validation import (
    is_date_in_range,
    is_valid_iso_date,
    parse_iso_date,
    validate_fields,
)


class TestParseIsoDate:
    def test_valid_date(self) -> None:
        assert parse_iso_date("2024-03-01") == date(2024, 3, 1)

    def test_leap_day(self) -> None:
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "bad-date",
            "2024-3-1",
            "2024/03/01",
            "03/01/2024",
            "2024-02-30",
            "2024-13-01",
            "2024-03-01T00:00:00Z",
            "2024-03-01+02:00",
            " 2024-03-01",
        ],
    )
    def test_rejects_malformed(self, value) -> None:
        assert parse_iso_date(value) is None
        assert is_valid_iso_date(value) is False


class TestIsDateInRange:
    def test_no_bounds(self) -> None:
        assert is_date_in_range("2024-03-02") is True

    def test_bounds_are_inclusive(self) -> None:
        assert is_date_in_range("2024-03-01", "2024-03-01", "2024-03-01") is True

    def test_before_start(self) -> None:
        assert is_date_in_range("2024-02-29", start_date="2024-03-01") is False

    def test_after_end(self) -> None:
        assert is_date_in_range("2024-03-04", end_date="2024-03-03") is False

    def test_only_start(self) -> None:
        assert is_date_in_range("2025-01-01", start_date="2024-03-01") is True

    def test_unparseable_activity_date_is_excluded(self) -> None:
        assert is_date_in_range("not-a-date") is False
        assert is_date_in_range("2024-02-30", "2024-01-01", "2024-12-31") is False


class TestValidateFields:
    def test_skips_empty_values(self) -> None:
        assert validate_fields({"startDate": (None, is_valid_iso_date), "endDate": ("", is_valid_iso_date)}) == []

    def test_reports_labels_in_order(self) -> None:
        invalid = validate_fields(
            {
                "startDate": ("nope", is_valid_iso_date),
                "endDate": ("also-nope", is_valid_iso_date),
            }
        )
        assert invalid == ["startDate", "endDate"]

    def test_validator_errors_count_as_invalid(self) -> None:
        def boom(value):
            raise RuntimeError("bad validator")

        assert validate_fields({"field": ("x", boom)}) == ["field"]
