"""Tests for byte and timestamp formatting."""

from datetime import datetime, timezone

import pytest

from worldbanc.utils.formatting import UNKNOWN_SIZE, format_jst, format_readable_bytes


class TestReadableBytes:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0 B"),
            (999, "999 B"),
            (1000, "1 KB"),
            (1999, "1 KB"),
            (1_000_000, "1 MB"),
            (987_654_321, "987 MB"),
            (5_000_000_000, "5 GB"),
            (2_500_000_000_000, "2 TB"),
        ],
    )
    def test_decimal_ladder(self, value, expected):
        assert format_readable_bytes(value) == expected

    def test_unit_ladder_stops_at_tb(self):
        assert format_readable_bytes(10**15) == "1000 TB"
        assert format_readable_bytes(10**18) == "1000000 TB"

    def test_unknown(self):
        assert format_readable_bytes(UNKNOWN_SIZE) == "- B"

    def test_unusable_value_is_echoed(self):
        assert format_readable_bytes("abc") == "abc B"
        assert format_readable_bytes(None) == "None B"

    def test_value_that_refuses_comparison(self):
        class Stubborn:
            def __eq__(self, other):
                raise RuntimeError("no comparing")

            __hash__ = object.__hash__

            def __str__(self):
                return "stubborn"

        assert format_readable_bytes(Stubborn()) == "stubborn B"


class TestJst:
    def test_none(self):
        assert format_jst(None) == "-"

    def test_epoch_is_nine_hours_ahead(self):
        assert format_jst(0) == "1970-01-01 09:00"

    def test_aware_datetime_rolls_over_date(self):
        instant = datetime(2024, 1, 31, 20, 5, tzinfo=timezone.utc)
        assert format_jst(instant) == "2024-02-01 05:05"

    def test_zero_padded(self):
        instant = datetime(2023, 3, 4, 0, 7, tzinfo=timezone.utc)
        assert format_jst(instant) == "2023-03-04 09:07"

    def test_failure_returns_placeholder(self):
        assert format_jst("yesterday") == "-"
        assert format_jst(1e20) == "-"
