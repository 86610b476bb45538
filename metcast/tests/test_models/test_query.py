"""Tests for time range parsing and same-day validation."""

from datetime import time

import pytest

from metcast.errors import TimeRangeError
from metcast.models.query import TimeRange


class TestParse:
    def test_default_style(self):
        tr = TimeRange.parse("0:4:6")
        assert (tr.start, tr.step, tr.count) == (0, 4, 6)

    def test_leading_zeros(self):
        tr = TimeRange.parse("06:03:04")
        assert (tr.start, tr.step, tr.count) == (6, 3, 4)

    def test_whitespace_trimmed(self):
        assert TimeRange.parse(" 8:2:3 ").start == 8

    @pytest.mark.parametrize("text", ["", "0:4", "24:1:1", "a:b:c", "0:25:1", "0:4:6:1"])
    def test_bad_format(self, text: str):
        with pytest.raises(TimeRangeError, match="start:step:count"):
            TimeRange.parse(text)

    def test_overlaps_next_day(self):
        with pytest.raises(TimeRangeError, match="next day"):
            TimeRange.parse("20:2:3")

    def test_last_hour_is_23(self):
        tr = TimeRange.parse("20:3:2")
        assert tr.times()[-1] == time(23)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            TimeRange(start=23, step=1, count=2)


class TestTimes:
    def test_enumerates_hours(self):
        assert TimeRange.parse("0:4:6").times() == [
            time(0), time(4), time(8), time(12), time(16), time(20),
        ]

    def test_zero_count(self):
        assert TimeRange(start=5, step=1, count=0).times() == []

    def test_str(self):
        assert str(TimeRange(1, 2, 3)) == "1:2:3"
