"""Tests for time sources."""
from datetime import datetime, time

import pytest

from clockface.clock.time_source import (
    FixedTimeSource,
    SystemTimeSource,
    TimeOfDay,
    TimeSourceError,
)


def test_system_time_source_uses_clock():
    source = SystemTimeSource(clock=lambda: datetime(2024, 5, 1, 14, 7, 33, 900000))
    assert source.now() == TimeOfDay(14, 7, 33)


def test_system_time_source_default_clock():
    now = SystemTimeSource().now()
    assert 0 <= now.hour <= 23
    assert 0 <= now.minute <= 59
    assert 0 <= now.second <= 59


def test_failed_clock_read_raises_time_source_error():
    def broken():
        raise OSError("clock unavailable")

    with pytest.raises(TimeSourceError):
        SystemTimeSource(clock=broken).now()


def test_invalid_clock_value_raises_time_source_error():
    with pytest.raises(TimeSourceError):
        SystemTimeSource(clock=lambda: None).now()


def test_from_datetime_accepts_time():
    assert TimeOfDay.from_datetime(time(6, 30, 0)) == TimeOfDay(6, 30, 0)


@pytest.mark.parametrize("fields", [(24, 0, 0), (25, 99, 0), (-1, 0, 0), (0, 60, 0), (0, 0, 60)])
def test_constructor_rejects_out_of_range(fields):
    with pytest.raises(ValueError):
        TimeOfDay(*fields)


def test_constructor_accepts_bounds():
    assert TimeOfDay(0, 0, 0).hour == 0
    assert TimeOfDay(23, 59, 59).second == 59


@pytest.mark.parametrize("text, expected", [
    ("03:00:00", TimeOfDay(3, 0, 0)),
    ("6:30", TimeOfDay(6, 30, 0)),
    (" 23:59:59 ", TimeOfDay(23, 59, 59)),
])
def test_parse(text, expected):
    assert TimeOfDay.parse(text) == expected


@pytest.mark.parametrize("text", ["", "12", "ab:cd", "25:00:00", "1:2:3:4"])
def test_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        TimeOfDay.parse(text)


def test_fixed_time_source():
    source = FixedTimeSource(TimeOfDay(12, 30, 45))
    assert source.now() == source.now() == TimeOfDay(12, 30, 45)
