"""Tests for the time-to-angle mapping."""
import pytest

from clockface.clock.display_state import (
    derive_display_state,
    format_digital,
    hour_angle,
    minute_angle,
    phase_for,
    sweep_angle,
)
from clockface.clock.palette import DARK, LIGHT
from clockface.clock.time_source import TimeOfDay


def test_hour_angle_covers_full_day():
    for hour in range(24):
        for minute in range(60):
            angle = hour_angle(hour, minute)
            assert angle == (hour % 12) * 30 + minute * 0.5
            assert 0 <= angle < 360


def test_hour_angle_wraps_at_noon():
    assert hour_angle(12, 0) == 0
    assert hour_angle(0, 0) == 0
    assert hour_angle(23, 59) == 359.5


def test_minute_angle():
    for minute in range(60):
        assert minute_angle(minute) == minute * 6
    assert minute_angle(59) == 354


@pytest.mark.parametrize("time_of_day, expected", [
    (TimeOfDay(12, 30, 45), "12:30:45"),
    (TimeOfDay(0, 5, 9), "00:05:09"),
    (TimeOfDay(23, 59, 59), "23:59:59"),
])
def test_format_digital_zero_pads(time_of_day, expected):
    assert format_digital(time_of_day) == expected


def test_sweep_is_linear_within_a_cycle():
    angles = [sweep_angle(ms) for ms in range(0, 1000, 10)]
    assert angles[0] == 0
    assert angles == sorted(angles)
    assert sweep_angle(250) == pytest.approx(90)
    assert sweep_angle(999) < 360


def test_sweep_restarts_each_period():
    assert sweep_angle(1000) == pytest.approx(0)
    assert sweep_angle(3250) == pytest.approx(90)
    assert sweep_angle(500, period_ms=2000) == pytest.approx(90)


def test_phase_for_stays_in_range():
    assert phase_for(-0.0000001) < 1.0
    assert 0 <= phase_for(-250) < 1
    with pytest.raises(ValueError):
        phase_for(100, period_ms=0)


def test_three_oclock():
    state = derive_display_state(TimeOfDay(3, 0, 0), 0.0, LIGHT)
    assert state.hour_angle == 90
    assert state.minute_angle == 0
    assert state.digital_text == "03:00:00"
    assert state.second_angle == 0


def test_half_past_six():
    state = derive_display_state(TimeOfDay(6, 30, 0), 0.5, DARK)
    assert state.hour_angle == 195
    assert state.minute_angle == 180
    assert state.digital_text == "06:30:00"
    assert state.second_angle == 180
    assert state.palette is DARK


def test_derive_is_repeatable():
    first = derive_display_state(TimeOfDay(9, 41, 7), 0.3, LIGHT)
    second = derive_display_state(TimeOfDay(9, 41, 7), 0.3, LIGHT)
    assert first == second


def test_second_angle_ignores_second_field():
    a = derive_display_state(TimeOfDay(1, 2, 3), 0.25, LIGHT)
    b = derive_display_state(TimeOfDay(1, 2, 40), 0.25, LIGHT)
    assert a.second_angle == b.second_angle == 90


@pytest.mark.parametrize("phase", [-0.1, 1.0, 1.5])
def test_derive_rejects_bad_phase(phase):
    with pytest.raises(ValueError):
        derive_display_state(TimeOfDay(1, 2, 3), phase, LIGHT)
