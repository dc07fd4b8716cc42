"""Time-to-angle mapping for the analog clock face.

Angles are in degrees, measured clockwise from 12 o'clock.
"""
from typing import NamedTuple

from .palette import Palette
from .time_source import TimeOfDay

DEGREES_PER_HOUR = 30.0
DEGREES_PER_MINUTE = 6.0
SWEEP_PERIOD_MS = 1000


class DisplayState(NamedTuple):
    """Everything needed to draw one frame of the clock."""

    digital_text: str
    hour_angle: float
    minute_angle: float
    second_angle: float
    palette: Palette


def hour_angle(hour: int, minute: int) -> float:
    """Hour hand angle, including the minute's share of the hour."""
    return (hour % 12) * DEGREES_PER_HOUR + minute * 0.5


def minute_angle(minute: int) -> float:
    """Minute hand angle. Moves in whole-minute steps."""
    return minute * DEGREES_PER_MINUTE


def format_digital(time_of_day: TimeOfDay) -> str:
    """Format as zero-padded HH:MM:SS."""
    return f"{time_of_day.hour:02d}:{time_of_day.minute:02d}:{time_of_day.second:02d}"


def phase_for(elapsed_ms: float, period_ms: float = SWEEP_PERIOD_MS) -> float:
    """Fraction of the current sweep cycle, in [0, 1)."""
    if period_ms <= 0:
        raise ValueError(f"period_ms must be positive, got {period_ms}")
    phase = (elapsed_ms % period_ms) / period_ms
    # Float modulo of a negative elapsed time can land exactly on 1.0
    return 0.0 if phase >= 1.0 else phase


def sweep_angle(elapsed_ms: float, period_ms: float = SWEEP_PERIOD_MS) -> float:
    """Second hand angle for a linear sweep restarting every period."""
    return phase_for(elapsed_ms, period_ms) * 360.0


def derive_display_state(time_of_day: TimeOfDay, animation_phase: float,
                         palette: Palette) -> DisplayState:
    """
    Derive the display state for one frame.

    Args:
        time_of_day: Current time from the time source
        animation_phase: Position within the sweep cycle, in [0, 1)
        palette: Colours to draw with

    Returns:
        DisplayState for the frame
    """
    if not 0.0 <= animation_phase < 1.0:
        raise ValueError(f"animation_phase must be in [0, 1), got {animation_phase}")

    return DisplayState(
        digital_text=format_digital(time_of_day),
        hour_angle=hour_angle(time_of_day.hour, time_of_day.minute),
        minute_angle=minute_angle(time_of_day.minute),
        second_angle=animation_phase * 360.0,
        palette=palette,
    )
