"""Wall-clock time sources for the clock screen."""
from datetime import datetime
from dataclasses import dataclass
from typing import Callable


class TimeSourceError(Exception):
    """Raised when the current time cannot be read."""


@dataclass(frozen=True)
class TimeOfDay:
    """Immutable hour/minute/second snapshot. Out-of-range fields raise ValueError."""

    hour: int
    minute: int
    second: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute out of range: {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second out of range: {self.second}")

    @classmethod
    def from_datetime(cls, value) -> 'TimeOfDay':
        """Build from anything with hour/minute/second attributes."""
        return cls(value.hour, value.minute, value.second)

    @classmethod
    def parse(cls, text: str) -> 'TimeOfDay':
        """
        Parse an "HH:MM:SS" (or "HH:MM") string.

        Raises:
            ValueError: if the text is not a valid time of day
        """
        parts = text.strip().split(':')
        if len(parts) not in (2, 3):
            raise ValueError(f"Invalid time '{text}', expected HH:MM:SS")
        try:
            fields = [int(part) for part in parts]
        except ValueError:
            raise ValueError(f"Invalid time '{text}', expected HH:MM:SS") from None
        if len(fields) == 2:
            fields.append(0)
        return cls(*fields)


class SystemTimeSource:
    """Reads the local time from the host clock."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def now(self) -> TimeOfDay:
        """
        Get the current local time at second resolution.

        Raises:
            TimeSourceError: if the clock read fails or returns a bad value
        """
        try:
            value = self.clock()
            return TimeOfDay.from_datetime(value)
        except (AttributeError, TypeError, ValueError, OSError) as e:
            raise TimeSourceError(f"Could not read system time: {e}") from e


class FixedTimeSource:
    """Always reports the same time. Used for screenshots and tests."""

    def __init__(self, time_of_day: TimeOfDay):
        self.time_of_day = time_of_day

    def now(self) -> TimeOfDay:
        return self.time_of_day
