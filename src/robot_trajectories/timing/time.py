"""Define a value type to represent timestamps and durations."""

from __future__ import annotations

import time
from dataclasses import dataclass

USEC_PER_SEC = 1_000_000
USEC_PER_MSEC = 1_000


@dataclass(frozen=True, order=True)
class Time:
    """A timestamp or duration with microsecond resolution.

    The default-constructed Time is zero, which is the additive identity for durations.
    """

    microseconds: int = 0

    @classmethod
    def from_seconds(cls, seconds: float) -> Time:
        """Construct a Time from a number of seconds (rounded to the nearest microsecond)."""
        return cls(round(seconds * USEC_PER_SEC))

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> Time:
        """Construct a Time from a number of milliseconds (rounded to the nearest microsecond)."""
        return cls(round(milliseconds * USEC_PER_MSEC))

    @classmethod
    def now(cls) -> Time:
        """Construct a Time representing the current wall-clock time."""
        return cls(time.time_ns() // 1_000)

    def to_seconds(self) -> float:
        """Convert the Time into seconds."""
        return self.microseconds / USEC_PER_SEC

    def to_milliseconds(self) -> float:
        """Convert the Time into milliseconds."""
        return self.microseconds / USEC_PER_MSEC

    def is_null(self) -> bool:
        """Check whether the Time is zero."""
        return self.microseconds == 0

    def __add__(self, other: object) -> Time:
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.microseconds + other.microseconds)

    def __sub__(self, other: object) -> Time:
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.microseconds - other.microseconds)

    def __neg__(self) -> Time:
        return Time(-self.microseconds)

    def __abs__(self) -> Time:
        return Time(abs(self.microseconds))

    def __mul__(self, factor: object) -> Time:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Time(round(self.microseconds * factor))

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.to_seconds():.6f} s"
