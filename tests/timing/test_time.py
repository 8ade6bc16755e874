"""Unit tests for the Time class."""

import pytest
from hypothesis import given

from robot_trajectories.timing import Time

from ..strategies.trajectory_strategies import times


def test_default_time_is_additive_identity() -> None:
    """Verify that a default-constructed Time is zero and leaves sums unchanged."""
    t = Time.from_seconds(1.5)

    assert Time().is_null()
    assert t + Time() == t
    assert Time() + t == t


@given(times(), times())
def test_time_addition_and_subtraction(a: Time, b: Time) -> None:
    """Verify that subtracting a Time undoes adding it."""
    assert (a + b) - b == a
    assert a + b == b + a


def test_time_conversions() -> None:
    """Verify conversions between seconds, milliseconds, and microseconds."""
    t = Time.from_seconds(2.25)

    assert t.microseconds == 2_250_000
    assert t.to_seconds() == pytest.approx(2.25)
    assert t.to_milliseconds() == pytest.approx(2250.0)
    assert Time.from_milliseconds(3.5) == Time(3500)


def test_time_ordering_and_scaling() -> None:
    """Verify that Times are ordered by value and scale by numbers."""
    assert Time(1) < Time(2)
    assert max(Time(5), Time(-3), Time(4)) == Time(5)
    assert Time(10) * 3 == Time(30)
    assert 0.5 * Time(10) == Time(5)
    assert -Time(7) == Time(-7)
    assert abs(Time(-7)) == Time(7)


def test_time_rejects_non_time_addition() -> None:
    """Verify that adding a plain number to a Time raises a TypeError."""
    with pytest.raises(TypeError):
        Time(1) + 1  # type: ignore[operator]


def test_time_now_is_positive() -> None:
    """Verify that the current time is after the Unix epoch."""
    assert Time.now() > Time()
