"""Tests for the step function factories."""

from datetime import date, datetime

import pytest

from bounded import Interval, backward, calendar, forward


def test_forward_and_backward():
    assert forward()(3) == 4
    assert forward(5)(3) == 8
    assert backward()(3) == 2
    assert backward(0.5)(3) == 2.5


@pytest.mark.parametrize("factory", [forward, backward])
@pytest.mark.parametrize("amount", [0, -1])
def test_non_positive_amounts_are_rejected(factory, amount):
    with pytest.raises(ValueError, match="must be positive"):
        factory(amount)


def test_calendar_requires_movement():
    with pytest.raises(ValueError, match="non-zero"):
        calendar()


def test_calendar_month_steps_clamp_to_month_end():
    months = Interval.closed(date(2025, 1, 31), date(2025, 5, 1))

    assert list(months.ascending(calendar(months=1))) == [
        date(2025, 1, 31),
        date(2025, 2, 28),
        date(2025, 3, 28),
        date(2025, 4, 28),
    ]


def test_calendar_week_steps():
    step = calendar(weeks=1)
    assert step(date(2025, 1, 6)) == date(2025, 1, 13)
    assert calendar(weeks=-1)(date(2025, 1, 6)) == date(2024, 12, 30)


def test_calendar_time_step_rejects_plain_dates():
    """Hour steps on a date interval fail clearly instead of mixing types."""
    days = Interval.closed(date(2025, 1, 1), date(2025, 1, 2))

    with pytest.raises(ValueError, match="cannot advance a date") as excinfo:
        list(days.ascending(calendar(hours=12)))
    assert "Hint:" in str(excinfo.value)

    with pytest.raises(ValueError, match="cannot advance a date"):
        calendar(minutes=-30)(date(2025, 1, 1))


def test_calendar_time_step_advances_datetimes():
    step = calendar(hours=12)
    assert step(datetime(2025, 1, 1)) == datetime(2025, 1, 1, 12)


def test_calendar_whole_day_step_keeps_dates():
    """Time components that add up to whole days still apply to dates."""
    assert calendar(hours=24)(date(2025, 1, 1)) == date(2025, 1, 2)
