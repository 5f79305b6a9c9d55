"""Step functions for walking intervals.

Intervals never do arithmetic on their endpoints; traversal advances with a
caller-supplied ``T -> T`` function. The factories here build the common ones.
"""

from collections.abc import Callable
from datetime import date, datetime
from typing import Any, TypeVar

from dateutil.relativedelta import relativedelta

D = TypeVar("D", bound=date)


def forward(amount: Any = 1) -> Callable[[Any], Any]:
    """Step that adds ``amount``, for use with ``Interval.ascending``."""
    if not amount > 0:
        raise ValueError(f"Step amount must be positive, got {amount!r}")
    return lambda value: value + amount


def backward(amount: Any = 1) -> Callable[[Any], Any]:
    """Step that subtracts ``amount``, for use with ``Interval.descending``."""
    if not amount > 0:
        raise ValueError(f"Step amount must be positive, got {amount!r}")
    return lambda value: value - amount


def calendar(
    *,
    years: int = 0,
    months: int = 0,
    weeks: int = 0,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
) -> Callable[[D], D]:
    """Calendar-aware step for ``date`` and ``datetime`` intervals.

    Month and year steps clamp to the end of shorter months, the way
    ``dateutil.relativedelta`` does: Jan 31 plus one month is Feb 28 (or 29).
    Negative components walk backwards, for ``Interval.descending``.

    Time components (hours, minutes, seconds) only apply to ``datetime``
    values; the step rejects a plain ``date`` instead of silently turning it
    into a ``datetime``.

    Raises:
        ValueError: If every component is zero, or if a step with time
            components is applied to a plain ``date``
    """
    delta = relativedelta(
        years=years,
        months=months,
        weeks=weeks,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )
    if not delta:
        raise ValueError(
            "calendar() step must move by a non-zero amount.\n"
            "Hint: calendar(days=1) for ascending, calendar(days=-1) for descending"
        )
    has_time = bool(delta.hours or delta.minutes or delta.seconds)

    def step(value: D) -> D:
        if has_time and not isinstance(value, datetime):
            raise ValueError(
                "calendar() step with time components cannot advance a date.\n"
                f"Got {type(value).__name__!r}: {value!r}\n"
                "Hint: Use datetime endpoints, or step by whole days: calendar(days=1)"
            )
        return value + delta

    return step
