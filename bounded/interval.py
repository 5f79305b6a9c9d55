import logging
import operator as op
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Literal, Protocol, TypeVar

from typing_extensions import override

from bounded.errors import InvalidRangeError, NullArgumentError
from bounded.hashcode import HashCode

logger = logging.getLogger(__name__)


class Orderable(Protocol):
    """Anything with a total order through the rich comparison operators."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Orderable)

Step = Callable[[T], T]
Direction = Literal["ascending", "descending"]


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[T]):
    """A mathematical interval between two ordered endpoints.

    Both endpoints are included unless told otherwise:

    >>> str(Interval(min=3, max=7))
    '[3, 7]'
    >>> str(Interval(min_included=False, min=3, max=7, max_included=False))
    '(3, 7)'

    Equality is structural. ``(3, 3)`` and ``(4, 4)`` are both empty but are
    not equal to each other.
    """

    min_included: bool = True
    min: T
    max: T
    max_included: bool = True

    def __post_init__(self) -> None:
        if self.min is None:
            raise NullArgumentError("min", "Unbounded intervals are not supported.")
        if self.max is None:
            raise NullArgumentError("max", "Unbounded intervals are not supported.")
        if self.max < self.min:
            raise InvalidRangeError(self.min, self.max)

    @classmethod
    def closed(cls, min: T, max: T) -> "Interval[T]":
        return cls(min_included=True, min=min, max=max, max_included=True)

    @classmethod
    def open(cls, min: T, max: T) -> "Interval[T]":
        return cls(min_included=False, min=min, max=max, max_included=False)

    @classmethod
    def closed_open(cls, min: T, max: T) -> "Interval[T]":
        return cls(min_included=True, min=min, max=max, max_included=False)

    @classmethod
    def open_closed(cls, min: T, max: T) -> "Interval[T]":
        return cls(min_included=False, min=min, max=max, max_included=True)

    @property
    def is_open(self) -> bool:
        """True if neither endpoint is included."""
        return not self.min_included and not self.max_included

    @property
    def is_half_open(self) -> bool:
        """True if exactly one endpoint is included."""
        return self.min_included != self.max_included

    @property
    def is_closed(self) -> bool:
        """True if both endpoints are included."""
        return self.min_included and self.max_included

    @property
    def is_empty(self) -> bool:
        """True if the interval contains no values at all."""
        return self.min > self.max or (self.min == self.max and not self.is_closed)

    @property
    def is_degenerate(self) -> bool:
        """True if the interval contains exactly one value."""
        return self.min == self.max and self.is_closed

    @property
    def is_proper(self) -> bool:
        """True if the interval is neither empty nor degenerate."""
        return self.min < self.max

    def __contains__(self, value: Any) -> bool:
        if value is None:
            return False
        above = self.min <= value if self.min_included else self.min < value
        below = value <= self.max if self.max_included else value < self.max
        return above and below

    @override
    def __hash__(self) -> int:
        return (
            HashCode.of(self.min_included)
            .and_then(self.min)
            .and_then(self.max)
            .and_then(self.max_included)
            .value
        )

    @override
    def __str__(self) -> str:
        start = "[" if self.min_included else "("
        end = "]" if self.max_included else ")"
        return f"{start}{self.min}, {self.max}{end}"

    def ascending(self, step: Step[T]) -> "Traversal[T]":
        """Lazily walk the interval from ``min`` towards ``max``.

        ``step`` maps a value to the next larger one. An excluded ``min`` is
        skipped by stepping once before the first value is produced. The
        walk ends at the first value past ``max``; a ``step`` that never
        gets there produces an infinite sequence.

        >>> list(Interval.open(3, 7).ascending(lambda x: x + 1))
        [4, 5, 6]
        """
        if step is None:
            raise NullArgumentError("step", "Pass a function such as lambda x: x + 1")
        return Traversal(self, step, "ascending")

    def descending(self, step: Step[T]) -> "Traversal[T]":
        """Lazily walk the interval from ``max`` towards ``min``.

        ``step`` maps a value to the next smaller one.

        >>> list(Interval.closed(3, 7).descending(lambda x: x - 1))
        [7, 6, 5, 4, 3]
        """
        if step is None:
            raise NullArgumentError("step", "Pass a function such as lambda x: x - 1")
        return Traversal(self, step, "descending")


class Traversal(Generic[T]):
    """Restartable, lazy sequence of the values of an interval.

    Each call to ``iter()`` starts a fresh walk from the starting endpoint.
    The cursor lives only inside that walk; the interval is never touched.
    """

    def __init__(self, interval: Interval[T], step: Step[T], direction: Direction):
        self.interval: Interval[T] = interval
        self.step: Step[T] = step
        self.direction: Direction = direction

    def _bounds(self) -> tuple[T, Callable[[T], bool]]:
        """Return the first candidate and the predicate that keeps the walk going."""
        ivl = self.interval
        if self.direction == "ascending":
            current = ivl.min if ivl.min_included else self.step(ivl.min)
            check = op.le if ivl.max_included else op.lt
            limit = ivl.max
        else:
            current = ivl.max if ivl.max_included else self.step(ivl.max)
            check = op.ge if ivl.min_included else op.gt
            limit = ivl.min
        return current, lambda value: check(value, limit)

    def __iter__(self) -> Iterator[T]:
        current, within = self._bounds()
        logger.debug(
            "%s traversal of %s starting at %r", self.direction, self.interval, current
        )
        while within(current):
            yield current
            current = self.step(current)

    @override
    def __repr__(self) -> str:
        return f"Traversal({self.interval}, {self.direction})"
