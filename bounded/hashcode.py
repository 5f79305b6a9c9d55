"""Order-sensitive structural hash combination.

The mixer is the classic tuple-hash step ``((h1 << 5) + h1) ^ h2`` evaluated
on 32-bit signed integers, so results are stable within a process and never
grow beyond a machine word regardless of how many items are folded in.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000


def _int32(value: int) -> int:
    value &= _MASK
    return value - (1 << 32) if value & _SIGN else value


def hash_of(item: Any) -> int:
    """Return ``hash(item)``, or 0 for ``None``."""
    if item is None:
        return 0
    return hash(item)


def combine(h1: int, h2: int) -> int:
    """Fold ``h2`` into the accumulator ``h1``.

    Not commutative: ``combine(combine(0, a), b)`` generally differs from
    ``combine(combine(0, b), a)``.
    """
    h1 = _int32(h1)
    return _int32(_int32((h1 << 5) + h1) ^ _int32(h2))


def hash_of_sequence(items: Iterable[Any] | None, start: int = 0) -> int:
    """Fold every item of ``items`` into ``start``, in iteration order.

    ``start`` is reduced to 32 bits first. ``None`` is not an error: the
    reduced start hash is returned as is.
    """
    start = _int32(start)
    if items is None:
        return start
    for item in items:
        start = combine(start, hash_of(item))
    return start


@dataclass(frozen=True)
class HashCode:
    """Fluent builder for structural hashes.

    >>> HashCode.of(True).and_then(3).and_then(7).value
    1125
    """

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _int32(self.value))

    @classmethod
    def of(cls, item: Any) -> "HashCode":
        return cls(hash_of(item))

    @classmethod
    def of_each(cls, items: Iterable[Any] | None) -> "HashCode":
        return cls(hash_of_sequence(items, 0))

    def and_then(self, item: Any) -> "HashCode":
        return HashCode(combine(self.value, hash_of(item)))

    def and_each(self, items: Iterable[Any] | None) -> "HashCode":
        if items is None:
            return self
        return HashCode(hash_of_sequence(items, self.value))

    def __int__(self) -> int:
        return self.value
