import logging

from .errors import InvalidRangeError, NullArgumentError
from .hashcode import HashCode, combine, hash_of, hash_of_sequence
from .interval import Interval, Orderable, Traversal
from .steps import backward, calendar, forward

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Interval",
    "Traversal",
    "Orderable",
    "HashCode",
    "hash_of",
    "combine",
    "hash_of_sequence",
    "NullArgumentError",
    "InvalidRangeError",
    "forward",
    "backward",
    "calendar",
]
