from typing import Any


class NullArgumentError(TypeError):
    """A required endpoint or step function was ``None``."""

    def __init__(self, argument: str, hint: str | None = None):
        self.argument: str = argument
        message = f"Argument {argument!r} must not be None."
        if hint:
            message += f"\nHint: {hint}"
        super().__init__(message)


class InvalidRangeError(ValueError):
    """The ``max`` endpoint compares less than ``min``."""

    def __init__(self, min: Any, max: Any):
        self.min: Any = min
        self.max: Any = max
        super().__init__(
            f"Interval max ({max!r}) must not be less than min ({min!r}).\n"
            f"Hint: Swap the endpoints, or use descending() to walk "
            f"from max down to min:\n"
            f"  Interval(min={max!r}, max={min!r})"
        )
