"""
Exception hierarchy for mathkit.

Every library error derives from MathKitError and from the builtin exception
closest in meaning, so callers can catch either.
"""


class MathKitError(Exception):
    """Base exception for mathkit errors."""

    pass


class DomainError(MathKitError, ValueError):
    """Input lies outside the mathematically valid domain of a function."""

    pass


class EmptyInputError(MathKitError, ValueError):
    """Operation is undefined for an empty sequence."""

    pass


def _fmt_int(value: int) -> str:
    # Very large ints are shown by size; str() refuses past 4300 digits
    if abs(value).bit_length() > 128:
        return f"<{abs(value).bit_length()}-bit integer>"
    return str(value)


class IntegerOverflowError(MathKitError, OverflowError):
    """Integer value does not fit the target range.

    The range is signed 64-bit for the integer family and the finite float64
    range for integers passed to the float functions.
    """

    def __init__(self, message: str, value: int, lower: int, upper: int):
        super().__init__(message)
        self.value = value
        self.lower = lower
        self.upper = upper

    def __str__(self) -> str:
        base_msg = super().__str__()
        return (
            f"{base_msg} (value={_fmt_int(self.value)}, "
            f"range=[{_fmt_int(self.lower)}, {_fmt_int(self.upper)}])"
        )


class ResourceLimitExceeded(MathKitError, ValueError):
    """Sequence input is longer than the caller-supplied limit."""

    def __init__(self, message: str, length: int, limit: int):
        super().__init__(message)
        self.length = length
        self.limit = limit
