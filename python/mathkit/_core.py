"""
Integer aggregate functions, square root and the input coercion they share.
"""

import logging
import math
import operator
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from mathkit.constants import FLOAT64_MAX_INT, INT64_MAX, INT64_MIN
from mathkit.errors import IntegerOverflowError, ResourceLimitExceeded

logger = logging.getLogger(__name__)


def _check_int64(value: int) -> int:
    """Raise IntegerOverflowError unless value fits in a signed 64-bit int."""
    if value < INT64_MIN or value > INT64_MAX:
        logger.debug("Integer %d outside int64 range", value)
        raise IntegerOverflowError(
            "Integer does not fit in 64 bits", value, INT64_MIN, INT64_MAX
        )
    return value


def _check_length(length: int, max_length: int | None) -> None:
    if max_length is not None and length > max_length:
        logger.debug("Rejected sequence of length %d (limit %d)", length, max_length)
        raise ResourceLimitExceeded(
            f"Sequence length {length} exceeds limit {max_length}",
            length,
            max_length,
        )


def _as_int(n: int) -> int:
    """Coerce an integer-like scalar to a range-checked Python int."""
    if isinstance(n, (bool, np.bool_)):
        raise TypeError("expected an integer, got bool")
    try:
        value = operator.index(n)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(n).__name__}") from None
    return _check_int64(value)


def _as_float(n: float) -> float:
    """Coerce a real scalar to a Python float.

    Integers too large for float64 raise IntegerOverflowError.
    """
    if isinstance(n, (str, bytes)):
        raise TypeError(f"expected a real number, got {type(n).__name__}")
    try:
        return float(n)
    except (TypeError, ValueError):
        raise TypeError(f"expected a real number, got {type(n).__name__}") from None
    except OverflowError:
        logger.debug("Value too large to convert to float64")
        raise IntegerOverflowError(
            "Integer too large to convert to float",
            int(n),
            -FLOAT64_MAX_INT,
            FLOAT64_MAX_INT,
        ) from None


def _as_int_list(values: Iterable, max_length: int | None) -> list[int]:
    """Convert an integer sequence or 1D integer array to a list of ints."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"values must be 1D, got shape {values.shape}")
        _check_length(values.size, max_length)
        if values.size and values.dtype.kind not in "iu":
            raise TypeError(f"expected an integer array, got dtype {values.dtype}")
        return [_check_int64(v) for v in values.tolist()]

    items = values if isinstance(values, (list, tuple)) else list(values)
    _check_length(len(items), max_length)
    return [_as_int(v) for v in items]


def _as_f64(values: Iterable, max_length: int | None) -> NDArray[np.float64]:
    """Convert a float sequence to a contiguous 1D float64 array."""
    if not isinstance(values, (np.ndarray, list, tuple)):
        values = list(values)
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise ValueError(f"values must be 1D, got shape {arr.shape}")
    _check_length(arr.size, max_length)
    if arr.size and arr.dtype.kind not in "biuf":
        raise TypeError(f"expected real numbers, got dtype {arr.dtype}")
    return np.ascontiguousarray(arr, dtype=np.float64)


def sum(values: Iterable, *, max_length: int | None = None) -> int:
    """Sum a sequence of integers. An empty sequence sums to 0.

    The running total is exact and only checked against the int64 range once,
    so the result does not depend on element order.
    """
    total = 0
    for v in _as_int_list(values, max_length):
        total += v
    return _check_int64(total)


def double(n: int) -> int:
    """Double an integer."""
    return _check_int64(_as_int(n) * 2)


def double_all(values: Iterable, *, max_length: int | None = None) -> NDArray[np.int64]:
    """Double every integer in a sequence, preserving order."""
    doubled = [_check_int64(v * 2) for v in _as_int_list(values, max_length)]
    return np.array(doubled, dtype=np.int64)


def sqrt(n: float) -> float:
    """Principal square root. Negative input returns NaN rather than raising."""
    x = _as_float(n)
    if x < 0.0:
        logger.debug("sqrt of negative value %r, returning NaN", x)
        return math.nan
    return math.sqrt(x)
