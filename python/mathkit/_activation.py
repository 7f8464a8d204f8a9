"""
Activation functions: relu, sigmoid and a max-shifted softmax.
"""

import logging
import math
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from mathkit._core import _as_f64, _as_float
from mathkit.errors import EmptyInputError

logger = logging.getLogger(__name__)


def relu(n: float) -> float:
    """max(0, n). NaN propagates."""
    x = _as_float(n)
    if math.isnan(x):
        return x
    return x if x > 0.0 else 0.0


def sigmoid(n: float) -> float:
    """Logistic function 1 / (1 + e^-n).

    Evaluated as e^n / (1 + e^n) for negative n so exp never overflows;
    large |n| saturates to 0.0 or 1.0.
    """
    x = _as_float(n)
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def softmax(values: Iterable, *, max_length: int | None = None) -> NDArray[np.float64]:
    """Normalize values into a probability distribution.

    The maximum is subtracted before exponentiating, which leaves the result
    unchanged but keeps exp finite for large inputs. When the maximum is
    infinite the mass is split evenly between the elements equal to it, the
    limit of the finite case. NaN elements make the whole result NaN.
    """
    arr = _as_f64(values, max_length)
    if arr.size == 0:
        logger.debug("softmax called with empty input")
        raise EmptyInputError("softmax of an empty sequence is undefined")

    top = np.max(arr)
    if np.isinf(top):
        hits = arr == top
        return hits.astype(np.float64) / np.count_nonzero(hits)

    shifted = np.exp(arr - top)
    return shifted / np.sum(shifted)
