"""
mathkit - Elementary numeric functions for Python.

Overflow-checked integer sums, square root, epsilon-snapped trigonometry with
a degrees mode, and the relu/sigmoid/softmax activations.
"""

import logging

from mathkit._activation import relu, sigmoid, softmax
from mathkit._core import double, double_all, sqrt, sum
from mathkit._trig import cos, sin, tan
from mathkit.errors import (
    DomainError,
    EmptyInputError,
    IntegerOverflowError,
    MathKitError,
    ResourceLimitExceeded,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "cos",
    "double",
    "double_all",
    "relu",
    "sigmoid",
    "sin",
    "softmax",
    "sqrt",
    "sum",
    "tan",
    "DomainError",
    "EmptyInputError",
    "IntegerOverflowError",
    "MathKitError",
    "ResourceLimitExceeded",
]
