"""
Trigonometric functions with an optional degrees mode.

Results within EPSILON of zero are snapped to exactly 0.0 to hide float64
rounding noise (sin(pi) is ~1.2e-16, not 0). tan returns signed infinity at
the asymptotes pi/2 and 3pi/2 (mod 2pi), where math.tan would give a large
finite value. Non-finite angles return NaN for all three functions.
"""

import logging
import math

from mathkit._core import _as_float
from mathkit.constants import EPSILON, HALF_PI, THREE_HALVES_PI, TWO_PI

logger = logging.getLogger(__name__)


def _to_radians(x: float, degrees: bool) -> float:
    if degrees:
        # Reduce whole turns in degrees first, where it is exact
        return math.radians(math.fmod(x, 360.0))
    return x


def _snap(result: float) -> float:
    if abs(result) < EPSILON:
        return 0.0
    return result


def sin(value: float, degrees: bool = False) -> float:
    """Sine of an angle in radians (or degrees when degrees=True)."""
    x = _as_float(value)
    if not math.isfinite(x):
        return math.nan
    return _snap(math.sin(_to_radians(x, degrees)))


def cos(value: float, degrees: bool = False) -> float:
    """Cosine of an angle in radians (or degrees when degrees=True)."""
    x = _as_float(value)
    if not math.isfinite(x):
        return math.nan
    return _snap(math.cos(_to_radians(x, degrees)))


def tan(value: float, degrees: bool = False) -> float:
    """Tangent of an angle in radians (or degrees when degrees=True).

    Returns +inf within EPSILON of pi/2 and -inf within EPSILON of 3pi/2,
    both taken modulo 2pi.
    """
    x = _as_float(value)
    if not math.isfinite(x):
        return math.nan
    x = _to_radians(x, degrees)

    turn = math.fmod(x, TWO_PI)
    if turn < 0.0:
        turn += TWO_PI
    if abs(turn - HALF_PI) < EPSILON:
        logger.debug("tan(%r) at pi/2 asymptote", value)
        return math.inf
    if abs(turn - THREE_HALVES_PI) < EPSILON:
        logger.debug("tan(%r) at 3pi/2 asymptote", value)
        return -math.inf

    return _snap(math.tan(x))
