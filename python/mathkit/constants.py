"""
Numeric constants shared by the mathkit functions.

All values are read-only module attributes.
"""

import math
import sys

# Results with an absolute value below this are snapped to exactly 0.0.
# sin(pi) evaluates to ~1.2e-16 in float64, well under the threshold.
EPSILON = 1e-10

HALF_PI = math.pi / 2
THREE_HALVES_PI = 3 * math.pi / 2
TWO_PI = 2 * math.pi

# Signed 64-bit range used by the integer family (sum, double, double_all)
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Largest integer magnitude that converts to a finite float64
FLOAT64_MAX_INT = int(sys.float_info.max)
