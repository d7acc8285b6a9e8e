"""Numerical constants and floating-point limits."""

import math
import sys

# Floating-point limits.
EPSILON = sys.float_info.epsilon
MIN_FLOAT = sys.float_info.min
MAX_FLOAT = sys.float_info.max
LOWEST_FLOAT = -sys.float_info.max
INF_FLOAT = math.inf
QUIET_NAN = math.nan

# Tolerances.
SMALL = 10.0 * EPSILON
TEN_SMALL = 10.0 * SMALL
HUNDRED_SMALL = 100.0 * SMALL
TENTH_SMALL = SMALL / 10.0

# Fractions and small integers.
ZERO = 0.0
HALF = 0.5
THIRD = 1.0 / 3.0
TWO_THIRD = 2.0 / 3.0
QUARTER = 1.0 / 4.0
THREE_QUARTER = 3.0 / 4.0
FIFTH = 1.0 / 5.0
SIXTH = 1.0 / 6.0
SEVENTH = 1.0 / 7.0
EIGHTH = 1.0 / 8.0
NINTH = 1.0 / 9.0
TENTH = 1.0 / 10.0
ONE = 1.0
TWO = 2.0
THREE = 3.0
FOUR = 4.0
FIVE = 5.0
SIX = 6.0
SEVEN = 7.0
EIGHT = 8.0
NINE = 9.0
TEN = 10.0

# Angles.
PI = 3.14159265358979323846264338327950288419716939937510
TWO_PI = TWO * PI
HALF_PI = HALF * PI
THIRD_PI = THIRD * PI
QUARTER_PI = QUARTER * PI
SIXTH_PI = SIXTH * PI
TWELFTH_PI = HALF * SIXTH_PI
TWO_THIRD_PI = TWO_THIRD * PI
THREE_QUARTER_PI = THREE_QUARTER * PI

E = 2.71828182845904523536028747135266249775724709369995

# Golden ratio.
PHI = HALF * (ONE + math.sqrt(FIVE))