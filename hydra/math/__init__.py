"""Mathematical utilities for the Hydra curve.

This package provides the integer fixed-point primitives the curve
components are built from:
- sqrt: integer square root (Newton)
- exp: bounded truncated-Taylor exponential
- pow_fixed: bounded binary exponentiation
"""

from hydra.math.fixed_point import ONE_36, PRECISION, exp, from_fixed, mul_div, pow_fixed, sqrt, to_fixed

__all__ = ["sqrt", "exp", "pow_fixed", "mul_div", "to_fixed", "from_fixed", "PRECISION", "ONE_36"]
