# Normalization and conversion between angular representations
# Degrees and radians are floats, sexagesimal values are (degrees, minutes, seconds) tuples
# and coefficients of pi are fractions.Fraction instances

import math
from fractions import Fraction

from angles.constants import PI, TWO_PI, SEXAGESIMAL_DECIMAL_PLACES, COEFFICIENT_MAX_DENOMINATOR


def _wrap(value, bound):
    value = float(value)
    if not math.isfinite(value): raise ValueError(f"Value \"{value}\" cannot be normalized to a finite angle")
    value %= bound
    # a tiny negative value wraps to the bound itself after rounding
    return 0.0 if value >= bound else value


def normalize_degrees(degrees):
    """Returns `degrees` reduced to the range [0, 360)."""
    return _wrap(degrees, 360)


def normalize_radians(radians):
    """Returns `radians` reduced to the range [0, 2pi)."""
    return _wrap(radians, TWO_PI)


def degrees_to_radians(degrees):
    # dividing first keeps 90, 180 and 270 exact multiples of pi/2
    return normalize_radians(normalize_degrees(degrees) / 180 * PI)


def radians_to_degrees(radians):
    return normalize_degrees(normalize_radians(radians) / PI * 180)


def degrees_to_sexagesimal(degrees):
    """
    Splits `degrees` into `(degrees, minutes, seconds)`.

    Degrees and minutes are integer valued floats. The fractional degree part is rounded to
    9 decimal places before it is split, so float noise does not show up as 59.9999 seconds.
    """
    fraction, degrees = math.modf(normalize_degrees(degrees))
    fraction = round(fraction, SEXAGESIMAL_DECIMAL_PLACES)
    remainder, minutes = math.modf(fraction * 60)
    return degrees, minutes, remainder * 60


def sexagesimal_to_degrees(degrees, minutes, seconds):
    return normalize_degrees(degrees) + minutes / 60 + seconds / 3600


def radians_to_coefficient(radians):
    """
    Returns the reduced fraction `c` such that `radians == c * pi`.

    The float quotient is rationalized to the closest fraction with a denominator of at most
    `COEFFICIENT_MAX_DENOMINATOR`, which recovers 1/3 from the float for pi/3 instead of its binary expansion.
    """
    return Fraction(float(radians) / PI).limit_denominator(COEFFICIENT_MAX_DENOMINATOR)


def coefficient_to_radians(coefficient):
    return normalize_radians(float(coefficient) * PI)


def degrees_to_coefficient(degrees):
    return radians_to_coefficient(degrees_to_radians(degrees))


def coefficient_to_degrees(coefficient):
    return normalize_degrees(float(coefficient) * 180)
