"""
Planar angle mathematics.

An `Angle` keeps one canonical value in radians in [0, 2pi) and converts it exactly to degrees,
sexagesimal digits and rational multiples of pi. It provides the direct, reciprocal, classical
(versine, haversine, exsecant families) and inverse trig functions, and renders itself as
10°30'15" or 3π/4 without float noise.

    >>> from angles import degrees, sexagesimal
    >>> str(sexagesimal(10, 30, 15))
    '10°30\\'15"'
    >>> degrees(90).to_radians().to_s_rad()
    'π/2'
"""

import logging

from angles.constants import Mode, Display, UNDEFINED
from angles.angle import (
    Angle, with_d, with_m, with_s,
    asin, acos, atan, atan2, asec, acsc, acot,
    degrees, radians, sexagesimal,
)
from angles.conversion import (
    normalize_degrees, normalize_radians, degrees_to_radians, radians_to_degrees,
    degrees_to_sexagesimal, sexagesimal_to_degrees,
    radians_to_coefficient, coefficient_to_radians, degrees_to_coefficient, coefficient_to_degrees,
)
from angles.formatting import format_degrees, format_radians

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Angle", "Mode", "Display", "UNDEFINED",
    "with_d", "with_m", "with_s",
    "asin", "acos", "atan", "atan2", "asec", "acsc", "acot",
    "degrees", "radians", "sexagesimal",
    "normalize_degrees", "normalize_radians", "degrees_to_radians", "radians_to_degrees",
    "degrees_to_sexagesimal", "sexagesimal_to_degrees",
    "radians_to_coefficient", "coefficient_to_radians", "degrees_to_coefficient", "coefficient_to_degrees",
    "format_degrees", "format_radians",
]
