# Process-wide constants for the angles package
# Everything here is assigned once at import and never reassigned

import math
from enum import Enum

### Math Constants ###
PI = math.pi
TWO_PI = math.pi * 2
HALF_PI = math.pi / 2
THREE_HALVES_PI = 3 * math.pi / 2

### Glyphs ###
DEGREE_SYMBOL = "°"
MINUTE_SYMBOL = "'"
SECOND_SYMBOL = '"'
PI_SYMBOL = "π"

### Precisions ###
SECONDS_DECIMAL_PLACES = 2
ROUND_SECONDS = 10
ROUND_TRIG = 12
ROUND_DEGREES = 12
SEXAGESIMAL_DECIMAL_PLACES = 9
# total arcseconds reach 1296000, where 10 decimal places is below float resolution
SNAP_ARCSECONDS = 7
ARCSECONDS_PER_TURN = 360 * 3600
COEFFICIENT_MAX_DENOMINATOR = 10 ** 10

# marker returned by trig functions outside their domain
UNDEFINED = None


class Mode(Enum):
    """Unit an `Angle` converts to by default (`float()` and `str()`)."""
    DEGREES = "degrees"
    RADIANS = "radians"


class Display(Enum):
    """Formatting style: symbols (DMS or fractions of π) or plain numerals."""
    READABLE = "readable"
    DECIMAL = "decimal"


def parse_enum(enum_class, value):
    """Returns the member of `enum_class` named by `value`, which may be a member or its string value."""
    if isinstance(value, enum_class): return value
    try:
        return enum_class(value)
    except ValueError:
        choices = ", ".join(f"\"{member.value}\"" for member in enum_class)
        raise ValueError(f"{enum_class.__name__} \"{value}\" must be one of {choices}") from None
