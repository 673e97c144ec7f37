# String rendering of angles
# Readable output uses sexagesimal notation for degrees (12°30'15.5") and exact fractions
# of pi for radians (3π/4). Decimal output is the plain float numeral.

from angles.constants import (
    Display, parse_enum,
    DEGREE_SYMBOL, MINUTE_SYMBOL, SECOND_SYMBOL, PI_SYMBOL, SECONDS_DECIMAL_PLACES,
)
from angles.conversion import degrees_to_sexagesimal, radians_to_coefficient


def _split_seconds(seconds):
    """Splits rounded `seconds` into whole seconds and a fractional remainder, carrying a remainder that rounds up to 1."""
    whole = int(seconds)
    remainder = round(seconds - whole, SECONDS_DECIMAL_PLACES)
    if remainder >= 1:
        whole += int(remainder)
        remainder -= int(remainder)
    return whole, remainder


def sexagesimal_string(degrees):
    """Returns `degrees` written as degrees, minutes and seconds, e.g. 10°30'15"."""
    sign = "-" if degrees < 0 else ""
    whole_degrees, minutes, seconds = degrees_to_sexagesimal(abs(degrees))
    whole_degrees, minutes = int(whole_degrees), int(minutes)
    whole_seconds, remainder = _split_seconds(round(seconds, SECONDS_DECIMAL_PLACES))

    # carry rounding overflow up through the components
    if whole_seconds >= 60:
        whole_seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        whole_degrees += 1
    if whole_degrees >= 360:
        whole_degrees -= 360

    output = f"{sign}{whole_degrees}{DEGREE_SYMBOL}"
    has_seconds = whole_seconds > 0 or remainder > 0
    if minutes > 0 or has_seconds:
        output += f"{minutes:02d}{MINUTE_SYMBOL}"
        if has_seconds:
            output += f"{whole_seconds:02d}"
            if abs(remainder) >= 10 ** -SECONDS_DECIMAL_PLACES:
                # "0.25" -> ".25"
                output += str(round(remainder, SECONDS_DECIMAL_PLACES))[1:]
            output += SECOND_SYMBOL
    return output


def pi_fraction_string(radians):
    """Returns `radians` written as a reduced fraction of pi, e.g. 3π/2, or "0"."""
    coefficient = radians_to_coefficient(radians)
    # a value just below a full turn rationalizes to 2
    if abs(coefficient) == 2: return "0"
    if coefficient.numerator == 0: return "0"

    output = "-" if coefficient < 0 else ""
    if abs(coefficient.numerator) != 1: output += str(abs(coefficient.numerator))
    output += PI_SYMBOL
    if coefficient.denominator != 1: output += f"/{coefficient.denominator}"
    return output


def format_degrees(degrees, display=Display.READABLE):
    if parse_enum(Display, display) is Display.READABLE: return sexagesimal_string(degrees)
    return str(float(degrees))


def format_radians(radians, display=Display.READABLE):
    if parse_enum(Display, display) is Display.READABLE: return pi_fraction_string(radians)
    return str(float(radians))
