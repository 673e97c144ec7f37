# Trigonometric functions over canonical radians
# Every function takes a value in [0, 2pi) and returns a float, or UNDEFINED where the
# function has a pole. Results are rounded so formatting never shows -1e-16 style noise.

import logging
import math

from angles.constants import PI, HALF_PI, THREE_HALVES_PI, ROUND_TRIG, UNDEFINED

logger = logging.getLogger(__name__)


def _snap(value):
    value = round(value, ROUND_TRIG)
    return 0.0 if value == 0 else value


def _undefined(name, radians):
    logger.debug(f"{name} is undefined at {radians} rad")
    return UNDEFINED


# direct functions
def sin(radians):
    return _snap(math.sin(radians))


def cos(radians):
    return _snap(math.cos(radians))


def tan(radians):
    if radians == HALF_PI or radians == THREE_HALVES_PI: return _undefined("tan", radians)
    return _snap(math.tan(radians))


# reciprocal functions, guarded on the snapped direct value so no pole reaches a division
def csc(radians):
    """Cosecant, undefined at 0 and pi."""
    sine = sin(radians)
    if radians == 0 or radians == PI or sine == 0: return _undefined("csc", radians)
    return 1 / sine


def sec(radians):
    """Secant, undefined at pi/2 and wherever the cosine snaps to 0 (3pi/2)."""
    cosine = cos(radians)
    if radians == HALF_PI or cosine == 0: return _undefined("sec", radians)
    return 1 / cosine


def cot(radians):
    """Cotangent, undefined at 0 and pi and exactly 0 at pi/2 and 3pi/2."""
    if radians == 0 or radians == PI or sin(radians) == 0: return _undefined("cot", radians)
    if radians == HALF_PI or cos(radians) == 0: return 0.0
    tangent = tan(radians)
    if tangent == 0: return _undefined("cot", radians)
    return 1 / tangent


# classical derived functions
def crd(radians):
    """Chord subtended by the angle on the unit circle."""
    return 2 * sin(radians / 2)


def versin(radians): return 1 - cos(radians)
def vercosin(radians): return 1 + cos(radians)
def coversin(radians): return 1 - sin(radians)
def covercosin(radians): return 1 + sin(radians)
def haversin(radians): return versin(radians) / 2
def havercosin(radians): return vercosin(radians) / 2
def hacoversin(radians): return coversin(radians) / 2
def hacovercosin(radians): return covercosin(radians) / 2


def exsec(radians):
    secant = sec(radians)
    if secant is UNDEFINED: return UNDEFINED
    return secant - 1


def excsc(radians):
    cosecant = csc(radians)
    if cosecant is UNDEFINED: return UNDEFINED
    return cosecant - 1
