# Planar angle value type
# An Angle stores a single canonical value in radians, always in [0, 2pi), and derives
# degrees, sexagesimal digits, trig values and strings from it

import logging
import math, numbers

from angles import trig
from angles.constants import (
    Mode, Display, parse_enum, UNDEFINED,
    TWO_PI, HALF_PI, ROUND_DEGREES, ROUND_SECONDS, SNAP_ARCSECONDS, ARCSECONDS_PER_TURN,
)
from angles.conversion import (
    normalize_radians, degrees_to_radians, radians_to_degrees,
    sexagesimal_to_degrees, radians_to_coefficient,
)
from angles.formatting import format_degrees, format_radians

logger = logging.getLogger(__name__)


class Angle:
    def __init__(self, value = 0, mode = Mode.DEGREES, display = Display.READABLE):
        """
        Creates an `Angle` instance representing the angle `value` in the angular unit specified by `mode`.

        `mode` is `Mode.DEGREES` or `Mode.RADIANS` (or the strings "degrees" and "radians") and also selects the
        unit used by `float()` and `str()`. `display` is `Display.READABLE` or `Display.DECIMAL`.
        Passing an `Angle` as `value` copies its canonical radians.
        """
        self._radians = 0.0
        self.mode = mode
        self.display = display

        if isinstance(value, Angle): self.radians = value.radians
        elif not isinstance(value, numbers.Real): raise ValueError(f"Value \"{value}\" must be a real-number-like object")
        elif self.mode is Mode.DEGREES: self.degrees = value
        else: self.radians = value

    @classmethod
    def from_degrees(cls, value, display = Display.READABLE):
        return cls(value, Mode.DEGREES, display)

    @classmethod
    def from_radians(cls, value, display = Display.READABLE):
        return cls(value, Mode.RADIANS, display)

    @classmethod
    def from_sexagesimal(cls, degrees, minutes, seconds, display = Display.READABLE):
        """Creates a degree mode `Angle` from whole degrees, minutes and seconds."""
        return cls(sexagesimal_to_degrees(degrees, minutes, seconds), Mode.DEGREES, display)

    # configuration
    @property
    def mode(self): return self._mode

    @mode.setter
    def mode(self, value): self._mode = parse_enum(Mode, value)

    @property
    def display(self): return self._display

    @display.setter
    def display(self, value): self._display = parse_enum(Display, value)

    # various conversions between angles and numerical representations of angles
    @property
    def radians(self):
        return self._radians

    @radians.setter
    def radians(self, value):
        self._radians = normalize_radians(value)

    @property
    def degrees(self):
        return radians_to_degrees(self._radians)

    @degrees.setter
    def degrees(self, value):
        self._radians = degrees_to_radians(value)

    def _snapped_seconds(self):
        # the radians round trip leaves up to ~1e-9 arcseconds of noise near a full turn, so 2' would read
        # back as 1'59.99999" without snapping the total before splitting it into digits
        return round(self.degrees * 3600, SNAP_ARCSECONDS) % ARCSECONDS_PER_TURN

    def _snapped_degrees(self):
        return self._snapped_seconds() / 3600

    @property
    def minutes(self):
        """Total arcminutes of the angle, not the minutes digit."""
        return self._snapped_seconds() / 60

    @minutes.setter
    def minutes(self, value):
        self.degrees = value / 60

    @property
    def seconds(self):
        """Total arcseconds of the angle, not the seconds digit."""
        return self._snapped_seconds()

    @seconds.setter
    def seconds(self, value):
        self.degrees = value / 3600

    # sexagesimal digits, all split from the same snapped total; setting one keeps the other two
    @property
    def d(self):
        return int(self._snapped_seconds() // 3600)

    @d.setter
    def d(self, value):
        self.radians = with_d(self, value)

    @property
    def m(self):
        return int(self._snapped_seconds() // 60) % 60

    @m.setter
    def m(self, value):
        self.radians = with_m(self, value)

    @property
    def s(self):
        return round(self._snapped_seconds() % 60, ROUND_SECONDS)

    @s.setter
    def s(self, value):
        self.radians = with_s(self, value)

    # trig functions, UNDEFINED (None) at poles
    def sin(self): return trig.sin(self.radians)
    def cos(self): return trig.cos(self.radians)
    def tan(self): return trig.tan(self.radians)
    def csc(self): return trig.csc(self.radians)
    def sec(self): return trig.sec(self.radians)
    def cot(self): return trig.cot(self.radians)
    def crd(self): return trig.crd(self.radians)
    def versin(self): return trig.versin(self.radians)
    def vercosin(self): return trig.vercosin(self.radians)
    def coversin(self): return trig.coversin(self.radians)
    def covercosin(self): return trig.covercosin(self.radians)
    def haversin(self): return trig.haversin(self.radians)
    def havercosin(self): return trig.havercosin(self.radians)
    def hacoversin(self): return trig.hacoversin(self.radians)
    def hacovercosin(self): return trig.hacovercosin(self.radians)
    def exsec(self): return trig.exsec(self.radians)
    def excsc(self): return trig.excsc(self.radians)

    sine = jiba = sin
    cosine = cos
    tangent = slope = tan
    cosecant = csc
    secant = sec
    cotangent = cot
    chord = crd
    exsecant = exsec

    # inverse trig functions, all returning radian mode angles
    @classmethod
    def asin(cls, x): return cls.from_radians(math.asin(x))

    @classmethod
    def acos(cls, x): return cls.from_radians(math.acos(x))

    @classmethod
    def atan(cls, x): return cls.from_radians(math.atan(x))

    @classmethod
    def atan2(cls, y, x): return cls.from_radians(math.atan2(y, x))

    @classmethod
    def asec(cls, x):
        if x == 0:
            logger.debug("asec is undefined at 0")
            return UNDEFINED
        return cls.acos(1 / x)

    @classmethod
    def acsc(cls, x):
        if x == 0:
            logger.debug("acsc is undefined at 0")
            return UNDEFINED
        return cls.asin(1 / x)

    @classmethod
    def acot(cls, x):
        """Returns 90° - atan(`x`), which lies in (0, pi) wrapped to [0, 2pi) rather than the principal (-pi/2, pi/2]."""
        return cls.from_radians(HALF_PI) - cls.atan(x)

    # classification, exact comparisons on the same snapped degree value the d, m and s digits are split from
    def is_acute(self): return 0 <= self._snapped_degrees() < 90
    def is_right(self): return self._snapped_degrees() == 90
    def is_obtuse(self): return 90 < self._snapped_degrees() < 180
    def is_straight(self): return self._snapped_degrees() == 180
    def is_reflex(self): return 180 < self._snapped_degrees() < 360

    def is_full(self):
        """True for a whole number of turns, which normalization has already wrapped to 0."""
        return self._snapped_degrees() == 0

    def is_oblique(self): return self._snapped_degrees() not in (0, 90, 180, 270)

    # output
    def to_s_deg(self): return format_degrees(self.degrees, self.display)
    def to_s_rad(self): return format_radians(self.radians, self.display)

    def to_s(self):
        if self.mode is Mode.RADIANS: return self.to_s_rad()
        return self.to_s_deg()

    def to_degrees(self):
        return Angle(self.radians, Mode.RADIANS, self.display)._with_mode(Mode.DEGREES)

    def to_radians(self):
        return Angle(self.radians, Mode.RADIANS, self.display)

    def turns(self):
        """Returns the angle as a fraction of a full turn."""
        return radians_to_coefficient(self.radians) / 2

    def _with_mode(self, mode):
        self.mode = mode
        return self

    def _derive(self, radians):
        return Angle(radians, Mode.RADIANS, self.display)._with_mode(self.mode)

    # make it behave like a real number
    def __add__(self, angle):
        if not isinstance(angle, Angle): raise ValueError(f"Addend \"{angle}\" must be an angle")
        return self._derive(self.radians + angle.radians)
    def __sub__(self, angle):
        if not isinstance(angle, Angle): raise ValueError(f"Subtrahend \"{angle}\" must be an angle")
        return self._derive(self.radians - angle.radians)
    def __mul__(self, value):
        if not isinstance(value, numbers.Real): raise ValueError(f"Multiplicand \"{value}\" must be numerical")
        return self._derive(self.radians * value)
    def __truediv__(self, value):
        if not isinstance(value, numbers.Real): raise ValueError(f"Divisor \"{value}\" must be numerical")
        return self._derive(self.radians / value)
    def __rmul__(self, value):
        if not isinstance(value, numbers.Real): raise ValueError(f"Multiplicand \"{value}\" must be numerical")
        return self._derive(value * self.radians)
    def __neg__(self): return self._derive(TWO_PI - self.radians)
    def __pos__(self): return self._derive(self.radians)
    def __abs__(self): return self._derive(abs(self.radians))

    def abs_inplace(self):
        """Replaces the stored radians with their absolute value; a no-op while the range invariant holds."""
        self.radians = abs(self.radians)

    # congruent angles collapse to the same canonical value and compare equal
    def __lt__(self, angle):
        if isinstance(angle, Angle): return self.radians < angle.radians
        return NotImplemented
    def __le__(self, angle):
        if isinstance(angle, Angle): return self.radians <= angle.radians
        return NotImplemented
    def __eq__(self, angle):
        if isinstance(angle, Angle): return self.radians == angle.radians
        return NotImplemented

    def compare(self, angle):
        """Returns -1, 0 or 1 as this angle is below, equal to or above `angle` in [0, 2pi)."""
        if not isinstance(angle, Angle): raise ValueError(f"Comparand \"{angle}\" must be an angle")
        return (self.radians > angle.radians) - (self.radians < angle.radians)

    # type conversions
    def __float__(self):
        if self.mode is Mode.RADIANS: return self.radians
        return round(self.degrees, ROUND_DEGREES)
    def __str__(self): return self.to_s()
    def __repr__(self): return f"<Angle {self.radians} rad>"
    def __hash__(self): return hash(self.radians)


# digit transforms behind the d, m and s setters; each returns new canonical radians
def with_d(angle, value):
    """Returns the radians of `angle` with its whole degrees replaced by `value`."""
    return degrees_to_radians((angle.seconds - angle.d * 3600 + value * 3600) / 3600)


def with_m(angle, value):
    """Returns the radians of `angle` with its minutes digit replaced by `value`."""
    return degrees_to_radians((angle.seconds - angle.m * 60 + value * 60) / 3600)


def with_s(angle, value):
    """Returns the radians of `angle` with its seconds digit replaced by `value`."""
    return degrees_to_radians((angle.seconds - angle.s + value) / 3600)


asin = Angle.asin
acos = Angle.acos
atan = Angle.atan
atan2 = Angle.atan2
asec = Angle.asec
acsc = Angle.acsc
acot = Angle.acot


def degrees(value):
    return Angle(value, Mode.DEGREES)


def radians(value):
    return Angle(value, Mode.RADIANS)


def sexagesimal(degrees, minutes, seconds):
    return Angle.from_sexagesimal(degrees, minutes, seconds)
