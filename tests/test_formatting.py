import math
import pytest

from angles import Angle, Display, degrees, radians, sexagesimal
from angles.constants import TWO_PI
from angles.formatting import format_degrees, format_radians, sexagesimal_string, pi_fraction_string

def test_whole_degrees_have_no_minutes_or_seconds():
    assert degrees(45).to_s_deg() == "45°"
    assert degrees(0).to_s_deg() == "0°"
    assert degrees(360).to_s_deg() == "0°"
    assert degrees(-90).to_s_deg() == "270°"

def test_degrees_minutes_seconds():
    assert sexagesimal(10, 30, 15).to_s_deg() == "10°30'15\""
    assert degrees(12.5).to_s_deg() == "12°30'"
    assert sexagesimal(10, 0, 15).to_s_deg() == "10°00'15\""
    assert sexagesimal(1, 2, 3.5).to_s_deg() == "1°02'03.5\""
    assert sexagesimal(1, 2, 3.25).to_s_deg() == "1°02'03.25\""

def test_readable_degrees_carry():
    # seconds rounding up to 60 carries into minutes and degrees
    assert sexagesimal(10, 59, 59.999).to_s_deg() == "11°"
    assert degrees(359.9999999999).to_s_deg() == "0°"

def test_sexagesimal_string_sign():
    assert sexagesimal_string(-10.5) == "-10°30'"
    assert sexagesimal_string(0.25) == "0°15'"

def test_decimal_display():
    assert Angle(45, display=Display.DECIMAL).to_s_deg() == "45.0"
    assert Angle(90, "degrees", "decimal").to_s_rad() == str(math.pi / 2)
    assert format_degrees(12.5, Display.DECIMAL) == "12.5"
    assert format_radians(1, "decimal") == "1.0"

def test_pi_fractions():
    assert degrees(90).to_radians().to_s_rad() == "π/2"
    assert degrees(180).to_s_rad() == "π"
    assert degrees(270).to_s_rad() == "3π/2"
    assert degrees(315).to_s_rad() == "7π/4"
    assert degrees(60).to_s_rad() == "π/3"
    assert degrees(150).to_s_rad() == "5π/6"
    assert degrees(0).to_s_rad() == "0"
    assert degrees(360).to_s_rad() == "0"

def test_pi_fraction_string():
    assert pi_fraction_string(-math.pi / 2) == "-π/2"
    assert pi_fraction_string(-3 * math.pi / 4) == "-3π/4"
    assert pi_fraction_string(TWO_PI - 1e-15) == "0"

def test_to_s_dispatches_on_mode():
    assert str(degrees(45)) == "45°"
    assert str(radians(math.pi)) == "π"
    assert degrees(90).to_radians().to_s() == "π/2"
    assert radians(math.pi / 4).to_degrees().to_s() == "45°"

def test_display_change():
    angle = degrees(90)
    angle.display = "decimal"
    assert str(angle) == "90.0"
    angle.mode = "radians"
    assert str(angle) == str(math.pi / 2)

def test_unknown_display_rejected():
    with pytest.raises(ValueError):
        format_degrees(45, "fancy")
    with pytest.raises(ValueError):
        Angle(45, display="fancy")
