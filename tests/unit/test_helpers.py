# tests/unit/test_helpers.py
import math
import pytest

@pytest.mark.parametrize("time_str, expected", [("00:00", 0.0), ("09:00", 9.0), ("12:30", 12.5), ("23:59", 23 + 59 / 60), ("7:15", 7.25)])
def test_time_to_decimal(time_str, expected):
    from home_energy_sim import time_to_decimal
    assert math.isclose(time_to_decimal(time_str), expected)

@pytest.mark.parametrize("time_str", [None, ""])
def test_time_to_decimal_unset(time_str):
    from home_energy_sim import time_to_decimal
    assert time_to_decimal(time_str) is None

def test_decimal_to_time():
    from home_energy_sim import decimal_to_time
    assert decimal_to_time(0.0) == "00:00"
    assert decimal_to_time(12.75) == "12:45"
    assert decimal_to_time(3 * 0.1) == "00:18"
    assert decimal_to_time(24.0) == "24:00"
