# tests/unit/components/test_storage.py
import math
import pytest
from home_energy_sim import Battery, ConfigurationError, StorageError


def test_battery_creation():
    battery = Battery("test_battery", 10.0)
    assert battery.energy == 10.0
    assert battery.SOC == 1.0
    assert battery.soc_pct == 100.0
    assert battery.max_discharging_power == 5.0

@pytest.mark.parametrize("capacity", [0.0, -5.0])
def test_battery_requires_positive_capacity(capacity):
    with pytest.raises(ConfigurationError):
        Battery("test_battery", capacity)

def test_charge_is_limited_by_the_remaining_capacity():
    battery = Battery("test_battery", 10.0)
    assert battery.charge(1.0) == 0.0
    battery.energy = 7.3
    accepted = battery.charge(5.0)
    assert math.isclose(accepted, 2.7)
    assert battery.energy == 10.0

def test_discharge_is_limited_by_rate_and_energy():
    battery = Battery("test_battery", 10.0)
    assert battery.discharge(8.0, time_step=1.0) == 5.0  # 5 kW cap over one hour
    assert battery.energy == 5.0
    assert battery.discharge(8.0, time_step=10.0) == 5.0  # Only 5 kWh left
    assert battery.energy == 0.0
    assert battery.discharge(1.0, time_step=1.0) == 0.0

def test_uncapped_discharge():
    battery = Battery("test_battery", 20.0, max_discharging_power=None)
    assert battery.discharge(12.0, time_step=0.1) == 12.0

def test_step_and_reset():
    from home_energy_sim.sim.state import SimulationState
    battery = Battery("test_battery", 10.0)
    battery.time_step = 0.1
    state = SimulationState(time_step=0.1)
    battery.step(state, -0.3)
    assert math.isclose(battery.energy, 9.7)
    battery.step(state, 0.1)
    assert math.isclose(battery.energy, 9.8)
    battery.initialize(state)
    assert battery.energy == 10.0

def test_check_storage_state():
    battery = Battery("test_battery", 10.0)
    battery.energy = 10.5
    with pytest.raises(StorageError):
        battery.check_storage_state()
    battery.energy = -0.1
    with pytest.raises(StorageError):
        battery.check_storage_state()
