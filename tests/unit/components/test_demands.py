# tests/unit/components/test_demands.py
import math
import pytest
from home_energy_sim import SimulationConfig, EngineOptions, ApplianceDemand, Schedule, current_load, FRIDGE_LOAD, APPLIANCE_LOADS
from home_energy_sim.constants import LOADS


def test_catalog():
    assert FRIDGE_LOAD == 0.1
    assert dict(APPLIANCE_LOADS) == {"TV": 0.1, "Oven": 2.0, "Aircon": 1.5}
    with pytest.raises(TypeError):
        APPLIANCE_LOADS["TV"] = 10.0

def test_baseline_only(appliances_disabled):
    config = SimulationConfig.from_dict(5.0, 10.0, appliances_disabled)
    for t in [0.0, 12.5, 19.0, 24.0]:
        assert current_load(t, config) == FRIDGE_LOAD

def test_scheduled_appliances(appliances_evening):
    config = SimulationConfig.from_dict(5.0, 10.0, appliances_evening)
    assert math.isclose(current_load(12.0, config), 0.1)
    assert math.isclose(current_load(14.0, config), 0.1 + 1.5)
    assert math.isclose(current_load(18.5, config), 0.1 + 2.0)
    assert math.isclose(current_load(19.0, config), 0.1 + 0.1 + 2.0)
    assert math.isclose(current_load(22.5, config), 0.1 + 0.1 + 1.5)
    assert math.isclose(current_load(1.0, config), 0.1 + 1.5)

def test_disabled_appliance_is_never_on(appliances_evening):
    appliances_evening["Oven"]["enabled"] = False
    config = SimulationConfig.from_dict(5.0, 10.0, appliances_evening)
    assert math.isclose(current_load(18.5, config), 0.1)

def test_binary_schedule_mode(appliances_disabled):
    appliances_disabled["Oven"]["enabled"] = True
    config = SimulationConfig.from_dict(5.0, 10.0, appliances_disabled)
    options = EngineOptions(schedule_mode="binary", base_load_kw=LOADS.base_house_kw)
    assert math.isclose(current_load(3.0, config, options), 3.0)
    # With the dual-window engine an empty schedule keeps the appliance off
    assert current_load(3.0, config) == 0.1

def test_appliance_demand_rejects_unknown_mode():
    with pytest.raises(ValueError):
        ApplianceDemand("Oven", 2.0, True, Schedule(), schedule_mode="sometimes")
