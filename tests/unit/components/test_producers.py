# tests/unit/components/test_producers.py
import math
import numpy as np
import pytest
from home_energy_sim import solar_production


def test_peak_production_at_half_past_noon():
    assert solar_production(12.5, 5.0) == 5.0
    assert solar_production(12.5, 0.0) == 0.0

@pytest.mark.parametrize("d", [0.1, 1.0, 2.5, 6.0, 12.5, 20.0])
def test_production_is_symmetric_around_the_peak(d):
    assert math.isclose(solar_production(12.5 + d, 4.2), solar_production(12.5 - d, 4.2), rel_tol=1e-12)

def test_production_never_exceeds_capacity():
    for t in np.linspace(-5, 30, 701):
        assert 0.0 <= solar_production(float(t), 3.0) <= 3.0

def test_production_at_one_sigma():
    assert math.isclose(solar_production(15.0, 2.0), 2.0 * math.exp(-0.5))

def test_clipped_production():
    assert solar_production(5.9, 5.0, clip=True) == 0.0
    assert solar_production(18.1, 5.0, clip=True) == 0.0
    assert solar_production(6.0, 5.0, clip=True) == solar_production(6.0, 5.0)
    assert solar_production(18.0, 5.0, clip=True) == solar_production(18.0, 5.0)
    assert solar_production(5.9, 5.0) > 0.0

def test_pv_component_step():
    from home_energy_sim import SolarBellCurveProducer
    from home_energy_sim.sim.state import SimulationState
    pv = SolarBellCurveProducer("pv", installed_power=4.0)
    state = SimulationState(time=12.5, time_step=0.1)
    energy = pv.step(state)
    assert state.solar == 4.0
    assert math.isclose(energy, 0.4)  # kWh over the step
