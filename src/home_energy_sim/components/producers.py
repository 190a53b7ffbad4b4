from home_energy_sim.components.base import Component
from home_energy_sim.constants import SOLAR
from home_energy_sim.sim.state import SimulationState
import math


def solar_production(t: float, inverter_capacity_kw: float, clip: bool = False) -> float:
    """
    Instantaneous PV production [kW] as a Gaussian bell centred at 12:30.

    Parameters
    ----------
    t : float
        Time of day [h]. Any real value is accepted
    inverter_capacity_kw : float
        Peak inverter capacity [kW], reached at the peak time
    clip : bool
        If True, production is zero before sunrise and after sunset. Defaults to False
    """
    if clip and not (SOLAR.sunrise_h <= t <= SOLAR.sunset_h):
        return 0.0
    return inverter_capacity_kw * math.exp(-(t - SOLAR.peak_time_h) ** 2 / (2 * SOLAR.sigma_h ** 2))


class Producer(Component):
    def __init__(self, name: str):
        super().__init__(name)

    def get_power(self, t: float) -> float:
        raise NotImplementedError


class SolarBellCurveProducer(Producer):
    installed_power: float
    clip: bool
    def __init__(self, name: str, installed_power: float, clip: bool = False):
        super().__init__(name)
        self.installed_power = installed_power
        self.clip = clip

    def get_power(self, t: float) -> float:
        return solar_production(t, self.installed_power, self.clip)

    def step(self, state: SimulationState, action = None):
        state.solar = self.get_power(state.time)
        return state.solar * state.time_step  # Energy produced during the time step in kWh
