from home_energy_sim.components.base import Component
from home_energy_sim.components.schedule import Schedule, is_appliance_running
from home_energy_sim.sim.state import SimulationState
from home_energy_sim.sim.config import EngineOptions
from typing import Any, Callable


class Demand(Component):
    power: float
    def __init__(self, name: str, power: float):
        super().__init__(name)
        self.power = power

    def is_active(self, t: float) -> bool:
        return True

    def get_power(self, t: float) -> float:
        return self.power if self.is_active(t) else 0.0

    def step(self, state: SimulationState, action = None):
        state.load += self.get_power(state.time)


class ConstantPowerDemand(Demand):
    """Always-on load, e.g. the fridge"""


class ApplianceDemand(Demand):
    enabled: bool
    schedule: Schedule
    schedule_mode: str
    def __init__(self, name: str, power: float, enabled: bool, schedule: Schedule | None = None, schedule_mode: str = "windows"):
        """
        Schedulable appliance drawing a fixed power when on

        Parameters
        ----------
        name : str
            Name of the appliance, as in the appliance catalog
        power : float
            Power draw [kW] while running
        enabled : bool
            Whether the appliance is switched on at all
        schedule : Schedule
            On/off windows. Only used with the "windows" schedule mode
        schedule_mode : str
            "windows" (on when enabled and inside a window) or "binary" (on whenever enabled)
        """
        if schedule_mode not in {"windows", "binary"}:
            raise ValueError(f"Schedule mode for appliance {name} is not accepted. {schedule_mode} was provided")
        super().__init__(name, power)
        self.enabled = enabled
        self.schedule = schedule if schedule is not None else Schedule()
        self.schedule_mode = schedule_mode

    def is_active(self, t: float) -> bool:
        if not self.enabled:
            return False
        match self.schedule_mode:
            case "binary":
                return True
            case "windows":
                return is_appliance_running(t, self.schedule, self._trace)


def current_load(t: float, config, options = None, trace: Callable[[dict], Any] | None = None) -> float:
    """House load [kW] at time t: baseline plus every enabled appliance currently scheduled on"""
    options = options if options is not None else EngineOptions()
    load = options.base_load_kw
    for name, appliance in config.appliances.items():
        demand = ApplianceDemand(name, options.appliance_loads[name], appliance.enabled, appliance.schedule, options.schedule_mode)
        demand.attach(trace=trace)
        load += demand.get_power(t)
    return load
