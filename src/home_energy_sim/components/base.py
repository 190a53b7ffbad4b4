from typing import Callable, Any
from home_energy_sim.sim.state import SimulationState

class Component:
    """Base class for household components. Subclasses implement step(state, action)."""
    name: str
    time_step: float
    def __init__(self, name: str):
        self.name = name
        self.time_step = 0.0
        self._trace = None

    def attach(self, *, trace: Callable[[dict], Any] | None = None):
        self._trace = trace

    def step(self, state: SimulationState, action = None):
        pass

    def initialize(self, state: SimulationState | None = None):
        pass
