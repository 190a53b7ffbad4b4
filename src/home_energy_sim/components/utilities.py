from home_energy_sim.components.base import Component
from home_energy_sim.sim.state import SimulationState


class Utility(Component):
    def __init__(self, name: str):
        super().__init__(name)


class BalancingUtility(Utility):
    # Balancing utilities close the energy balance of the household at every step
    def step(self, state: SimulationState, action: float = 0.0):
        pass


class GridConnection(BalancingUtility):
    """
    Connection to the public grid. The action is the residual energy [kWh] of the step:
    positive residuals are exported, negative residuals are imported.
    """
    imported: float
    exported: float
    def __init__(self, name: str = "grid"):
        super().__init__(name)
        self.reset()

    def reset(self):
        self.imported = 0.0
        self.exported = 0.0

    def initialize(self, state: SimulationState | None = None):
        self.reset()

    def step(self, state: SimulationState, action: float = 0.0):
        if action >= 0:
            self.exported += action
        else:
            self.imported += -action
