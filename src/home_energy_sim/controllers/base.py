from typing import Dict, List
from home_energy_sim.components.storage import Battery
from home_energy_sim.sim.state import SimulationState

class Controller():
    name: str
    time_step: float
    controlled_component_names: List[str]
    previous_action: dict
    def __init__(self, name, controlled_components: List[str]):
        """
        Class for a generic controller

        Parameters
        ----------
        name : str
            Name of the controller
        controlled_components : list
            A list of the names of the controlled components
        """
        self.name = name
        self.controlled_component_names = controlled_components
        self.time_step = 0.0
        self.previous_action = {}

    def load_controlled_components(self, components):
        self.controlled_components = {name: components[name] for name in self.controlled_component_names}

    def initialize(self):
        self.previous_action = {name: 0.0 for name in self.controlled_component_names}

    def get_action(self, state: SimulationState):
        return {}


class SelfConsumptionController(Controller):
    """
    Battery dispatch for self-consumption: surplus PV charges the battery, deficits are covered by
    the battery first. Whatever the battery cannot take or give is left to the grid.
    """
    battery_name: str
    def __init__(self, name, battery_name: str):
        self.battery_name = battery_name
        super().__init__(name, [battery_name])

    def get_action(self, state: SimulationState) -> Dict[str, float]:
        # The action is the energy exchanged with the battery over the step (positive when charging)
        battery: Battery = self.controlled_components[self.battery_name]
        net_power = state.solar - state.load
        if net_power >= 0:
            energy_excess = net_power * self.time_step
            action = min(energy_excess, battery.get_available_capacity())
        else:
            deficit_energy = -net_power * self.time_step
            action = -min(deficit_energy, battery.get_maximum_discharge_energy(self.time_step))
        self.previous_action = {self.battery_name: action}
        return self.previous_action
