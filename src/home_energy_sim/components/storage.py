from home_energy_sim.components.base import Component
from home_energy_sim.helpers import ConfigurationError, StorageError
from home_energy_sim.sim.state import SimulationState


class StorageUnit(Component):
    """Generic storage unit"""
    max_capacity: float
    energy: float

    def __init__(self, name: str):
        super().__init__(name)

    def step(self, state: SimulationState, action):
        raise NotImplementedError

    def check_storage_state(self):
        # This function must be implemented for each sub type
        raise NotImplementedError

    def reset(self):
        raise NotImplementedError

    def initialize(self, state: SimulationState | None = None):
        self.reset()


class Battery(StorageUnit):
    max_discharging_power: float | None
    def __init__(self, name, capacity: float, max_discharging_power: float | None = 5.0):
        """
        Model of a lossless electric battery

        Parameters
        ----------
        name : str
            Name of the component
        capacity : float
            Maximum energy capacity [kWh] of the battery. Must be strictly positive
        max_discharging_power : float, optional
            Hard cap [kW] on the discharge power, regardless of the stored energy.
            None means no cap. Defaults to 5 kW
        """
        if capacity <= 0:
            raise ConfigurationError(f"Battery {name} must have a positive capacity. {capacity} kWh was provided")
        super().__init__(name)
        self.max_capacity = capacity
        self.max_discharging_power = max_discharging_power
        self.reset()

    @property
    def SOC(self) -> float:
        return self.energy / self.max_capacity

    @property
    def soc_pct(self) -> float:
        return self.energy / self.max_capacity * 100

    def reset(self):
        # The battery starts every run fully charged
        self.energy = self.max_capacity

    def check_storage_state(self):
        if self.energy > self.max_capacity:
            raise StorageError(f"Storage unit {self.name} holds {self.energy} kWh, above its capacity of {self.max_capacity} kWh")
        elif self.energy < 0.0:
            raise StorageError(f"Storage unit {self.name} holds {self.energy} kWh, below zero")

    def get_available_capacity(self) -> float:
        return self.max_capacity - self.energy

    def get_maximum_discharge_energy(self, time_step: float) -> float:
        if self.max_discharging_power is None:
            return self.energy
        return min(self.energy, self.max_discharging_power * time_step)

    def charge(self, energy: float) -> float:
        """Stores up to `energy` kWh and returns the amount accepted"""
        available_capacity = self.get_available_capacity()
        if energy >= available_capacity:
            self.energy = self.max_capacity
            return available_capacity
        self.energy += energy
        return energy

    def discharge(self, energy: float, time_step: float | None = None) -> float:
        """Delivers up to `energy` kWh (within the discharge cap) and returns the amount delivered"""
        time_step = time_step if time_step is not None else self.time_step
        energy_from_battery = min(energy, self.get_maximum_discharge_energy(time_step))
        self.energy -= energy_from_battery
        return energy_from_battery

    def step(self, state: SimulationState, action: float = 0.0):
        # Positive action charges the battery, negative action discharges it (kWh over the step)
        if action >= 0:
            self.charge(action)
        else:
            self.discharge(-action)
        self.check_storage_state()
