from typing import Any, Callable, Dict, List
from collections import defaultdict
from home_energy_sim.components.base import Component
from home_energy_sim.components.demands import Demand, ConstantPowerDemand, ApplianceDemand
from home_energy_sim.components.producers import Producer, SolarBellCurveProducer
from home_energy_sim.components.storage import StorageUnit, Battery
from home_energy_sim.components.utilities import BalancingUtility, GridConnection, Utility
from home_energy_sim.controllers.base import Controller, SelfConsumptionController
from home_energy_sim.sim.config import EngineOptions, SimulationConfig


class Environment:
    def __init__(self, components: List[Component] = [], controllers: List[Controller] = [], trace: Callable[[dict], Any] | None = None):
        self.components: Dict[str, Component] = {component.name: component for component in components}
        self.components_classified = defaultdict(list)
        self.controllers: Dict[str, Controller] = {controller.name: controller for controller in controllers}
        self.ordered_controllers: List[str] = [controller.name for controller in controllers]
        self.trace = trace
        # Ordering data
        self.classify_components()
        self.load_components_to_controllers()

    @classmethod
    def from_config(cls, config: SimulationConfig, options: EngineOptions | None = None, trace: Callable[[dict], Any] | None = None):
        """Builds the household described by the configuration: PV, baseline load, appliances, battery and grid"""
        options = options if options is not None else EngineOptions()
        components = [
            ConstantPowerDemand("baseline", options.base_load_kw),
            *[ApplianceDemand(name, options.appliance_loads[name], appliance.enabled, appliance.schedule, options.schedule_mode)
              for name, appliance in config.appliances.items()],
            SolarBellCurveProducer("pv", config.inverter_capacity_kw, clip=options.clip_solar),
            Battery("battery", config.battery_capacity_kwh, max_discharging_power=options.max_discharge_kw),
            GridConnection("grid"),
        ]
        controllers = [SelfConsumptionController("battery_controller", "battery")]
        return cls(components=components, controllers=controllers, trace=trace)

    def classify_components(self):
        # Classify components based on their type
        for _, component in self.components.items():
            if isinstance(component, Demand):
                self.components_classified['Demand'].append(component)
            elif isinstance(component, Producer):
                self.components_classified['Producer'].append(component)
            elif isinstance(component, BalancingUtility):
                self.components_classified['BalancingUtility'].append(component)
            elif isinstance(component, Utility):
                self.components_classified['Utility'].append(component)
            elif isinstance(component, StorageUnit):
                self.components_classified['StorageUnit'].append(component)
            component.attach(trace=self.trace)

    def load_components_to_controllers(self):
        for _, controller in self.controllers.items():
            controller.load_controlled_components(self.components)

    def get_load(self, t: float) -> float:
        # Summed in insertion order, the same order used by the simulator
        load = 0.0
        for demand in self.components_classified['Demand']:
            load += demand.get_power(t)
        return load

    def get_solar(self, t: float) -> float:
        solar = 0.0
        for producer in self.components_classified['Producer']:
            solar += producer.get_power(t)
        return solar

    @property
    def battery(self) -> Battery:
        return self.components_classified['StorageUnit'][0]

    @property
    def grid(self) -> GridConnection:
        return self.components_classified['BalancingUtility'][0]
