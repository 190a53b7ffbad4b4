# home_energy_sim/sim/simulator.py
from dataclasses import dataclass
from typing import Any, Callable, Mapping
import logging
import math

from home_energy_sim.core.base_environment import Environment
from .config import EngineOptions, SimulationConfig
from .state import SimulationState
from home_energy_sim.sim.simulation_data import SimulationData
from home_energy_sim.sim.results import SimulationResults

logger = logging.getLogger(__name__)


@dataclass
class Simulator:
    config: SimulationConfig
    options: EngineOptions | None = None
    trace: Callable[[dict], Any] | None = None

    def __post_init__(self):
        if self.options is None:
            self.options = EngineOptions()
        # Configuration errors surface here, before any integration
        self.config.validate(self.options)

    def run(self, query_time_h: float) -> SimulationResults:
        # Every run starts from scratch: new components, full battery, zeroed accumulators
        self.env = Environment.from_config(self.config, self.options, self.trace)
        self.state = SimulationState()
        self.state.init_time_vector(self.options)
        logger.debug("Simulating %d steps of %.3f h (query time %.3f h)", len(self.state.time_vector), self.options.time_step_h, query_time_h)

        sim_data = SimulationData()
        sim_data.create_empty_datasets(self.state.time_vector)

        self._initialize_units()

        # Main loop
        for time_id, time in enumerate(self.state.time_vector):
            self.state.time_id = time_id
            self.state.time = float(time)
            self._step(sim_data)

        return self._create_results(sim_data, query_time_h)

    def _initialize_units(self):
        for _, component in self.env.components.items():
            component.time_step = self.options.time_step_h
            component.initialize(self.state)
        for _, controller in self.env.controllers.items():
            controller.time_step = self.options.time_step_h
            controller.initialize()

    def _step(self, sim_data: SimulationData) -> None:
        state = self.state
        # House load, integrated into the consumption
        state.load = 0.0
        self._simulate_components_of_type("Demand")
        state.cumulative_house_consumption += state.load * state.time_step
        # PV production
        self._simulate_components_of_type("Producer")
        # Battery, then the grid takes whatever is left
        battery_action = 0.0
        for controller_name in self.env.ordered_controllers:
            actions = self.env.controllers[controller_name].get_action(state)
            for component_name, action in actions.items():
                self.env.components[component_name].step(state, action)
                battery_action += action
        residual = (state.solar - state.load) * state.time_step - battery_action
        for component in self.env.components_classified["BalancingUtility"]:
            component.step(state, residual)

        self._save_simulation_data(sim_data)

    def _simulate_components_of_type(self, type: str):
        for component in self.env.components_classified[type]:
            component.step(self.state, None)

    def _save_simulation_data(self, sim_data: SimulationData):
        time_id = self.state.time_id
        battery, grid = self.env.battery, self.env.grid
        sim_data.solar_production[time_id] = self.state.solar
        sim_data.house_load[time_id] = self.state.load
        sim_data.battery_energy[time_id] = battery.energy
        sim_data.battery_soc[time_id] = battery.soc_pct
        sim_data.cumulative_grid_import[time_id] = grid.imported
        sim_data.cumulative_grid_export[time_id] = grid.exported
        sim_data.cumulative_house_consumption[time_id] = self.state.cumulative_house_consumption

    def get_snapshot_index(self, query_time_h: float) -> int:
        # Nearest recorded step, clamped to the recorded series
        index = math.floor(query_time_h / self.options.time_step_h + 0.5)
        return min(max(index, 0), len(self.state.time_vector) - 1)

    def _create_results(self, sim_data: SimulationData, query_time_h: float) -> SimulationResults:
        index = self.get_snapshot_index(query_time_h)
        results = SimulationResults(
            data=sim_data,
            time_step=self.options.time_step_h,
            time_vector=self.state.time_vector,
            query_time_h=query_time_h,
            current_index=index,
            battery_soc=float(sim_data.battery_soc[index]),
            battery_energy_kwh=float(sim_data.battery_energy[index]),
            cumulative_grid_import_kwh=float(sim_data.cumulative_grid_import[index]),
            cumulative_grid_export_kwh=self.env.grid.exported,
            current_load_kw=self.env.get_load(query_time_h),
            current_solar_kw=self.env.get_solar(query_time_h),
            cumulative_house_consumption_kwh=float(sim_data.cumulative_house_consumption[index]),
        )
        logger.debug("Snapshot at index %d: SoC %.1f %%, grid import %.3f kWh", index, results.battery_soc, results.cumulative_grid_import_kwh)
        return results


def simulate_day(query_time_h: float,
                 inverter_capacity_kw: float,
                 battery_capacity_kwh: float,
                 appliances: Mapping[str, Any] | None = None,
                 options: EngineOptions | None = None,
                 trace: Callable[[dict], Any] | None = None) -> SimulationResults:
    """
    Simulates the household energy balance over the day and returns the series together with
    the snapshot at the query time.

    Parameters
    ----------
    query_time_h : float
        Time of day [h] of the snapshot. Values outside the simulated range are clamped
    inverter_capacity_kw : float
        Peak PV/inverter capacity [kW]. Must not be negative
    battery_capacity_kwh : float
        Battery capacity [kWh]. Must be strictly positive
    appliances : mapping
        Appliance name -> {"enabled": bool, "schedule": {"on1", "off1", "on2", "off2"}}, or ApplianceConfig
    options : EngineOptions, optional
        Engine variant and time discretisation. Defaults to EngineOptions()
    trace : callable, optional
        Diagnostic hook receiving the schedule decisions

    Raises
    ------
    ConfigurationError
        If the configuration is invalid. Nothing is simulated in that case
    """
    config = SimulationConfig.from_dict(inverter_capacity_kw, battery_capacity_kwh, appliances)
    return Simulator(config, options, trace).run(query_time_h)
