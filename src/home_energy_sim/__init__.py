# Re-export a stable public API
from .helpers import time_to_decimal, decimal_to_time, ConfigurationError, StorageError
from .constants import APPLIANCE_LOADS, FRIDGE_LOAD
from .components.schedule import Schedule, is_appliance_running
from .components.producers import solar_production, SolarBellCurveProducer
from .components.demands import current_load, ConstantPowerDemand, ApplianceDemand
from .components.storage import Battery
from .components.utilities import GridConnection
from .controllers.base import SelfConsumptionController
from .core.base_environment import Environment
from .sim.config import SimulationConfig, ApplianceConfig, EngineOptions
from .sim.simulator import Simulator, simulate_day
from .sim.results import SimulationResults
from .io.loaders import load_simulation_config

__all__ = [
    "time_to_decimal", "decimal_to_time", "ConfigurationError", "StorageError",
    "APPLIANCE_LOADS", "FRIDGE_LOAD",
    "Schedule", "is_appliance_running",
    "solar_production", "SolarBellCurveProducer",
    "current_load", "ConstantPowerDemand", "ApplianceDemand",
    "Battery", "GridConnection",
    "SelfConsumptionController",
    "Environment",
    "SimulationConfig", "ApplianceConfig", "EngineOptions",
    "Simulator", "simulate_day", "SimulationResults",
    "load_simulation_config",
]
