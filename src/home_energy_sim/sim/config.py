# home_energy_sim/sim/config.py
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping
import math

from home_energy_sim.components.schedule import Schedule
from home_energy_sim.constants import APPLIANCE_LOADS, BATTERY, FRIDGE_LOAD, SIM
from home_energy_sim.helpers import ConfigurationError


@dataclass(frozen=True)
class EngineOptions:
    """
    Behaviour flags of the day simulator. The defaults give the dual-window engine:
    unclipped solar bell, appliances on two schedule windows, 5 kW discharge cap.
    """
    time_step_h: float = SIM.time_step_h
    time_end_h: float = SIM.day_length_h     # cutoff of the integration
    clip_solar: bool = False                 # zero production outside sunrise/sunset
    schedule_mode: str = "windows"           # "windows" or "binary"
    max_discharge_kw: float | None = BATTERY.max_discharge_kw
    base_load_kw: float = FRIDGE_LOAD
    appliance_loads: Mapping[str, float] = field(default_factory=lambda: APPLIANCE_LOADS)

    @property
    def number_of_steps(self) -> int:
        return round(self.time_end_h / self.time_step_h)

    def validate(self) -> None:
        if not self.time_step_h > 0:
            raise ConfigurationError(f"The time step must be positive. {self.time_step_h} h was provided")
        if not self.time_end_h > 0:
            raise ConfigurationError(f"The simulation cutoff must be positive. {self.time_end_h} h was provided")
        if self.schedule_mode not in {"windows", "binary"}:
            raise ConfigurationError(f"Unknown schedule mode: {self.schedule_mode}")
        if self.max_discharge_kw is not None and self.max_discharge_kw < 0:
            raise ConfigurationError(f"The maximum discharge power cannot be negative. {self.max_discharge_kw} kW was provided")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None):
        if not data:
            return cls()
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown engine options: {sorted(unknown)}")
        data = dict(data)
        if "appliance_loads" in data:
            data["appliance_loads"] = MappingProxyType(dict(data["appliance_loads"]))
        return cls(**data)


@dataclass(frozen=True)
class ApplianceConfig:
    enabled: bool = False
    schedule: Schedule = field(default_factory=Schedule)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | "ApplianceConfig"):
        if isinstance(data, ApplianceConfig):
            return data
        schedule = data.get("schedule")
        if not isinstance(schedule, Schedule):
            schedule = Schedule.from_dict(schedule)
        return cls(enabled=bool(data.get("enabled", False)), schedule=schedule)


@dataclass(frozen=True)
class SimulationConfig:
    inverter_capacity_kw: float = 5.0     # kW
    battery_capacity_kwh: float = 10.0    # kWh
    appliances: Mapping[str, ApplianceConfig] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, inverter_capacity_kw: float, battery_capacity_kwh: float, appliances: Mapping[str, Any] | None = None):
        """Builds a configuration from plain values, e.g. the state of a user interface"""
        appliances = {name: ApplianceConfig.from_dict(appliance) for name, appliance in (appliances or {}).items()}
        return cls(inverter_capacity_kw, battery_capacity_kwh, MappingProxyType(appliances))

    def validate(self, options: EngineOptions | None = None) -> None:
        # Raised before any integration. Values are never clamped
        options = options if options is not None else EngineOptions()
        options.validate()
        if not math.isfinite(self.battery_capacity_kwh) or self.battery_capacity_kwh <= 0:
            raise ConfigurationError(f"The battery capacity must be positive. {self.battery_capacity_kwh} kWh was provided")
        if not math.isfinite(self.inverter_capacity_kw) or self.inverter_capacity_kw < 0:
            raise ConfigurationError(f"The inverter capacity cannot be negative. {self.inverter_capacity_kw} kW was provided")
        unknown = [name for name in self.appliances if name not in options.appliance_loads]
        if unknown:
            raise ConfigurationError(f"Appliances {unknown} are not in the appliance catalog {list(options.appliance_loads)}")
