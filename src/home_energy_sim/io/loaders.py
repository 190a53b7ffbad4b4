import os
from typing import Tuple
import yaml

from home_energy_sim.helpers import ConfigurationError
from home_energy_sim.sim.config import EngineOptions, SimulationConfig


def load_simulation_config(path: str | os.PathLike) -> Tuple[SimulationConfig, EngineOptions]:
    """
    Reads a household configuration from a YAML file.

    Expected layout:

        inverter_capacity_kw: 5.0
        battery_capacity_kwh: 10
        appliances:
          Oven: {enabled: true, schedule: {on1: "18:00", off1: "19:30"}}
        engine:            # optional, any EngineOptions field
          clip_solar: true
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"The configuration file {path} must contain a mapping")
    missing = [key for key in ("inverter_capacity_kw", "battery_capacity_kwh") if key not in raw]
    if missing:
        raise ConfigurationError(f"The configuration file {path} is missing {missing}")
    # Schedule times are kept as strings; YAML would read an unquoted 18:00 as a sexagesimal integer
    appliances = {name: _normalize_appliance(name, data) for name, data in (raw.get("appliances") or {}).items()}
    config = SimulationConfig.from_dict(raw["inverter_capacity_kw"], raw["battery_capacity_kwh"], appliances)
    options = EngineOptions.from_dict(raw.get("engine"))
    config.validate(options)
    return config, options


def _normalize_appliance(name: str, data) -> dict:
    if isinstance(data, bool):
        return {"enabled": data}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Appliance {name} must be a mapping or a boolean. {data!r} was provided")
    schedule = {}
    for key, value in (data.get("schedule") or {}).items():
        if isinstance(value, int) and not isinstance(value, bool):
            value = f"{value // 60:02d}:{value % 60:02d}"
        schedule[key] = value
    return {"enabled": data.get("enabled", False), "schedule": schedule}
