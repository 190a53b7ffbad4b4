# src/home_energy_sim/constants/loads.py
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from .base import FrozenNamespace

@dataclass(frozen=True)
class Loads(FrozenNamespace):
    fridge_kw: float = 0.1         # always on
    base_house_kw: float = 1.0     # baseline used by the binary-enable variant
    appliances: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({
        "TV": 0.1,
        "Oven": 2.0,
        "Aircon": 1.5,
    }))

@dataclass(frozen=True)
class BatteryLimits(FrozenNamespace):
    max_discharge_kw: float = 5.0

@dataclass(frozen=True)
class SimDefaults(FrozenNamespace):
    time_step_h: float = 0.1
    day_length_h: float = 24.0

LOADS = Loads()
BATTERY = BatteryLimits()
SIM = SimDefaults()

# Shared catalog (name -> kW). Read-only so callers and engine cannot drift apart.
APPLIANCE_LOADS = LOADS.appliances
FRIDGE_LOAD = LOADS.fridge_kw
