# src/home_energy_sim/constants/solar.py
from __future__ import annotations
from dataclasses import dataclass
from .base import FrozenNamespace

@dataclass(frozen=True)
class Solar(FrozenNamespace):
    peak_time_h: float = 12.5   # 12:30, centre of the production bell
    sigma_h: float = 2.5        # width of the bell [h]
    sunrise_h: float = 6.0      # only used when clipping is enabled
    sunset_h: float = 18.0

SOLAR = Solar()
