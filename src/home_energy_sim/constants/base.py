# src/home_energy_sim/constants/base.py
from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class FrozenNamespace:
    """Immutable bag of constants. Power in kW, energy in kWh, time in hours."""
