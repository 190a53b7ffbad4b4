# src/home_energy_sim/constants/__init__.py
from .solar import SOLAR
from .loads import LOADS, BATTERY, SIM, APPLIANCE_LOADS, FRIDGE_LOAD

__all__ = ["SOLAR", "LOADS", "BATTERY", "SIM", "APPLIANCE_LOADS", "FRIDGE_LOAD"]
