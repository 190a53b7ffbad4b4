from home_energy_sim.sim.simulation_data import SimulationData
from home_energy_sim.helpers import decimal_to_time
from dataclasses import dataclass
from typing import Dict, List
import numpy as np


@dataclass
class SimulationResults:
    """
    Full-day series plus the snapshot at the query time.

    The snapshot battery state, cumulative import and cumulative consumption are read at
    `current_index`, the recorded step nearest the query time. Load and solar are evaluated at
    the exact query time. Cumulative export is the total over the whole run.
    """
    data: SimulationData
    time_step: float
    time_vector: np.ndarray
    query_time_h: float
    current_index: int
    battery_soc: float
    battery_energy_kwh: float
    cumulative_grid_import_kwh: float
    cumulative_grid_export_kwh: float
    current_load_kw: float
    current_solar_kw: float
    cumulative_house_consumption_kwh: float

    @property
    def times(self) -> np.ndarray:
        return self.time_vector

    @property
    def battery_soc_series(self) -> np.ndarray:
        return self.data.battery_soc

    @property
    def battery_energy_series(self) -> np.ndarray:
        return self.data.battery_energy

    @property
    def cumulative_grid_import_series(self) -> np.ndarray:
        return self.data.cumulative_grid_import

    @property
    def cumulative_grid_export_series(self) -> np.ndarray:
        return self.data.cumulative_grid_export

    @property
    def cumulative_house_consumption_series(self) -> np.ndarray:
        return self.data.cumulative_house_consumption

    @property
    def solar_production_series(self) -> np.ndarray:
        return self.data.solar_production

    @property
    def house_load_series(self) -> np.ndarray:
        return self.data.house_load

    def to_dataframe(self):
        return self.data.to_dataframe(self.time_vector)

    def time_labels(self) -> List[str]:
        return [decimal_to_time(t) for t in self.time_vector]

    def summary(self) -> Dict[str, float]:
        # Whole-run totals, in kWh, and the self-consumption / self-sufficiency ratios
        total_pv = float(self.data.solar_production.sum() * self.time_step)
        total_load = float(self.data.cumulative_house_consumption[-1])
        grid_import = float(self.data.cumulative_grid_import[-1])
        grid_export = float(self.data.cumulative_grid_export[-1])
        return {
            "total_pv": total_pv,
            "total_load": total_load,
            "grid_import": grid_import,
            "grid_export": grid_export,
            "scr": (total_pv - grid_export) / total_pv if total_pv > 0 else 0.0,
            "ssr": (total_load - grid_import) / total_load if total_load > 0 else 0.0,
        }
