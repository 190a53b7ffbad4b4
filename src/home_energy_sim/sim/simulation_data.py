from dataclasses import dataclass, fields
import numpy as np
import pandas as pd

@dataclass
class SimulationData:
    solar_production: np.ndarray = None               # kW
    house_load: np.ndarray = None                     # kW
    battery_energy: np.ndarray = None                 # kWh
    battery_soc: np.ndarray = None                    # %
    cumulative_grid_import: np.ndarray = None         # kWh
    cumulative_grid_export: np.ndarray = None         # kWh
    cumulative_house_consumption: np.ndarray = None   # kWh

    def create_empty_datasets(self, time_vector):
        for f in fields(self):
            setattr(self, f.name, np.zeros(len(time_vector), dtype=np.float64))

    def to_dataframe(self, time_vector):
        return pd.DataFrame({f.name: getattr(self, f.name) for f in fields(self)}, index=pd.Index(time_vector, name='time'))
