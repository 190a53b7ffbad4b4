from dataclasses import dataclass
import math
import numpy as np

@dataclass
class SimulationState:
    time: float = 0.0           # hours
    time_id: int = 0
    time_vector: np.ndarray | None = None
    time_step: float = 0.0      # hours
    load: float = 0.0           # kW, house load at the current step
    solar: float = 0.0          # kW, PV production at the current step
    cumulative_house_consumption: float = 0.0   # kWh

    def init_time_vector(self, options) -> None:
        self.time = 0.0
        self.time_id = 0
        self.time_step = options.time_step_h
        # Built from an integer step count to avoid drift; the last sample lands exactly on the cutoff
        self.time_vector = np.arange(options.number_of_steps + 1) * options.time_step_h
        if math.isclose(self.time_vector[-1], options.time_end_h):
            self.time_vector[-1] = options.time_end_h
        self.load = 0.0
        self.solar = 0.0
        self.cumulative_house_consumption = 0.0
