import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Tuple
from home_energy_sim.helpers import time_to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Schedule:
    """
    Up to two independent on/off windows for a schedulable appliance.

    Each field is either None (or an empty string) or an "HH:MM" wall-clock time.
    A window is active only when both its on and off times are set; a window whose
    off time is earlier than its on time spans midnight.
    """
    on1: str | None = None
    off1: str | None = None
    on2: str | None = None
    off2: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None):
        if not data:
            return cls()
        return cls(**{key: data.get(key) or None for key in ("on1", "off1", "on2", "off2")})

    def windows(self) -> List[Tuple[int, float, float]]:
        """Returns (window number, on, off) in decimal hours for each active window"""
        active = []
        for i, (on, off) in enumerate([(self.on1, self.off1), (self.on2, self.off2)], start=1):
            on_h, off_h = time_to_decimal(on), time_to_decimal(off)
            if on_h is not None and off_h is not None:
                active.append((i, on_h, off_h))
        return active

    def is_empty(self) -> bool:
        return not self.windows()


def _window_contains(t: float, on: float, off: float) -> bool:
    if off < on:
        return t >= on or t <= off
    return on <= t <= off


def is_appliance_running(t: float, schedule: Schedule, trace: Callable[[dict], Any] | None = None) -> bool:
    """
    Checks whether the decimal hour t lies inside one of the windows of the schedule.

    Parameters
    ----------
    t : float
        Time of day [h]
    schedule : Schedule
        The appliance schedule. Incomplete windows are ignored
    trace : callable, optional
        Diagnostic hook, called once with a dict describing the decision.
        Its return value is ignored
    """
    running, matched_window, wraps_midnight = False, None, None
    for window, on, off in schedule.windows():
        if _window_contains(t, on, off):
            running, matched_window, wraps_midnight = True, window, off < on
            break
    logger.debug("Schedule %s at t=%.3f h: running=%s (window %s)", schedule, t, running, matched_window)
    if trace is not None:
        trace({"time": t, "window": matched_window, "wraps_midnight": wraps_midnight, "running": running})
    return running
