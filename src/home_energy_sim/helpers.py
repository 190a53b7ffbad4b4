import math


def time_to_decimal(time_str: str | None) -> float | None:
    """
    Converts a "HH:MM" wall-clock string into decimal hours.
    Returns None when the time is not set (None or empty string).
    """
    if not time_str:
        return None
    hours, minutes = (int(part) for part in time_str.split(":"))
    return hours + minutes / 60


def decimal_to_time(t: float) -> str:
    # Display helper: truncates to the minute, 12.75 -> "12:45"
    hours = math.floor(t)
    minutes = math.floor(round((t - hours) * 60, 6))
    return f"{hours:02d}:{minutes:02d}"


class ConfigurationError(ValueError):
    pass


class StorageError(Exception):
    pass
