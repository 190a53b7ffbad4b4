# tests/conftest.py
import pathlib
import pytest

@pytest.fixture(scope="session")
def data_dir() -> pathlib.Path:
    return pathlib.Path(__file__).parent / "data"

@pytest.fixture
def empty_schedule():
    return {"on1": "", "off1": "", "on2": "", "off2": ""}

@pytest.fixture
def appliances_disabled(empty_schedule):
    # Same shape as the state of the user interface
    return {name: {"enabled": False, "schedule": dict(empty_schedule)} for name in ["TV", "Oven", "Aircon"]}

@pytest.fixture
def appliances_evening():
    return {
        "TV": {"enabled": True, "schedule": {"on1": "19:00", "off1": "23:00"}},
        "Oven": {"enabled": True, "schedule": {"on1": "18:00", "off1": "19:30"}},
        "Aircon": {"enabled": True, "schedule": {"on1": "22:00", "off1": "02:00", "on2": "13:00", "off2": "15:00"}},
    }
