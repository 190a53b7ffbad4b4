# tests/unit/test_io_loaders.py
import pytest
from home_energy_sim import load_simulation_config, ConfigurationError, Schedule


def test_yaml_loader(data_dir):
    config, options = load_simulation_config(data_dir / "household.yaml")
    assert config.inverter_capacity_kw == 5.0
    assert config.battery_capacity_kwh == 10
    assert config.appliances["TV"].enabled
    # Unquoted times are read back as "HH:MM"
    assert config.appliances["Oven"].schedule == Schedule(on1="18:00", off1="19:30")
    assert not config.appliances["Aircon"].enabled
    assert options.clip_solar
    assert options.max_discharge_kw == 3.0
    assert options.time_step_h == 0.1

def test_yaml_loader_minimal(data_dir):
    config, options = load_simulation_config(data_dir / "household_minimal.yaml")
    assert config.appliances == {}
    assert config.inverter_capacity_kw == 0

def test_yaml_loader_rejects_invalid_files(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("inverter_capacity_kw: 5.0\n")
    with pytest.raises(ConfigurationError):
        load_simulation_config(path)
    path.write_text("inverter_capacity_kw: 5.0\nbattery_capacity_kwh: 0\n")
    with pytest.raises(ConfigurationError):
        load_simulation_config(path)
