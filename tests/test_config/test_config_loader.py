"""
Configuration Tests

YAML loading and validation of group control and simulation settings.
"""

import pytest
import yaml

from config import (
    GroupControlConfig,
    SimulationConfig,
    load_group_control_config,
    load_simulation_config,
    save_group_control_config,
    save_simulation_config,
)


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_load_group_control_config(tmp_path):
    path = write_yaml(tmp_path / "gc.yaml", {
        'group_control': {
            'allocation_strategy': {'name': 'NearestRequest', 'parameters': {'tie_break': 'upper'}},
            'update_indicators': True,
        }
    })

    config = load_group_control_config(path)

    assert config.allocation_strategy.name == "NearestRequest"
    assert config.allocation_strategy.parameters == {'tie_break': 'upper'}
    assert config.update_indicators is True


def test_group_control_defaults():
    config = GroupControlConfig.from_dict(None)

    assert config.allocation_strategy.name == "NearestRequest"
    assert config.update_indicators is False


def test_invalid_tie_break_rejected(tmp_path):
    path = write_yaml(tmp_path / "gc.yaml", {
        'group_control': {'allocation_strategy': {'name': 'NearestRequest', 'parameters': {'tie_break': 'middle'}}}
    })

    with pytest.raises(ValueError):
        load_group_control_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_simulation_config(tmp_path / "absent.yaml")


def test_non_mapping_yaml_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_group_control_config(path)


def test_load_simulation_config(tmp_path):
    path = write_yaml(tmp_path / "sim.yaml", {
        'simulation': {
            'building': {'num_floors': 6},
            'elevator': {'num_elevators': 2, 'start_floors': [0, 5]},
            'traffic': {
                'simulation_duration': 60.0,
                'calls': [
                    {'time': 1.0, 'type': 'hall_call', 'floor': 3, 'direction': 'down'},
                    {'time': 2.0, 'type': 'car_call', 'elevator': 1, 'floor': 0},
                ],
            },
            'log_level': 'DEBUG',
        }
    })

    config = load_simulation_config(path)

    assert config.building.num_floors == 6
    assert config.elevator.get_start_floor(1) == 5
    assert [call.type for call in config.traffic.calls] == ['hall_call', 'car_call']
    assert config.log_level == 'DEBUG'


@pytest.mark.parametrize("call", [
    {'time': 1.0, 'type': 'hall_call', 'floor': 4, 'direction': 'up'},  # top floor
    {'time': 1.0, 'type': 'hall_call', 'floor': 0, 'direction': 'down'},  # ground floor
    {'time': 1.0, 'type': 'hall_call', 'floor': 9, 'direction': 'up'},  # outside the building
    {'time': 1.0, 'type': 'car_call', 'elevator': 3, 'floor': 1},  # no such elevator
])
def test_invalid_calls_rejected(call):
    config = SimulationConfig.from_dict({
        'simulation': {'building': {'num_floors': 5}, 'traffic': {'calls': [call]}}
    })

    with pytest.raises(ValueError):
        config.validate()


def test_malformed_call_rejected():
    with pytest.raises(ValueError):
        SimulationConfig.from_dict({'traffic': {'calls': [{'time': 1.0, 'type': 'hall_call', 'floor': 2}]}})


def test_start_floors_must_match_fleet():
    with pytest.raises(ValueError):
        SimulationConfig.from_dict({'elevator': {'num_elevators': 2, 'start_floors': [0]}})


def test_save_and_reload(tmp_path):
    gc_config = GroupControlConfig.from_dict({'update_indicators': True})
    sim_config = SimulationConfig.from_dict({'building': {'num_floors': 7}})

    save_group_control_config(gc_config, tmp_path / "out" / "gc.yaml")
    save_simulation_config(sim_config, tmp_path / "out" / "sim.yaml")

    assert load_group_control_config(tmp_path / "out" / "gc.yaml").update_indicators is True
    assert load_simulation_config(tmp_path / "out" / "sim.yaml").building.num_floors == 7


@pytest.mark.parametrize("text", [
    "group_control:\n",
    "group_control:\n  allocation_strategy:\n",
])
def test_empty_group_control_sections_use_defaults(tmp_path, text):
    path = tmp_path / "gc.yaml"
    path.write_text(text, encoding="utf-8")

    config = load_group_control_config(path)

    assert config.allocation_strategy.name == "NearestRequest"
    assert config.update_indicators is False


@pytest.mark.parametrize("text", [
    "simulation:\n",
    "simulation:\n  building:\n",
    "simulation:\n  elevator:\n",
    "simulation:\n  traffic:\n",
])
def test_empty_simulation_sections_use_defaults(tmp_path, text):
    path = tmp_path / "sim.yaml"
    path.write_text(text, encoding="utf-8")

    config = load_simulation_config(path)

    assert config.building.num_floors == 5
    assert config.elevator.num_elevators == 1
    assert config.traffic.calls == []


@pytest.mark.parametrize("text", [
    "simulation:\n  building: 7\n",
    "simulation:\n  traffic:\n    calls:\n      -\n",
    "group_control:\n  allocation_strategy: NearestRequest\n",
])
def test_malformed_sections_rejected(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    loader = load_group_control_config if text.startswith("group_control") else load_simulation_config

    with pytest.raises(ValueError):
        loader(path)
