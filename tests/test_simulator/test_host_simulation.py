"""
Host Simulation Tests

End-to-end runs of the dispatch controller against the SimPy reference host.
"""

import pytest

from config.group_control import GroupControlConfig
from config.simulation import SimulationConfig
from group_control import Bootstrap, build_controller
from simulator.host_simulation import HostSimulation


def make_config(calls, num_floors=5, num_elevators=1, start_floors=None, duration=30.0):
    return SimulationConfig.from_dict({
        'simulation': {
            'building': {'num_floors': num_floors},
            'elevator': {
                'num_elevators': num_elevators,
                'seconds_per_floor': 1.5,
                'stop_dwell_time': 3.0,
                'idle_interval': 1.0,
                'start_floors': start_floors,
            },
            'traffic': {
                'simulation_duration': duration,
                'tick_interval': 0.5,
                'calls': calls,
            },
        }
    })


def run(config, gc_config=None):
    controller = build_controller(gc_config or GroupControlConfig())
    simulation = HostSimulation(config, Bootstrap(controller))
    return simulation, controller, simulation.run()


def test_end_to_end_scenario():
    config = make_config([
        {'time': 0.5, 'type': 'hall_call', 'floor': 3, 'direction': 'up'},
        {'time': 4.2, 'type': 'hall_call', 'floor': 1, 'direction': 'down'},
    ])

    simulation, controller, result = run(config)

    assert result.served_stops == {0: [3, 1]}
    assert result.outstanding_calls == []
    assert controller.pending.floors() == []
    assert simulation.elevators[0].current_floor() == 1
    assert result.messages_published > 0


def test_cabin_press_absorbs_hall_call_on_the_way():
    config = make_config([
        {'time': 0.5, 'type': 'hall_call', 'floor': 4, 'direction': 'down'},
        {'time': 1.2, 'type': 'hall_call', 'floor': 2, 'direction': 'up'},
        {'time': 2.0, 'type': 'car_call', 'elevator': 0, 'floor': 2},
    ])

    _, controller, result = run(config)

    # Floor 2 is only passed on the way up; it is served once, after floor 4
    assert result.served_stops == {0: [4, 2]}
    assert result.outstanding_calls == []
    assert controller.pending.floors() == []


def test_two_elevators_split_calls_by_distance():
    config = make_config(
        [
            {'time': 0.5, 'type': 'hall_call', 'floor': 1, 'direction': 'up'},
            {'time': 0.6, 'type': 'hall_call', 'floor': 6, 'direction': 'down'},
        ],
        num_floors=8, num_elevators=2, start_floors=[0, 7], duration=40.0
    )

    _, controller, result = run(config)

    assert result.served_stops == {0: [1], 1: [6]}
    assert result.total_stops == 2
    assert controller.pending.floors() == []


def test_no_traffic_leaves_fleet_parked():
    _, controller, result = run(make_config([], duration=10.0))

    assert result.served_stops == {0: []}
    assert result.outstanding_calls == []


def test_simulation_runs_only_once():
    simulation, _, _ = run(make_config([], duration=5.0))

    with pytest.raises(RuntimeError):
        simulation.run()
