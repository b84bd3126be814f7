"""
Bootstrap Tests

Event subscription at start and per-tick refresh of the fleet view.
"""

import pytest

from config.group_control import AllocationStrategyConfig, GroupControlConfig
from group_control.algorithms.nearest_request import NearestRequestStrategy
from group_control.bootstrap import Bootstrap, build_allocation_strategy, build_controller


def test_init_subscribes_every_entity_once(controller, make_elevator, make_floors):
    elevators = [make_elevator(), make_elevator()]
    floors = make_floors(4)

    Bootstrap(controller).init(elevators, floors)

    for floor in floors:
        assert sorted(floor.handlers) == ["down_button_pressed", "up_button_pressed"]
        assert all(len(callbacks) == 1 for callbacks in floor.handlers.values())
    for elevator in elevators:
        assert sorted(elevator.handlers) == ["floor_button_pressed", "idle", "passing_floor", "stopped_at_floor"]
        assert all(len(callbacks) == 1 for callbacks in elevator.handlers.values())


def test_second_init_is_rejected(controller, make_elevator, make_floors):
    bootstrap = Bootstrap(controller)
    bootstrap.init([make_elevator()], make_floors(3))

    with pytest.raises(RuntimeError):
        bootstrap.init([make_elevator()], make_floors(3))


def test_callbacks_capture_their_own_index(controller, make_elevator, make_floors):
    elevators = [make_elevator(floor=0), make_elevator(floor=0)]
    floors = make_floors(5)
    Bootstrap(controller).init(elevators, floors)

    floors[4].emit("down_button_pressed")
    elevators[1].emit("idle")

    assert controller.pending.floors() == []
    assert elevators[0].commands == []
    assert elevators[1].goto_commands() == [4]


def test_update_replaces_fleet_view(controller, make_elevator, make_floors):
    bootstrap = Bootstrap(controller)
    old = make_elevator(floor=0)
    floors = make_floors(5)
    bootstrap.init([old], floors)

    fresh = make_elevator(floor=3)
    bootstrap.update(0.5, [fresh], floors)

    assert controller.elevators[0].host is fresh
    assert controller.elevators[0].current_floor() == 3

    # Subscriptions stay on the original objects; decisions use the fresh view
    floors[2].emit("up_button_pressed")
    old.emit("idle")
    assert fresh.goto_commands() == [2]
    assert old.commands == []


def test_update_does_no_dispatching(controller, make_elevator, make_floors):
    bootstrap = Bootstrap(controller)
    elevator = make_elevator(floor=0)
    floors = make_floors(5)
    bootstrap.init([elevator], floors)
    floors[3].emit("up_button_pressed")

    bootstrap.update(0.5, [elevator], floors)

    assert elevator.commands == []
    assert controller.pending.floors() == [3]


def test_build_allocation_strategy_by_name():
    strategy = build_allocation_strategy("NearestRequest", {"tie_break": "upper"})

    assert isinstance(strategy, NearestRequestStrategy)
    assert strategy.tie_break == "upper"


def test_build_allocation_strategy_unknown_name():
    with pytest.raises(ValueError):
        build_allocation_strategy("Zoning")


def test_build_allocation_strategy_bad_parameters():
    with pytest.raises(ValueError):
        build_allocation_strategy("NearestRequest", {"lookahead": 3})


def test_build_controller_from_config():
    config = GroupControlConfig(
        allocation_strategy=AllocationStrategyConfig(name="NearestRequest", parameters={"tie_break": "upper"}),
        update_indicators=True
    )

    controller = build_controller(config)

    assert controller.update_indicators is True
    assert controller.strategy.tie_break == "upper"
    assert len(controller.pending) == 0
