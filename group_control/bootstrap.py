"""
Controller Bootstrap

Entry points the host calls once per lifecycle phase:
- init(elevators, floors) at simulation start
- update(dt, elevators, floors) on every simulation tick
"""

import logging
from typing import Dict, Sequence, Type

from config.group_control import GroupControlConfig
from .algorithms.nearest_request import NearestRequestStrategy
from .handles import wrap_elevators, wrap_floors
from .interfaces.allocation_strategy import IAllocationStrategy
from .system import DispatchController

logger = logging.getLogger(__name__)


ALLOCATION_STRATEGIES: Dict[str, Type[IAllocationStrategy]] = {
    "NearestRequest": NearestRequestStrategy,
}


def build_allocation_strategy(name: str, parameters: dict = None) -> IAllocationStrategy:
    """
    Create an allocation strategy by its configured name

    Raises:
        ValueError: If the name is unknown or the parameters are rejected
    """
    if name not in ALLOCATION_STRATEGIES:
        raise ValueError(f"Unknown allocation strategy: {name}")
    try:
        return ALLOCATION_STRATEGIES[name](**(parameters or {}))
    except TypeError as e:
        raise ValueError(f"Invalid parameters for allocation strategy '{name}': {e}") from e


def build_controller(config: GroupControlConfig) -> DispatchController:
    """Create a DispatchController from group control configuration"""
    strategy = build_allocation_strategy(
        config.allocation_strategy.name,
        config.allocation_strategy.parameters
    )
    return DispatchController(strategy, update_indicators=config.update_indicators)


class Bootstrap:
    """
    Wires host events to a DispatchController

    Subscriptions are registered exactly once per entity, in init(). Each
    callback captures the index of its own elevator or floor; the controller
    resolves that index against the collections refreshed by update().
    """

    def __init__(self, controller: DispatchController):
        self.controller = controller
        self.initialized = False

    def init(self, elevators: Sequence, floors: Sequence):
        """
        Subscribe the controller to every floor and elevator

        Args:
            elevators: Host elevator objects
            floors: Host floor objects

        Raises:
            RuntimeError: If called more than once
        """
        if self.initialized:
            raise RuntimeError("Bootstrap.init() has already been called for this simulation")
        self.initialized = True

        elevator_handles = wrap_elevators(elevators)
        floor_handles = wrap_floors(floors)
        self.controller.set_fleet(elevator_handles, floor_handles)

        for floor in floor_handles:
            self._subscribe_floor(floor)
        for elevator in elevator_handles:
            self._subscribe_elevator(elevator)

        logger.info("[%s] Subscribed to %d elevators and %d floors",
                    self.controller.name, len(elevator_handles), len(floor_handles))

    def update(self, dt: float, elevators: Sequence, floors: Sequence):
        """Refresh the controller's view of the fleet for this tick"""
        self.controller.set_fleet(wrap_elevators(elevators), wrap_floors(floors))

    def _subscribe_floor(self, floor):
        controller = self.controller
        index = floor.index
        floor.on_up_button_pressed(lambda: controller.on_floor_request(index, "up"))
        floor.on_down_button_pressed(lambda: controller.on_floor_request(index, "down"))

    def _subscribe_elevator(self, elevator):
        controller = self.controller
        index = elevator.index
        elevator.on_idle(lambda: controller.on_elevator_idle(index))
        elevator.on_floor_button_pressed(
            lambda floor: controller.on_elevator_floor_button_pressed(index, floor))
        elevator.on_passing_floor(
            lambda floor, direction: controller.on_elevator_passing_floor(index, floor, direction))
        elevator.on_stopped_at_floor(
            lambda floor: controller.on_elevator_stopped_at_floor(index, floor))
