"""
Elevator and Floor Handles

Thin adapters around host-provided capability objects. The dispatch
controller talks to elevators and floors only through these handles, so any
object that follows the capability protocol (a simulator entity, a test
double, a bridge to a real installation) can be plugged in.
"""

from typing import Callable, FrozenSet, Iterable, List, Optional, Tuple


class FloorHandle:
    """
    Controller-side view of a host floor

    Args:
        floor: Host floor object (see simulator.interfaces.IFloor)
        index: Position of the floor in the host's floor collection
    """

    def __init__(self, floor, index: int):
        self._floor = floor
        self.index = index

    @property
    def host(self):
        return self._floor

    def floor_num(self) -> int:
        return self._floor.floor_num()

    def on_up_button_pressed(self, callback: Callable[[], None]):
        self._floor.on('up_button_pressed', callback)

    def on_down_button_pressed(self, callback: Callable[[], None]):
        self._floor.on('down_button_pressed', callback)

    def __repr__(self) -> str:
        return f"FloorHandle(index={self.index})"


class ElevatorHandle:
    """
    Controller-side view of a host elevator

    Commands go through go_to_floor() and stop(); the indicator setters are
    the only other writes. Host state is never assigned directly.

    Args:
        elevator: Host elevator object (see simulator.interfaces.IElevator)
        index: Position of the elevator in the host's elevator collection
    """

    def __init__(self, elevator, index: int):
        self._elevator = elevator
        self.index = index

    @property
    def host(self):
        return self._elevator

    # --- Commands ---

    def go_to_floor(self, floor: int, go_directly: bool = False):
        """
        Queue a destination

        Args:
            floor: Target floor
            go_directly: Serve this floor before the rest of the queue
        """
        self._elevator.go_to_floor(floor, go_directly)

    def stop(self):
        """Clear the destination queue and halt the elevator"""
        self._elevator.stop()

    def going_up_indicator(self, value: Optional[bool] = None) -> bool:
        return self._elevator.going_up_indicator(value)

    def going_down_indicator(self, value: Optional[bool] = None) -> bool:
        return self._elevator.going_down_indicator(value)

    # --- State queries ---

    def current_floor(self) -> int:
        return self._elevator.current_floor()

    @property
    def destination_queue(self) -> Tuple[int, ...]:
        """Snapshot of the queued destinations, front first"""
        return tuple(self._elevator.destination_queue)

    @property
    def is_idle(self) -> bool:
        return not self._elevator.destination_queue

    def destination_direction(self) -> str:
        return self._elevator.destination_direction()

    def load_factor(self) -> float:
        return self._elevator.load_factor()

    def max_passenger_count(self) -> int:
        return self._elevator.max_passenger_count()

    def pressed_floors(self) -> FrozenSet[int]:
        return frozenset(self._elevator.get_pressed_floors())

    # --- Event subscription ---

    def on_idle(self, callback: Callable[[], None]):
        self._elevator.on('idle', callback)

    def on_floor_button_pressed(self, callback: Callable[[int], None]):
        self._elevator.on('floor_button_pressed', callback)

    def on_passing_floor(self, callback: Callable[[int, str], None]):
        self._elevator.on('passing_floor', callback)

    def on_stopped_at_floor(self, callback: Callable[[int], None]):
        self._elevator.on('stopped_at_floor', callback)

    def __repr__(self) -> str:
        return f"ElevatorHandle(index={self.index})"


def wrap_elevators(elevators: Iterable) -> List[ElevatorHandle]:
    """Wrap host elevators in handles, indexed by collection position"""
    return [ElevatorHandle(elevator, index) for index, elevator in enumerate(elevators)]


def wrap_floors(floors: Iterable) -> List[FloorHandle]:
    """Wrap host floors in handles, indexed by collection position"""
    return [FloorHandle(floor, index) for index, floor in enumerate(floors)]
