"""
Shared fixtures: recording test doubles of the host capability protocol
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


class FakeFloor:
    """Floor double: records subscriptions, fires them on emit()"""

    def __init__(self, floor):
        self.floor = floor
        self.handlers = {}

    def floor_num(self):
        return self.floor

    def on(self, event, callback):
        self.handlers.setdefault(event, []).append(callback)

    def emit(self, event, *args):
        for callback in self.handlers.get(event, []):
            callback(*args)


class FakeElevator:
    """Elevator double: records every command it receives"""

    def __init__(self, floor=0, queue=None):
        self.floor = floor
        self.destination_queue = list(queue or [])
        self.commands = []
        self.handlers = {}
        self.up = True
        self.down = True
        self.pressed = []

    def go_to_floor(self, floor, go_directly=False):
        self.commands.append(("go_to_floor", floor, go_directly))
        if go_directly:
            self.destination_queue.insert(0, floor)
        else:
            self.destination_queue.append(floor)

    def stop(self):
        self.commands.append(("stop",))
        self.destination_queue.clear()

    def current_floor(self):
        return self.floor

    def going_up_indicator(self, value=None):
        if value is not None:
            self.commands.append(("going_up_indicator", value))
            self.up = value
        return self.up

    def going_down_indicator(self, value=None):
        if value is not None:
            self.commands.append(("going_down_indicator", value))
            self.down = value
        return self.down

    def max_passenger_count(self):
        return 8

    def load_factor(self):
        return 0.0

    def destination_direction(self):
        if not self.destination_queue or self.destination_queue[0] == self.floor:
            return "stopped"
        return "up" if self.destination_queue[0] > self.floor else "down"

    def check_destination_queue(self):
        pass

    def get_pressed_floors(self):
        return list(self.pressed)

    def on(self, event, callback):
        self.handlers.setdefault(event, []).append(callback)

    def emit(self, event, *args):
        for callback in self.handlers.get(event, []):
            callback(*args)

    def arrive(self):
        """Pretend the host reached the front of the queue"""
        self.floor = self.destination_queue.pop(0)
        self.emit("stopped_at_floor", self.floor)
        if not self.destination_queue:
            self.emit("idle")

    def goto_commands(self):
        return [command[1] for command in self.commands if command[0] == "go_to_floor"]


@pytest.fixture
def make_floors():
    def factory(num_floors):
        return [FakeFloor(floor) for floor in range(num_floors)]
    return factory


@pytest.fixture
def make_elevator():
    return FakeElevator


@pytest.fixture
def controller():
    from group_control.algorithms.nearest_request import NearestRequestStrategy
    from group_control.system import DispatchController
    return DispatchController(NearestRequestStrategy())
