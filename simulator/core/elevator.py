import logging
from typing import Callable, List, Optional

import simpy

from ..infrastructure.message_broker import MessageBroker
from ..interfaces.capabilities import ELEVATOR_EVENTS, IElevator

logger = logging.getLogger(__name__)


class SimElevator(IElevator):
    """
    Elevator that travels floor by floor through its destination queue

    Movement model:
    - One floor takes seconds_per_floor; passing_floor is published at every
      floor that is not the front of the queue
    - At the front of the queue the elevator stops, publishes
      stopped_at_floor and dwells stop_dwell_time
    - When the queue is empty it publishes idle, and again every
      idle_interval seconds while nothing is queued (0 announces once)
    """

    def __init__(self, env: simpy.Environment, name: str, broker: MessageBroker, num_floors: int,
                 start_floor: int = 0, max_capacity: int = 10, seconds_per_floor: float = 1.5,
                 stop_dwell_time: float = 3.0, idle_interval: float = 0.0):
        self.env = env
        self.name = name
        self.broker = broker
        self.num_floors = num_floors
        self.max_capacity = max_capacity
        self.seconds_per_floor = seconds_per_floor
        self.stop_dwell_time = stop_dwell_time
        self.idle_interval = idle_interval

        self._current_floor = start_floor
        self.destination_queue: List[int] = []
        self.pressed_floors = set()
        self.passengers = 0
        self._going_up = True
        self._going_down = True

        self.served_floors: List[int] = []  # Every stop, in order
        self._wakeup: Optional[simpy.Event] = None

    def _topic(self, event: str) -> str:
        return f"elevator/{self.name}/{event}"

    def _validate_floor(self, floor: int):
        if not (0 <= floor < self.num_floors):
            raise ValueError(f"Invalid floor {floor} for {self.name}. Must be between 0 and {self.num_floors - 1}.")

    def _wake(self):
        if self._wakeup is not None and not self._wakeup.triggered:
            self._wakeup.succeed()

    # --- Commands ---

    def go_to_floor(self, floor: int, go_directly: bool = False):
        self._validate_floor(floor)
        if go_directly:
            self.destination_queue.insert(0, floor)
        elif not self.destination_queue or self.destination_queue[-1] != floor:
            self.destination_queue.append(floor)
        logger.debug("%.2f [%s] Destination queue: %s", self.env.now, self.name, self.destination_queue)
        self._wake()

    def stop(self):
        logger.info("%.2f [%s] Stop requested, queue cleared", self.env.now, self.name)
        del self.destination_queue[:]
        self._wake()

    def check_destination_queue(self):
        self._wake()

    def going_up_indicator(self, value: Optional[bool] = None) -> bool:
        if value is not None:
            self._going_up = bool(value)
        return self._going_up

    def going_down_indicator(self, value: Optional[bool] = None) -> bool:
        if value is not None:
            self._going_down = bool(value)
        return self._going_down

    # --- State queries ---

    def current_floor(self) -> int:
        return self._current_floor

    def max_passenger_count(self) -> int:
        return self.max_capacity

    def load_factor(self) -> float:
        return min(1.0, self.passengers / self.max_capacity)

    def destination_direction(self) -> str:
        if not self.destination_queue:
            return "stopped"
        target = self.destination_queue[0]
        if target > self._current_floor:
            return "up"
        if target < self._current_floor:
            return "down"
        return "stopped"

    def get_pressed_floors(self) -> List[int]:
        return sorted(self.pressed_floors)

    def on(self, event: str, callback: Callable):
        if event not in ELEVATOR_EVENTS:
            raise ValueError(f"Unknown elevator event: {event}")
        self.broker.subscribe(self._topic(event), callback)

    # --- Passenger side ---

    def press_floor_button(self, floor: int) -> bool:
        """
        Press a destination button inside the cabin

        Returns:
            True if the button was not lit yet
        """
        self._validate_floor(floor)
        if floor in self.pressed_floors:
            return False
        self.pressed_floors.add(floor)
        logger.info("%.2f [%s] Floor button %d pressed", self.env.now, self.name, floor)
        self.broker.publish(self._topic("floor_button_pressed"), floor)
        return True

    # --- Main process ---

    def run(self):
        """SimPy process: serve the destination queue forever"""
        while True:
            if not self.destination_queue:
                logger.info("%.2f [%s] Idle at floor %d", self.env.now, self.name, self._current_floor)
                self.broker.publish(self._topic("idle"))
                if self.destination_queue:
                    continue
                # Woken without work (stop() while idle) keeps waiting for the same announcement timer
                timer = self.env.timeout(self.idle_interval) if self.idle_interval > 0 else None
                while not self.destination_queue:
                    if timer is not None and timer.processed:
                        break
                    self._wakeup = self.env.event()
                    yield self._wakeup if timer is None else self._wakeup | timer
                    self._wakeup = None
                continue

            target = self.destination_queue[0]
            if target == self._current_floor:
                self._stop_at(target)
                yield self.env.timeout(self.stop_dwell_time)
                continue

            direction = "up" if target > self._current_floor else "down"
            yield self.env.timeout(self.seconds_per_floor)
            self._current_floor += 1 if direction == "up" else -1

            if not self.destination_queue or self.destination_queue[0] != self._current_floor:
                logger.debug("%.2f [%s] Passing floor %d (%s)",
                             self.env.now, self.name, self._current_floor, direction)
                self.broker.publish(self._topic("passing_floor"), self._current_floor, direction)

    def _stop_at(self, floor: int):
        # Every queued visit to this floor is served by this stop
        self.destination_queue[:] = [f for f in self.destination_queue if f != floor]
        self.pressed_floors.discard(floor)
        self.served_floors.append(floor)
        logger.info("%.2f [%s] Stopped at floor %d. Remaining queue: %s",
                    self.env.now, self.name, floor, self.destination_queue)
        self.broker.publish(self._topic("stopped_at_floor"), floor)

    def __repr__(self) -> str:
        return f"SimElevator({self.name}, floor={self._current_floor})"
