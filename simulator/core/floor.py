import logging
from typing import Callable

import simpy

from ..infrastructure.message_broker import MessageBroker
from ..interfaces.capabilities import FLOOR_EVENTS, IFloor

logger = logging.getLogger(__name__)


class SimFloor(IFloor):
    """
    Floor with an up and a down hall call button (with lamp state)
    """
    def __init__(self, env: simpy.Environment, floor: int, num_floors: int, broker: MessageBroker):
        """
        Args:
            env (simpy.Environment): SimPy environment
            floor (int): Floor number, 0 is the ground floor
            num_floors (int): Number of floors in the building
            broker (MessageBroker): Message broker that delivers the button events
        """
        self.env = env
        self.floor = floor
        self.num_floors = num_floors
        self.broker = broker
        self.up_lit = False
        self.down_lit = False

    def floor_num(self) -> int:
        return self.floor

    def on(self, event: str, callback: Callable[[], None]):
        if event not in FLOOR_EVENTS:
            raise ValueError(f"Unknown floor event: {event}")
        self.broker.subscribe(self._topic(event), callback)

    def _topic(self, event: str) -> str:
        return f"floor/{self.floor}/{event}"

    def press_up(self) -> bool:
        """
        Press the up button

        Returns:
            True if the press registered a new call, False if already lit

        Raises:
            ValueError: On the top floor, which has no up button
        """
        if self.floor >= self.num_floors - 1:
            raise ValueError(f"Floor {self.floor} has no up button")
        if self.up_lit:
            logger.debug("%.2f [Floor %d] Up button already lit", self.env.now, self.floor)
            return False
        self.up_lit = True
        logger.info("%.2f [Floor %d] Up button pressed. Light ON.", self.env.now, self.floor)
        self.broker.publish(self._topic("up_button_pressed"))
        return True

    def press_down(self) -> bool:
        """
        Press the down button

        Returns:
            True if the press registered a new call, False if already lit

        Raises:
            ValueError: On the ground floor, which has no down button
        """
        if self.floor <= 0:
            raise ValueError(f"Floor {self.floor} has no down button")
        if self.down_lit:
            logger.debug("%.2f [Floor %d] Down button already lit", self.env.now, self.floor)
            return False
        self.down_lit = True
        logger.info("%.2f [Floor %d] Down button pressed. Light ON.", self.env.now, self.floor)
        self.broker.publish(self._topic("down_button_pressed"))
        return True

    def serve(self, elevator_name: str = None):
        """Process when an elevator stops here (turn off lights)

        Args:
            elevator_name: Name of the elevator that stopped (for logging)
        """
        if self.up_lit or self.down_lit:
            logger.info("%.2f [Floor %d] Call served by %s. Light OFF.",
                        self.env.now, self.floor, elevator_name)
        self.up_lit = False
        self.down_lit = False

    @property
    def has_call(self) -> bool:
        return self.up_lit or self.down_lit

    def __repr__(self) -> str:
        return f"SimFloor({self.floor})"
