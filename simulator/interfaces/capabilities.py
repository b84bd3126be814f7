"""
Capability Interfaces

The object protocol a host simulation exposes to the dispatch controller.
Anything that implements these methods can be driven by the controller:
the reference SimPy host, a test double, or a bridge to another engine.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional


FLOOR_EVENTS = ("up_button_pressed", "down_button_pressed")
ELEVATOR_EVENTS = ("idle", "floor_button_pressed", "passing_floor", "stopped_at_floor")


class IFloor(ABC):
    """
    Interface for a floor capability object

    Events (callback arguments):
    - up_button_pressed: ()
    - down_button_pressed: ()
    """

    @abstractmethod
    def floor_num(self) -> int:
        """Get the floor number of this floor"""
        pass

    @abstractmethod
    def on(self, event: str, callback: Callable[[], None]):
        """
        Subscribe to a floor event

        Raises:
            ValueError: If the event name is not one of FLOOR_EVENTS
        """
        pass


class IElevator(ABC):
    """
    Interface for an elevator capability object

    Design Philosophy:
    - The controller only requests destinations; motion belongs to the host
    - destination_queue is host state, the controller reads it and leaves
      writes to go_to_floor()/stop()

    Events (callback arguments):
    - idle: ()
    - floor_button_pressed: (floor)
    - passing_floor: (floor, direction) where direction is 'up' or 'down'
    - stopped_at_floor: (floor)
    """

    destination_queue: List[int]

    @abstractmethod
    def go_to_floor(self, floor: int, go_directly: bool = False):
        """
        Queue a destination

        Args:
            floor: Target floor
            go_directly: Serve this floor before anything else in the queue

        Raises:
            ValueError: If the floor is outside the building
        """
        pass

    @abstractmethod
    def stop(self):
        """Clear the destination queue and halt at the next floor"""
        pass

    @abstractmethod
    def current_floor(self) -> int:
        pass

    @abstractmethod
    def going_up_indicator(self, value: Optional[bool] = None) -> bool:
        """Get, or set and get, the going up indicator"""
        pass

    @abstractmethod
    def going_down_indicator(self, value: Optional[bool] = None) -> bool:
        """Get, or set and get, the going down indicator"""
        pass

    @abstractmethod
    def max_passenger_count(self) -> int:
        pass

    @abstractmethod
    def load_factor(self) -> float:
        """0.0 means empty, 1.0 means full"""
        pass

    @abstractmethod
    def destination_direction(self) -> str:
        """
        Returns:
            'up', 'down' or 'stopped'
        """
        pass

    @abstractmethod
    def check_destination_queue(self):
        """Pick up changes made to destination_queue"""
        pass

    @abstractmethod
    def get_pressed_floors(self) -> List[int]:
        """Floors whose cabin buttons are currently lit"""
        pass

    @abstractmethod
    def on(self, event: str, callback: Callable):
        """
        Subscribe to an elevator event

        Raises:
            ValueError: If the event name is not one of ELEVATOR_EVENTS
        """
        pass
