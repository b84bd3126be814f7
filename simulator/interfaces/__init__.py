"""Interface definitions for simulator components"""

from .capabilities import ELEVATOR_EVENTS, FLOOR_EVENTS, IElevator, IFloor

__all__ = [
    'ELEVATOR_EVENTS',
    'FLOOR_EVENTS',
    'IElevator',
    'IFloor',
]
