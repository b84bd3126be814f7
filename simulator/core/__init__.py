"""Simulated host entities"""

from .elevator import SimElevator
from .floor import SimFloor

__all__ = [
    'SimElevator',
    'SimFloor',
]
