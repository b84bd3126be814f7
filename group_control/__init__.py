"""
Elevator Dispatch Control

This package provides the dispatch controller that assigns idle
elevators to outstanding floor calls.
"""

__version__ = "0.1.0"

from .bootstrap import Bootstrap, build_allocation_strategy, build_controller
from .handles import ElevatorHandle, FloorHandle
from .pending_requests import PendingRequestSet
from .system import DispatchController

__all__ = [
    'Bootstrap',
    'DispatchController',
    'ElevatorHandle',
    'FloorHandle',
    'PendingRequestSet',
    'build_allocation_strategy',
    'build_controller',
]
