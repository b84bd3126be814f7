"""
Elevator Simulator - Reference host

This package provides a small discrete-event host that implements the
elevator and floor capability protocol the dispatch controller drives.
"""

__version__ = "0.1.0"

from .core.elevator import SimElevator
from .core.floor import SimFloor
from .host_simulation import HostSimulation, SimulationResult
from .infrastructure.message_broker import MessageBroker
from .interfaces.capabilities import IElevator, IFloor

__all__ = [
    'SimElevator',
    'SimFloor',
    'HostSimulation',
    'SimulationResult',
    'MessageBroker',
    'IElevator',
    'IFloor',
]
