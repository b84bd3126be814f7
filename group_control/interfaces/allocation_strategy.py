"""
Allocation Strategy Interface

Defines which pending floor call an idle elevator should claim.
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..handles import ElevatorHandle
    from ..pending_requests import PendingRequestSet


class IAllocationStrategy(ABC):
    """
    Interface for elevator allocation strategies

    Called by the dispatch controller each time an elevator reports idle.
    The strategy only chooses; claiming the floor (removing it from the
    pending set) and commanding the elevator stay with the controller.

    Design Philosophy:
    - Greedy: one idle elevator, one pending floor, at the moment of idleness
    - Deterministic: identical inputs always yield the same floor
    - Read-only: a strategy must not mutate the pending set or the elevator

    Usage Examples:
    - NearestRequest: minimum floor distance, fixed tie-break
    """

    @abstractmethod
    def select_floor(
        self,
        elevator: 'ElevatorHandle',
        pending: 'PendingRequestSet'
    ) -> Optional[int]:
        """
        Select the pending floor an idle elevator should serve next

        Args:
            elevator: Handle of the elevator that went idle
            pending: Outstanding floor calls

        Returns:
            Floor number to claim, or None to leave the elevator idle
        """
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        """
        Get the name of this strategy

        Returns:
            str: Strategy name (for logging and debugging)
        """
        pass
