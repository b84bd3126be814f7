"""
Nearest Request Strategy

Simple distance-based floor selection for idle elevators.
"""

import logging
from typing import Optional

from ..interfaces.allocation_strategy import IAllocationStrategy
from ..pending_requests import TIE_BREAK_LOWER, TIE_BREAK_RULES

logger = logging.getLogger(__name__)


class NearestRequestStrategy(IAllocationStrategy):
    """
    Nearest request allocation strategy

    Selection Logic:
    - Distance is abs(pending_floor - current_floor)
    - Equal distances are settled by floor number (lower floor by default)
    - Call direction and load are ignored

    Known Limitation:
    - Each idle elevator greedily claims the single nearest call. Two
      elevators can end up serving the same side of the building while
      calls elsewhere wait. There is no lookahead and no matching of
      several elevators against several calls.

    Usage:
        strategy = NearestRequestStrategy(tie_break="lower")
        floor = strategy.select_floor(elevator, pending)
    """

    def __init__(self, tie_break: str = TIE_BREAK_LOWER):
        """
        Initialize strategy

        Args:
            tie_break: 'lower' or 'upper', which floor wins at equal distance
        """
        if tie_break not in TIE_BREAK_RULES:
            raise ValueError(f"tie_break must be one of {TIE_BREAK_RULES}, got '{tie_break}'")
        self.tie_break = tie_break

    def select_floor(self, elevator, pending) -> Optional[int]:
        current_floor = elevator.current_floor()
        floor = pending.nearest(current_floor, tie_break=self.tie_break)

        if floor is not None:
            logger.debug(
                "[Dispatch] Elevator %s at floor %d: nearest of %s is %d (distance=%d)",
                elevator.index, current_floor, pending.floors(), floor, abs(floor - current_floor)
            )
        return floor

    def get_strategy_name(self) -> str:
        """Return strategy name"""
        return f"Nearest Request (Distance-based, {self.tie_break} floor wins ties)"
