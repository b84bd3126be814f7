"""
Pending Request Set

Bookkeeping of floors that have an outstanding, unserved hall call.
"""

from typing import Dict, Iterator, List, Optional, Set


TIE_BREAK_LOWER = "lower"
TIE_BREAK_UPPER = "upper"
TIE_BREAK_RULES = (TIE_BREAK_LOWER, TIE_BREAK_UPPER)


class PendingRequestSet:
    """
    Outstanding floor calls, keyed by floor number

    Invariants:
    - A floor appears at most once while its call is outstanding
    - A floor leaves the set only when an elevator is committed to it
    - Insertion order carries no meaning; selection is by distance

    The call directions seen for a floor are kept as metadata on the entry.
    They never influence membership or selection.
    """

    def __init__(self):
        self._requests: Dict[int, Set[str]] = {}

    def add(self, floor: int, direction: Optional[str] = None):
        """
        Register a call at a floor

        Args:
            floor: Floor number of the call
            direction: 'up' or 'down' if known
        """
        directions = self._requests.setdefault(floor, set())
        if direction is not None:
            directions.add(direction)

    def remove(self, floor: int) -> bool:
        """
        Drop the call at a floor

        A missing floor is not an error: another elevator may already
        have claimed it.

        Returns:
            True if the floor was pending
        """
        return self._requests.pop(floor, None) is not None

    def nearest(self, from_floor: int, tie_break: str = TIE_BREAK_LOWER) -> Optional[int]:
        """
        Find the pending floor closest to from_floor

        Equal distances are settled by floor number: the lower floor wins
        with tie_break='lower', the upper floor with tie_break='upper'.

        Args:
            from_floor: Floor the distance is measured from
            tie_break: 'lower' or 'upper'

        Returns:
            Floor number, or None if nothing is pending
        """
        if tie_break not in TIE_BREAK_RULES:
            raise ValueError(f"Unknown tie_break rule: {tie_break}")
        if not self._requests:
            return None

        sign = 1 if tie_break == TIE_BREAK_LOWER else -1
        return min(self._requests, key=lambda floor: (abs(floor - from_floor), sign * floor))

    def directions(self, floor: int) -> Set[str]:
        """Directions observed for a pending floor (empty if not pending)"""
        return set(self._requests.get(floor, ()))

    def floors(self) -> List[int]:
        return sorted(self._requests)

    def clear(self):
        self._requests.clear()

    def __contains__(self, floor) -> bool:
        return floor in self._requests

    def __len__(self) -> int:
        return len(self._requests)

    def __iter__(self) -> Iterator[int]:
        return iter(self.floors())

    def __repr__(self) -> str:
        return f"PendingRequestSet({self.floors()})"
