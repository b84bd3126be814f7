import logging
from typing import List, Optional, Sequence

from .handles import ElevatorHandle, FloorHandle
from .interfaces.allocation_strategy import IAllocationStrategy
from .pending_requests import PendingRequestSet

logger = logging.getLogger(__name__)


class DispatchController:
    """
    Dispatch controller that reacts to floor and elevator events

    This is a controller, not a simulated entity. It keeps the set of
    outstanding floor calls and, whenever an elevator goes idle, lets the
    allocation strategy pick the call that elevator should claim.

    Architecture: the controller never touches host objects directly. It
    sees elevators and floors through handles, which are replaced wholesale
    on every simulation tick via set_fleet().
    """
    def __init__(self, strategy: IAllocationStrategy, update_indicators: bool = False,
                 name: str = "Dispatch"):
        self.name = name
        self.strategy = strategy  # Allocation strategy
        self.update_indicators = update_indicators
        self.pending = PendingRequestSet()
        self.elevators: List[ElevatorHandle] = []
        self.floors: List[FloorHandle] = []

        logger.info("[%s] Using strategy: %s", self.name, self.strategy.get_strategy_name())

    def set_fleet(self, elevators: Sequence[ElevatorHandle], floors: Sequence[FloorHandle]):
        """Replace the cached elevator and floor handles"""
        self.elevators = list(elevators)
        self.floors = list(floors)

    def get_elevator(self, index: int) -> Optional[ElevatorHandle]:
        if 0 <= index < len(self.elevators):
            return self.elevators[index]
        return None

    # --- Floor events ---

    def on_floor_request(self, floor: int, direction: Optional[str] = None):
        """Hall call pressed at a floor (up or down)"""
        already_pending = floor in self.pending
        self.pending.add(floor, direction)
        if already_pending:
            logger.debug("[%s] Floor %d (%s) already pending", self.name, floor, direction)
        else:
            logger.info("[%s] Hall call registered: floor %d %s. Pending=%s",
                        self.name, floor, direction, self.pending.floors())

    # --- Elevator events ---

    def on_elevator_idle(self, index: int):
        """Elevator drained its destination queue: claim the best pending call"""
        elevator = self.get_elevator(index)
        if elevator is None:
            logger.warning("[%s] Idle event from unknown elevator %d ignored", self.name, index)
            return

        floor = self.strategy.select_floor(elevator, self.pending)
        if floor is None:
            logger.debug("[%s] Elevator %d idle, nothing pending", self.name, index)
            return

        # Claim before commanding: anything the command triggers must see the call as taken
        self.pending.remove(floor)
        self._dispatch(elevator, floor)

    def on_elevator_floor_button_pressed(self, index: int, floor: int):
        """Passenger inside the cabin chose a destination"""
        elevator = self.get_elevator(index)
        if elevator is None:
            logger.warning("[%s] Floor button event from unknown elevator %d ignored", self.name, index)
            return

        # This elevator now visits the floor anyway, so the hall call there is covered
        if self.pending.remove(floor):
            logger.info("[%s] Hall call at floor %d absorbed by elevator %d car call",
                        self.name, floor, index)
        self._dispatch(elevator, floor)

    def on_elevator_passing_floor(self, index: int, floor: int, direction: str):
        """Reserved for en-route pickup policies"""
        pass

    def on_elevator_stopped_at_floor(self, index: int, floor: int):
        """Reserved for arrival handling policies"""
        pass

    def _dispatch(self, elevator: ElevatorHandle, floor: int):
        # Indicators describe the next leg only, so leave them alone while en route
        if self.update_indicators and elevator.is_idle:
            self._set_indicators(elevator, floor)
        elevator.go_to_floor(floor)
        logger.info("[%s] Elevator %d -> floor %d. Pending=%s",
                    self.name, elevator.index, floor, self.pending.floors())

    def _set_indicators(self, elevator: ElevatorHandle, floor: int):
        current_floor = elevator.current_floor()
        elevator.going_up_indicator(floor >= current_floor)
        elevator.going_down_indicator(floor <= current_floor)
