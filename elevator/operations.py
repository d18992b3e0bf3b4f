"""
Reversible elevator operations.

Each operation asks the elevator for a change and keeps the outcome. Undo
performs the opposite request only when the original one was APPLIED, so a
refused move (top floor, open doors) is never "reversed" into a real move.
"""

import logging
from typing import Optional

from command_history.operation_log import ReversibleOperation
from elevator.building import Elevator
from shared.models import OperationKind, OperationStatus

logger = logging.getLogger("elevator_operations")


def _check_reverted(operation: ReversibleOperation, status: OperationStatus) -> None:
    if status != OperationStatus.APPLIED:
        logger.warning(f"Elevator refused to reverse {operation.name} ({status.value})")


class MoveUp(ReversibleOperation):
    """Go up one floor."""
    kind = OperationKind.MOVE_UP

    def _apply(self, elevator: Elevator) -> OperationStatus:
        return elevator.move_up()

    def _revert(self, elevator: Elevator) -> None:
        logger.info("Undoing move up")
        _check_reverted(self, elevator.move_down())


class MoveDown(ReversibleOperation):
    """Go down one floor."""
    kind = OperationKind.MOVE_DOWN

    def _apply(self, elevator: Elevator) -> OperationStatus:
        return elevator.move_down()

    def _revert(self, elevator: Elevator) -> None:
        logger.info("Undoing move down")
        _check_reverted(self, elevator.move_up())


class OpenDoor(ReversibleOperation):
    kind = OperationKind.OPEN_DOOR

    def _apply(self, elevator: Elevator) -> OperationStatus:
        return elevator.open_door()

    def _revert(self, elevator: Elevator) -> None:
        logger.info("Undoing door opening")
        _check_reverted(self, elevator.close_door())


class CloseDoor(ReversibleOperation):
    kind = OperationKind.CLOSE_DOOR

    def _apply(self, elevator: Elevator) -> OperationStatus:
        return elevator.close_door()

    def _revert(self, elevator: Elevator) -> None:
        logger.info("Undoing door closing")
        _check_reverted(self, elevator.open_door())


class MoveToFloor(ReversibleOperation):
    """
    Travel straight to a given floor.

    The floor the elevator left from is captured on every execution, so a
    redo after an undo returns to the right place.
    """
    kind = OperationKind.MOVE_TO_FLOOR

    def __init__(self, target_floor: int):
        super().__init__()
        self.target_floor = target_floor
        self.previous_floor: Optional[int] = None

    @property
    def name(self) -> str:
        return f"MoveToFloor({self.target_floor})"

    def _apply(self, elevator: Elevator) -> OperationStatus:
        self.previous_floor = elevator.current_floor
        return elevator.move_to_floor(self.target_floor)

    def _revert(self, elevator: Elevator) -> None:
        logger.info(f"Undoing move to floor {self.target_floor}")
        _check_reverted(self, elevator.move_to_floor(self.previous_floor))
