"""
Lift control panel.

Binds one elevator to one OperationLog so callers can press buttons
(execute operations) and step through history without passing the
elevator around each time.
"""

import logging
from typing import Optional

from command_history.operation_log import Operation, OperationLog
from elevator.building import Elevator
from elevator.operations import CloseDoor, MoveDown, MoveToFloor, MoveUp, OpenDoor
from shared.models import OperationStatus

logger = logging.getLogger("lift_control")


class LiftControl:
    """
    Invoker for elevator operations.

    Example:
        control = LiftControl(elevator)
        control.move_up()
        control.move_to(4)
        control.undo()          # back to the floor before move_to(4)
        control.history()       # ["MoveUp"]
    """

    def __init__(self, elevator: Elevator, log: Optional[OperationLog] = None):
        self.elevator = elevator
        self.log = log or OperationLog()

    def execute(self, operation: Operation) -> OperationStatus:
        return self.log.execute(operation, self.elevator)

    def undo(self) -> bool:
        return self.log.undo()

    def redo(self) -> bool:
        return self.log.redo()

    def history(self) -> list[str]:
        """Executed operations, most recent first."""
        return list(self.log.history())

    # Buttons

    def move_up(self) -> OperationStatus:
        return self.execute(MoveUp())

    def move_down(self) -> OperationStatus:
        return self.execute(MoveDown())

    def open_door(self) -> OperationStatus:
        return self.execute(OpenDoor())

    def close_door(self) -> OperationStatus:
        return self.execute(CloseDoor())

    def move_to(self, floor: int) -> OperationStatus:
        return self.execute(MoveToFloor(floor))

    def status(self) -> str:
        return self.elevator.describe()

    def describe_history(self) -> str:
        names = self.history()
        if not names:
            return "History is empty"
        return "\n".join(f"{i}. {name}" for i, name in enumerate(names, start=1))
