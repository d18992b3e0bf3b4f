"""
Tests for the elevator operations.

Each operation must reverse exactly what it did, and nothing when the
elevator refused it or was already in the requested state.
"""

from elevator.building import Elevator
from elevator.operations import CloseDoor, MoveDown, MoveToFloor, MoveUp, OpenDoor
from shared.models import OperationKind, OperationStatus


class TestMoveOperations:
    """Tests for MoveUp, MoveDown and MoveToFloor."""

    def test_move_up_and_undo(self, elevator: Elevator):
        op = MoveUp()
        assert op.execute(elevator) == OperationStatus.APPLIED
        assert elevator.current_floor == 2

        op.undo(elevator)
        assert elevator.current_floor == 1

    def test_move_down_and_undo(self, elevator: Elevator):
        elevator.move_to_floor(3)
        op = MoveDown()
        op.execute(elevator)
        assert elevator.current_floor == 2

        op.undo(elevator)
        assert elevator.current_floor == 3

    def test_refused_move_up_undo_is_noop(self, elevator: Elevator):
        """Test that an out-of-bounds move leaves the target alone both ways."""
        elevator.move_to_floor(5)
        op = MoveUp()

        assert op.execute(elevator) == OperationStatus.REJECTED
        assert elevator.current_floor == 5

        assert op.undo(elevator) == OperationStatus.REJECTED
        assert elevator.current_floor == 5

    def test_refused_move_down_undo_is_noop(self, elevator: Elevator):
        """Test that undoing a refused MoveDown does not move the elevator up."""
        op = MoveDown()
        op.execute(elevator)
        op.undo(elevator)
        assert elevator.current_floor == 1

    def test_move_to_floor_captures_previous_floor(self, elevator: Elevator):
        elevator.move_to_floor(2)
        op = MoveToFloor(5)

        op.execute(elevator)
        assert op.previous_floor == 2
        assert elevator.current_floor == 5

        op.undo(elevator)
        assert elevator.current_floor == 2

    def test_move_to_same_floor_is_no_change(self, elevator: Elevator):
        """Test that "already there" is distinct from a refusal and undo is a no-op."""
        op = MoveToFloor(1)
        assert op.execute(elevator) == OperationStatus.NO_CHANGE

        op.undo(elevator)
        assert elevator.current_floor == 1

    def test_move_to_invalid_floor(self, elevator: Elevator):
        op = MoveToFloor(42)
        assert op.execute(elevator) == OperationStatus.REJECTED
        op.undo(elevator)
        assert elevator.current_floor == 1

    def test_move_to_floor_name(self):
        assert MoveToFloor(3).name == "MoveToFloor(3)"


class TestDoorOperations:
    """Tests for OpenDoor and CloseDoor."""

    def test_open_and_undo(self, elevator: Elevator):
        op = OpenDoor()
        op.execute(elevator)
        assert elevator.is_door_open is True

        op.undo(elevator)
        assert elevator.is_door_open is False

    def test_close_and_undo(self, elevator: Elevator):
        elevator.open_door()
        op = CloseDoor()
        op.execute(elevator)
        assert elevator.is_door_open is False

        op.undo(elevator)
        assert elevator.is_door_open is True

    def test_open_already_open_undo_keeps_doors_open(self, elevator: Elevator):
        """Test that undoing a no-op open does not close doors opened earlier."""
        elevator.open_door()
        op = OpenDoor()

        assert op.execute(elevator) == OperationStatus.NO_CHANGE
        op.undo(elevator)

        assert elevator.is_door_open is True

    def test_kinds(self):
        assert OpenDoor().kind == OperationKind.OPEN_DOOR
        assert CloseDoor().kind == OperationKind.CLOSE_DOOR
        assert MoveUp().kind == OperationKind.MOVE_UP
        assert MoveDown().kind == OperationKind.MOVE_DOWN
        assert MoveToFloor(2).kind == OperationKind.MOVE_TO_FLOOR
