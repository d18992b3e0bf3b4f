"""
Demonstration script for the elevator control panel.

Shows operations being executed, undone and redone, including a move the
elevator refuses and why undoing it does nothing.
"""

import logging
from typing import Optional

from elevator.building import Building, Elevator
from elevator.controller import LiftControl
from shared.data_store import DataStore

# Configure logging to see what's happening
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)


def _print_state(control: LiftControl) -> None:
    print(f"\nStatus:  {control.status()}")
    print("History:")
    for line in control.describe_history().splitlines():
        print(f"  {line}")


def run_elevator_demo(data_store: Optional[DataStore] = None) -> LiftControl:
    """
    Drive the elevator through a short sequence and step back through it.

    This shows:
    1. Door and move operations recorded in the log
    2. Undo of the last two operations
    3. Redo of one of them
    4. A new operation discarding what was left to redo
    5. A refused move (past the top floor) whose undo is a no-op
    """
    print("\n" + "=" * 70)
    print("COMMAND DEMO: Elevator Control With Undo/Redo")
    print("=" * 70 + "\n")

    data_store = data_store or DataStore()
    building = Building(data_store.get_building_config())
    elevator = Elevator(building)
    control = LiftControl(elevator)

    print(building.describe())

    print("\n" + "-" * 70)
    print("ACTION: open door, close door, move up twice")
    print("-" * 70 + "\n")
    control.open_door()
    control.close_door()
    control.move_up()
    control.move_up()
    _print_state(control)

    print("\n" + "-" * 70)
    print("ACTION: undo the last two operations")
    print("-" * 70 + "\n")
    control.undo()
    control.undo()
    _print_state(control)

    print("\n" + "-" * 70)
    print("ACTION: redo once, then go straight to the top floor")
    print("-" * 70 + "\n")
    control.redo()
    control.move_to(building.floor_count)
    print(f"\nCan redo after a fresh operation: {control.log.can_redo}")
    _print_state(control)

    print("\n" + "-" * 70)
    print("ACTION: try to go past the top floor, then undo that attempt")
    print("-" * 70 + "\n")
    status = control.move_up()
    print(f"\nMove up result: {status.value}")
    control.undo()
    _print_state(control)

    return control


if __name__ == "__main__":
    run_elevator_demo()
