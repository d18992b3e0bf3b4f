"""
Elevator control demo.

An elevator in a building is driven through reversible operations
recorded in an OperationLog, so every button press can be undone and
redone.
"""

from elevator.building import Building, Elevator, Floor
from elevator.controller import LiftControl
from elevator.operations import CloseDoor, MoveDown, MoveToFloor, MoveUp, OpenDoor

__all__ = [
    "Building",
    "Elevator",
    "Floor",
    "LiftControl",
    "MoveUp",
    "MoveDown",
    "OpenDoor",
    "CloseDoor",
    "MoveToFloor",
]
