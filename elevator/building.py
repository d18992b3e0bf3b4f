"""
Building and elevator: the target of the elevator operations.

The elevator enforces its own rules (no moving with open doors, no floors
outside the building) and reports the outcome of every request as an
OperationStatus instead of raising. Operations rely on that outcome to know
whether there is anything to undo.

There is exactly one building and one elevator per demo, but they are
ordinary objects: the entry point builds them and passes them along.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from shared.models import BuildingConfig, OperationStatus

logger = logging.getLogger("elevator")


@dataclass
class Floor:
    """A floor and the names of its rooms."""
    number: int
    rooms: list[str] = field(default_factory=list)


class Building:
    """
    A building with numbered floors, starting at 1.

    Example:
        building = Building(BuildingConfig(floors=5, rooms_per_floor=3))
        building.floors[0].rooms   # ["Room 1-1", "Room 1-2", "Room 1-3"]
    """

    def __init__(self, config: Optional[BuildingConfig] = None):
        self.config = config or BuildingConfig()
        self.name = self.config.name
        self.floors = [
            Floor(
                number=number,
                rooms=[f"Room {number}-{i}" for i in range(1, self.config.rooms_per_floor + 1)],
            )
            for number in range(1, self.config.floors + 1)
        ]
        logger.info(f"Building '{self.name}' created with {self.floor_count} floors")

    @property
    def floor_count(self) -> int:
        return len(self.floors)

    def is_valid_floor(self, number: int) -> bool:
        return 1 <= number <= self.floor_count

    def describe(self) -> str:
        lines = [f"=== {self.name} ===", f"Floors: {self.floor_count}"]
        for floor in self.floors:
            lines.append(f"Floor {floor.number}: {len(floor.rooms)} rooms")
        return "\n".join(lines)


class Elevator:
    """
    Single elevator serving a building.

    Starts on floor 1 with the doors closed. Every request returns:
    - APPLIED when the elevator changed state
    - NO_CHANGE when it was already in the requested state
    - REJECTED when the request broke a rule (reason is logged)
    """

    def __init__(self, building: Building, sleep: Callable[[float], None] = time.sleep):
        """
        Args:
            building: The building this elevator serves
            sleep: Called with the configured move delay on every move
        """
        self.building = building
        self.current_floor = 1
        self.is_moving = False
        self.is_door_open = False
        self._sleep = sleep

    def move_to_floor(self, target_floor: int) -> OperationStatus:
        """Travel directly to a floor."""
        if self.is_moving:
            logger.warning("Elevator is already moving")
            return OperationStatus.REJECTED

        if self.is_door_open:
            logger.warning("Cannot move with the doors open")
            return OperationStatus.REJECTED

        if not self.building.is_valid_floor(target_floor):
            logger.warning(
                f"Invalid floor {target_floor}: valid floors are 1-{self.building.floor_count}"
            )
            return OperationStatus.REJECTED

        if target_floor == self.current_floor:
            logger.info(f"Elevator is already on floor {target_floor}")
            return OperationStatus.NO_CHANGE

        direction = "up" if target_floor > self.current_floor else "down"
        logger.info(f"Moving {direction} from floor {self.current_floor} to floor {target_floor}")

        self.is_moving = True
        try:
            delay = self.building.config.move_delay
            if delay > 0:
                self._sleep(delay)
            self.current_floor = target_floor
        finally:
            self.is_moving = False

        logger.info(f"Arrived at floor {self.current_floor}")
        return OperationStatus.APPLIED

    def move_up(self) -> OperationStatus:
        if self.current_floor >= self.building.floor_count:
            logger.warning("Cannot go higher than the top floor")
            return OperationStatus.REJECTED
        return self.move_to_floor(self.current_floor + 1)

    def move_down(self) -> OperationStatus:
        if self.current_floor <= 1:
            logger.warning("Cannot go lower than the ground floor")
            return OperationStatus.REJECTED
        return self.move_to_floor(self.current_floor - 1)

    def open_door(self) -> OperationStatus:
        if self.is_moving:
            logger.warning("Cannot open the doors while moving")
            return OperationStatus.REJECTED
        if self.is_door_open:
            logger.info("Doors are already open")
            return OperationStatus.NO_CHANGE
        self.is_door_open = True
        logger.info("Doors opened")
        return OperationStatus.APPLIED

    def close_door(self) -> OperationStatus:
        if not self.is_door_open:
            logger.info("Doors are already closed")
            return OperationStatus.NO_CHANGE
        self.is_door_open = False
        logger.info("Doors closed")
        return OperationStatus.APPLIED

    def describe(self) -> str:
        doors = "open" if self.is_door_open else "closed"
        motion = "moving" if self.is_moving else "stopped"
        return (
            f"Floor {self.current_floor}/{self.building.floor_count} | "
            f"doors {doors} | {motion}"
        )
