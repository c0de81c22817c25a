# IN THIS FILE: THE ROBOT STATE MACHINE (UNPLACED -> PLACED)
import logging
from typing import Optional, Sequence

from simulator.commands.parser import parse_coordinate
from simulator.entities.grid import Grid
from simulator.utils.consts import (
    DIRECTION_CYCLE,
    INVALID_COORDINATES_MSG,
    INVALID_DIRECTION_MSG,
    NOT_PLACED_REPORT,
)
from simulator.utils.enums import Direction
from simulator.utils.types import PlaceResult, Position

logger = logging.getLogger(__name__)


class Robot:
    """
    Tracks the robot's position and facing on the tabletop.

    The robot starts off the table. PLACE puts it on; there is no way back
    off. MOVE, LEFT and RIGHT do nothing until it is placed, and a MOVE that
    would fall off the table leaves it where it is.
    """

    def __init__(self, grid: Optional[Grid] = None, directions: Sequence[Direction] = DIRECTION_CYCLE):
        """
        Args:
            grid: Table bounds (defaults to 5x5)
            directions: Clockwise direction order used for turning
        """
        self.grid = grid if grid is not None else Grid()
        self.directions = tuple(directions)
        self.position: Optional[Position] = None
        logger.debug("Robot initialised on %r, not placed", self.grid)

    @property
    def is_placed(self) -> bool:
        return self.position is not None

    @property
    def x(self) -> Optional[int]:
        return self.position.x if self.position else None

    @property
    def y(self) -> Optional[int]:
        return self.position.y if self.position else None

    @property
    def direction(self) -> Optional[Direction]:
        return self.position.direction if self.position else None

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def place(self, x_raw, y_raw, direction_raw: str) -> PlaceResult:
        """
        Put the robot at (x, y) facing direction.

        Allowed whether or not the robot is already placed. On any invalid
        input the current state is kept and the rejection notice is returned.
        """
        logger.debug("PLACE x=%r y=%r dir=%r", x_raw, y_raw, direction_raw)
        px = parse_coordinate(x_raw)
        py = parse_coordinate(y_raw)

        if not (px.success and py.success and self.grid.is_within_bounds(px.value, py.value)):
            message = INVALID_COORDINATES_MSG.format(x=x_raw, y=y_raw)
            reasons = [r.reason for r in (px, py) if not r.success] or ["off table"]
            logger.debug("%s (%s)", message, "; ".join(reasons))
            return PlaceResult.reject(message)

        direction_name = str(direction_raw).upper()
        direction = Direction.from_token(direction_name)
        if direction is None or direction not in self.directions:
            message = INVALID_DIRECTION_MSG.format(direction=direction_name)
            logger.debug(message)
            return PlaceResult.reject(message)

        self.position = Position(px.value, py.value, direction)
        logger.debug("Placed at %r", self.position)
        return PlaceResult.accept()

    def move(self) -> None:
        """One cell forward, unless that is off the table."""
        if not self.is_placed:
            logger.debug("MOVE ignored: robot not placed")
            return

        target = self.position.moved()
        if not self.grid.is_within_bounds(target.x, target.y):
            logger.debug("MOVE ignored: %r would fall off %r", target, self.grid)
            return

        self.position = target
        logger.debug("Moved to %r", self.position)

    def turn_left(self) -> None:
        self._turn(-1)

    def turn_right(self) -> None:
        self._turn(1)

    def _turn(self, step: int) -> None:
        if not self.is_placed:
            logger.debug("Turn ignored: robot not placed")
            return

        index = self.directions.index(self.position.direction)
        new_direction = self.directions[(index + step) % len(self.directions)]
        self.position = self.position.facing(new_direction)
        logger.debug("Turned %s, now facing %s", "right" if step > 0 else "left", new_direction)

    def report(self) -> str:
        if not self.is_placed:
            return NOT_PLACED_REPORT
        return str(self.position)

    def __repr__(self) -> str:
        return f"Robot(position={self.position!r}, grid={self.grid!r})"
