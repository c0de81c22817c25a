# IN THIS FILE: DIRECTIONS and COMMAND VERBS
from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    """
    Robot facing direction on the tabletop.
    Value is the name as it appears in commands and reports.
    """
    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    def __str__(self) -> str:
        return self.value

    @property
    def delta(self) -> Tuple[int, int]:
        """
        Unit step (dx, dy) for one MOVE in this direction.
        (0, 0) is the SOUTH WEST corner, so NORTH is y+1.
        """
        return {
            Direction.NORTH: (0, 1),
            Direction.EAST:  (1, 0),
            Direction.SOUTH: (0, -1),
            Direction.WEST:  (-1, 0),
        }[self]

    @staticmethod
    def from_token(token: str) -> Optional['Direction']:
        """
        Look up a direction token, case-insensitively.

        Examples:
            "north" -> Direction.NORTH
            "Up"    -> None
        """
        try:
            return Direction[token.strip().upper()]
        except KeyError:
            return None


class Verb(Enum):
    """
    Recognised command verbs.
    Matching is exact: "move" is not MOVE.
    """
    PLACE = "PLACE"
    MOVE = "MOVE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPORT = "REPORT"

    @staticmethod
    def lookup(token: str) -> Optional['Verb']:
        for verb in Verb:
            if verb.value == token:
                return verb
        return None
