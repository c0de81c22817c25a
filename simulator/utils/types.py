# IN THIS FILE: POSITION, PARSERESULT, PLACERESULT

from typing import Optional

from simulator.utils.enums import Direction


class Position:
    """
    A robot's cell on the tabletop and the way it is facing.
    Immutable once built; moves and turns produce a new Position.
    """

    def __init__(self, x: int, y: int, direction: Direction):
        self._x = x
        self._y = y
        self._direction = direction

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def direction(self) -> Direction:
        return self._direction

    def moved(self) -> 'Position':
        """Position one cell ahead, same facing. Not bounds-checked."""
        dx, dy = self._direction.delta
        return Position(self._x + dx, self._y + dy, self._direction)

    def facing(self, direction: Direction) -> 'Position':
        """Same cell, new facing"""
        return Position(self._x, self._y, direction)

    def __eq__(self, other: object) -> bool:
        """Check if two positions are equal"""
        if not isinstance(other, Position):
            return False
        return (self.x == other.x and
                self.y == other.y and
                self.direction == other.direction)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.direction))

    def __str__(self) -> str:
        """Report format: 0,1,NORTH"""
        return f"{self.x},{self.y},{self.direction.value}"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y}, d={self.direction.name})"


class ParseResult:
    """
    Outcome of turning one text token into an integer.
    Either success with a value, or failure with a reason.
    """

    def __init__(self, value: Optional[int] = None, reason: str = ""):
        self.value = value
        self.reason = reason

    @classmethod
    def ok(cls, value: int) -> 'ParseResult':
        return cls(value=value)

    @classmethod
    def fail(cls, reason: str) -> 'ParseResult':
        return cls(reason=reason)

    @property
    def success(self) -> bool:
        return self.value is not None

    def __repr__(self) -> str:
        if self.success:
            return f"ParseResult.ok({self.value})"
        return f"ParseResult.fail({self.reason!r})"


class PlaceResult:
    """
    Outcome of Robot.place().
    message is empty when accepted, otherwise it is the rejection notice.
    """

    def __init__(self, accepted: bool, message: str = ""):
        self.accepted = accepted
        self.message = message

    @classmethod
    def accept(cls) -> 'PlaceResult':
        return cls(True)

    @classmethod
    def reject(cls, message: str) -> 'PlaceResult':
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.accepted

    def __repr__(self) -> str:
        return f"PlaceResult(accepted={self.accepted}, message={self.message!r})"
