# simulator/entities/grid.py

from simulator.utils.consts import TABLE_WIDTH, TABLE_HEIGHT


class Grid:
    """
    Represents the tabletop.
    Fixed bounds; validates robot positions.
    """

    def __init__(self, width: int = TABLE_WIDTH, height: int = TABLE_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_within_bounds(self, x: int, y: int) -> bool:
        """
        Check if position is on the table.
        Valid indices are 0 to width-1 and 0 to height-1.
        """
        return 0 <= x < self._width and 0 <= y < self._height

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height})"
