"""
Grid entity - playfield bounds and the permanent border ring.
"""

from typing import Iterator, Tuple

from .constants import DELTAS, MIN_GRID_SIZE

Position = Tuple[int, int]


class Grid:
    """
    Fixed-size playfield.

    Positions are (column, row) with (0, 0) at the top-left corner. The
    outermost ring of cells is wall; everything strictly inside it is the
    interior where the snake head and food may live.
    """

    def __init__(self, width: int, height: int):
        if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
            raise ValueError(
                f"Grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {width}x{height}."
            )
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def interior_columns(self) -> range:
        """Columns 1 .. width-2 inclusive."""
        return range(1, self._width - 1)

    @property
    def interior_rows(self) -> range:
        """Rows 1 .. height-2 inclusive."""
        return range(1, self._height - 1)

    @property
    def center(self) -> Position:
        return (self._width // 2, self._height // 2)

    def contains(self, pos: Position) -> bool:
        """True if pos lies anywhere on the grid, border included."""
        x, y = pos
        return 0 <= x < self._width and 0 <= y < self._height

    def is_wall(self, pos: Position) -> bool:
        """True if pos is on row 0, row height-1, column 0 or column width-1."""
        x, y = pos
        if not self.contains(pos):
            return False
        return x == 0 or y == 0 or x == self._width - 1 or y == self._height - 1

    def in_interior(self, pos: Position) -> bool:
        """
        True if pos is strictly inside the border ring.

        Positions past either edge (negative or beyond the far side) fail the
        same comparison, so leaving the grid and touching the wall are
        detected identically.
        """
        x, y = pos
        return 1 <= x <= self._width - 2 and 1 <= y <= self._height - 2

    def interior_cells(self) -> Iterator[Position]:
        for y in self.interior_rows:
            for x in self.interior_columns:
                yield (x, y)

    def step(self, pos: Position, direction: str) -> Position:
        """Return the position one cell away from pos in direction."""
        dx, dy = DELTAS[direction]
        return (pos[0] + dx, pos[1] + dy)

    def __repr__(self):
        return f"<Grid {self._width}x{self._height}>"
