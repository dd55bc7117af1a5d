"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterator, List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("Snake needs at least one position.")
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def push_head(self, pos: Tuple[int, int]) -> None:
        self.positions.appendleft(pos)

    def pop_tail(self) -> Tuple[int, int]:
        return self.positions.pop()

    def occupies(self, pos: Tuple[int, int]) -> bool:
        """True if any body cell, tail included, is at pos."""
        return pos in self.positions

    def __contains__(self, pos) -> bool:
        return self.occupies(pos)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}>"
