"""
Direction state machine: the current heading plus the reversal guard.
"""

from .constants import INITIAL_DIRECTION, OPPOSITES, VALID_MOVES


def opposite(direction: str) -> str:
    """Return the direction pointing the other way."""
    if direction not in VALID_MOVES:
        raise ValueError(f"Unknown direction: {direction!r}")
    return OPPOSITES[direction]


class DirectionState:
    """
    Holds the snake's heading.

    A requested turn is applied atomically and takes effect on the next
    movement step. Turning straight back into the neck is rejected.
    """

    def __init__(self, current: str = INITIAL_DIRECTION):
        if current not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {current!r}")
        self.current = current

    def change_direction(self, requested: str) -> bool:
        """
        Request a new heading.

        Returns:
            True if the heading is now `requested` (turns and repeats),
            False if it was rejected as a reversal.
        """
        if opposite(requested) == self.current:
            return False
        self.current = requested
        return True

    def __repr__(self):
        return f"<DirectionState {self.current}>"
