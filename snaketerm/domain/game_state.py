"""
GameState entity - everything one game owns while it is running.
"""

from typing import Optional, Tuple

from .direction import DirectionState
from .grid import Grid
from .snake import Snake


class GameState:
    """
    The mutable state of a single game.

    Attributes:
        grid: playfield dimensions and border
        snake: the snake body, head first
        direction: heading state machine
        food: (x, y) of the single food item, or None once the board is full
        score: food eaten so far
        game_over: terminal flag; no further mutation once set
        death_reason: 'wall', 'self', 'quit' or 'board_full' after game over
        tick: number of movement steps taken
    """

    def __init__(
        self,
        grid: Grid,
        snake: Snake,
        direction: DirectionState,
        food: Optional[Tuple[int, int]],
        score: int = 0,
        game_over: bool = False,
        death_reason: Optional[str] = None,
        tick: int = 0
    ):
        self.grid = grid
        self.snake = snake
        self.direction = direction
        self.food = food
        self.score = score
        self.game_over = game_over
        self.death_reason = death_reason
        self.tick = tick

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, head={self.snake.head}, "
            f"length={len(self.snake)}, food={self.food}, score={self.score}, "
            f"game_over={self.game_over}>"
        )
