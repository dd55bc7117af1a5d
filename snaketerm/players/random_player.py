"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from snaketerm.domain.constants import VALID_MOVES
from snaketerm.domain.direction import opposite
from snaketerm.domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls, its own body
    and the rejected reversal. Used for the demo mode.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> str:
        grid = game_state.grid
        snake = game_state.snake
        heading = game_state.direction.current

        # Filter out moves that:
        # 1. Reverse into the neck (the engine would ignore them anyway)
        # 2. Hit walls
        # 3. Hit own body, tail included since it still counts this tick
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == opposite(heading):
                continue

            new_pos = grid.step(snake.head, move)
            if not grid.in_interior(new_pos):
                continue
            if snake.occupies(new_pos):
                continue

            valid_moves.append(move)

        # If no valid moves, keep going straight (we'll die anyway)
        if not valid_moves:
            return heading

        return self.rng.choice(valid_moves)
