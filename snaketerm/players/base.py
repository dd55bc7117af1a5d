"""
Base player interface for the game engine.
"""

from typing import Optional

from snaketerm.domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    Each player is responsible for returning the command to apply before
    the next movement step, given the current game state.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a command given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", "QUIT", or None for
            no change this tick
        """
        raise NotImplementedError
