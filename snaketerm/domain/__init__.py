"""
Domain entities for the snaketerm game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, files, configuration).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, QUIT,
    WALL_MARKER, BODY_MARKER, FOOD_MARKER, EMPTY_MARKER,
)
from .direction import DirectionState, opposite
from .grid import Grid, Position
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'QUIT',
    'WALL_MARKER', 'BODY_MARKER', 'FOOD_MARKER', 'EMPTY_MARKER',
    'DirectionState', 'opposite',
    'Grid', 'Position',
    'Snake',
    'GameState',
]
