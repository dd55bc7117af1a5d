"""
Player implementations for snaketerm.

This module contains the input-source abstraction and the implementations
that decide the snake's next command.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KEY_BINDINGS, latest_command
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KEY_BINDINGS',
    'latest_command',
    'RandomPlayer',
]
