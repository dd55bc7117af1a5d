"""
Keyboard player - reads arrow keys, WASD and quit keys from a curses window.
"""

import curses
import logging
from typing import Iterable, List, Optional

from snaketerm.domain.constants import UP, DOWN, LEFT, RIGHT, QUIT
from snaketerm.domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

ESCAPE_KEY = 27

KEY_BINDINGS = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord("w"): UP,
    ord("s"): DOWN,
    ord("a"): LEFT,
    ord("d"): RIGHT,
    ord("W"): UP,
    ord("S"): DOWN,
    ord("A"): LEFT,
    ord("D"): RIGHT,
    ESCAPE_KEY: QUIT,
    ord("q"): QUIT,
    ord("Q"): QUIT,
}


def latest_command(keys: Iterable[int]) -> Optional[str]:
    """
    Reduce the keys queued during one tick to a single command.

    Unbound keys are ignored, a quit anywhere in the queue wins, otherwise
    the most recent direction is returned.
    """
    commands = [KEY_BINDINGS[key] for key in keys if key in KEY_BINDINGS]
    if not commands:
        return None
    if QUIT in commands:
        return QUIT
    return commands[-1]


class KeyboardPlayer(Player):
    """
    Human player on a curses window.

    get_move() blocks for at most timeout_ms waiting for the first key, then
    drains whatever else is already queued without waiting.
    """

    def __init__(self, window, timeout_ms: int = 100):
        self.window = window
        self.timeout_ms = timeout_ms

    def _read_pending_keys(self) -> List[int]:
        self.window.timeout(self.timeout_ms)
        key = self.window.getch()
        if key == -1:
            return []

        keys = [key]
        self.window.timeout(0)
        while True:
            key = self.window.getch()
            if key == -1:
                break
            keys.append(key)
        return keys

    def get_move(self, game_state: GameState) -> Optional[str]:
        keys = self._read_pending_keys()
        command = latest_command(keys)
        if len(keys) > 1:
            logger.debug("Drained %d keys this tick, applying %s", len(keys), command)
        return command
