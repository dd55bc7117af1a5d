"""
Curses renderer for the per-tick render buffer.

Colors:
- walls brown (yellow on 8-color terminals)
- food red
- snake body banded by score, changing every 5 points
"""

import curses
import logging
from typing import List

from snaketerm.domain.constants import BODY_MARKER, FOOD_MARKER, WALL_MARKER

logger = logging.getLogger(__name__)

# Color pairs (curses color pairs start at 1)
PAIR_WALL = 1
PAIR_FOOD = 2
PAIR_SNAKE_BASE = 3

BROWN_256 = 94
ORANGE_256 = 202
POINTS_PER_BAND = 5

# Body colors for scores 0-4, 5-9, ... 25-29, then 30 and up
SNAKE_BANDS = [
    curses.COLOR_GREEN,
    curses.COLOR_CYAN,
    curses.COLOR_YELLOW,
    curses.COLOR_MAGENTA,
    curses.COLOR_BLUE,
    curses.COLOR_RED,
    ORANGE_256,
]


class TerminalTooSmall(Exception):
    """Raised when the terminal cannot hold the grid plus the score line."""


def score_line(score: int) -> str:
    return f"Score: {score}"


def snake_band_for_score(score: int) -> int:
    """Index into SNAKE_BANDS for a score."""
    return min(max(score, 0) // POINTS_PER_BAND, len(SNAKE_BANDS) - 1)


def snake_color_for_score(score: int, colors: int = 256) -> int:
    """
    Curses color number for the snake body at this score.

    Terminals with fewer than 256 colors get white instead of orange.
    """
    color = SNAKE_BANDS[snake_band_for_score(score)]
    if color >= colors:
        return curses.COLOR_WHITE
    return color


class CursesRenderer:
    def __init__(self, window):
        self.window = window
        self.colors_enabled = False
        self._setup()

    def _setup(self):
        try:
            curses.curs_set(0)
        except curses.error:
            pass

        if not curses.has_colors():
            return

        curses.start_color()
        colors = curses.COLORS
        logger.debug("Terminal reports %d colors", colors)
        wall = BROWN_256 if colors >= 256 else curses.COLOR_YELLOW
        curses.init_pair(PAIR_WALL, wall, curses.COLOR_BLACK)
        curses.init_pair(PAIR_FOOD, curses.COLOR_RED, curses.COLOR_BLACK)
        for band in range(len(SNAKE_BANDS)):
            score = band * POINTS_PER_BAND
            curses.init_pair(
                PAIR_SNAKE_BASE + band,
                snake_color_for_score(score, colors),
                curses.COLOR_BLACK,
            )
        self.colors_enabled = True

    def ensure_fits(self, width: int, height: int):
        """Raise TerminalTooSmall unless the grid and score line fit."""
        rows, cols = self.window.getmaxyx()
        # One extra row for the score, one extra column so the last cell
        # never lands on the bottom-right corner. The score line must fit
        # the highest reachable score, one point per interior cell.
        max_score = (width - 2) * (height - 2)
        need_rows = height + 1
        need_cols = max(width, len(score_line(max_score))) + 1
        if rows < need_rows or cols < need_cols:
            raise TerminalTooSmall(
                f"Terminal is {cols}x{rows}, need at least {need_cols}x{need_rows}."
            )

    def _attr_for(self, marker: str, score: int) -> int:
        if not self.colors_enabled:
            return curses.A_NORMAL
        if marker == WALL_MARKER:
            return curses.color_pair(PAIR_WALL)
        if marker == FOOD_MARKER:
            return curses.color_pair(PAIR_FOOD) | curses.A_BOLD
        if marker == BODY_MARKER:
            return curses.color_pair(PAIR_SNAKE_BASE + snake_band_for_score(score))
        return curses.A_NORMAL

    def draw(self, buffer: List[List[str]], score: int):
        """Draw one frame: the full buffer and the score line below it."""
        for y, row in enumerate(buffer):
            for x, marker in enumerate(row):
                self.window.addstr(y, x, marker, self._attr_for(marker, score))
        self.window.addstr(len(buffer), 0, score_line(score))
        self.window.clrtoeol()
        self.window.refresh()
