"""
I/O services around the game engine: score persistence and terminal output.
"""

from .score_store import ScoreEntry, ScoreStore, format_leaderboard, parse_score_line
from .terminal import CursesRenderer, TerminalTooSmall, snake_color_for_score

__all__ = [
    'ScoreEntry',
    'ScoreStore',
    'format_leaderboard',
    'parse_score_line',
    'CursesRenderer',
    'TerminalTooSmall',
    'snake_color_for_score',
]
