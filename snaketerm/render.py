"""
Render buffer compositor.

Turns a GameState into a height x width grid of single-character markers.
The buffer is rebuilt from scratch on every call and never stored on the
state, so the terminal renderer can treat it as read-only.
"""

from typing import List

from snaketerm.domain import GameState
from snaketerm.domain.constants import (
    BODY_MARKER,
    EMPTY_MARKER,
    FOOD_MARKER,
    WALL_MARKER,
)

RenderBuffer = List[List[str]]


def compose_buffer(state: GameState) -> RenderBuffer:
    """
    Returns the board as rows of markers:
    # = wall (full border ring)
    * = snake body, head included
    @ = food
    (space) = empty

    Write order is walls, then snake, then food.
    """
    width, height = state.width, state.height
    buffer = [[EMPTY_MARKER for _ in range(width)] for _ in range(height)]

    for x in range(width):
        buffer[0][x] = WALL_MARKER
        buffer[height - 1][x] = WALL_MARKER
    for y in range(height):
        buffer[y][0] = WALL_MARKER
        buffer[y][width - 1] = WALL_MARKER

    for x, y in state.snake:
        if state.grid.contains((x, y)):
            buffer[y][x] = BODY_MARKER

    if state.food is not None:
        fx, fy = state.food
        buffer[fy][fx] = FOOD_MARKER

    return buffer


def buffer_to_text(buffer: RenderBuffer) -> str:
    """Join a render buffer into newline-separated rows."""
    return "\n".join("".join(row) for row in buffer)
