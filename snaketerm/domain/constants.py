"""
Game constants for snaketerm.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Player command that ends the game without moving
QUIT = "QUIT"

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# (dx, dy) per direction; row 0 is the top of the screen
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Render buffer markers
WALL_MARKER = "#"
BODY_MARKER = "*"
FOOD_MARKER = "@"
EMPTY_MARKER = " "
MARKERS = {WALL_MARKER, BODY_MARKER, FOOD_MARKER, EMPTY_MARKER}

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_QUIT = "quit"
DEATH_BOARD_FULL = "board_full"

# Game settings
DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 20
MIN_GRID_SIZE = 3
INITIAL_DIRECTION = RIGHT
