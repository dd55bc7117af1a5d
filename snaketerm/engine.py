import logging
import random
import time
import uuid
from typing import Callable, Optional, Tuple

from snaketerm.domain import (
    DirectionState,
    GameState,
    Grid,
    Snake,
    QUIT,
    VALID_MOVES,
)
from snaketerm.domain.constants import (
    DEATH_BOARD_FULL,
    DEATH_QUIT,
    DEATH_SELF,
    DEATH_WALL,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
)
from snaketerm.render import compose_buffer

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Grid (width, height)
      - The snake and its heading
      - The food item
      - Score
      - Ticks
    """
    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: Optional[random.Random] = None,
        game_id: str = None
    ):
        self.rng = rng if rng is not None else random.Random()

        if game_id is None:
            self.game_id = str(uuid.uuid4())
        else:
            self.game_id = game_id

        grid = Grid(width, height)
        self.state = GameState(
            grid=grid,
            snake=Snake([grid.center]),
            direction=DirectionState(),
            food=None,
        )
        self.state.food = self._random_free_cell()

        logger.info(
            "Game %s started on %dx%d grid, head at %s, food at %s",
            self.game_id, width, height, self.state.snake.head, self.state.food,
        )

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def score(self) -> int:
        return self.state.score

    def set_food(self, pos: Tuple[int, int]):
        """
        Place the food at a specific interior position.
        Useful for scripted scenarios; normal play uses random placement.
        """
        if not self.state.grid.in_interior(pos):
            raise ValueError(f"Food must be inside the interior, got {pos}.")
        self.state.food = pos

    def _random_free_cell(self) -> Optional[Tuple[int, int]]:
        """
        Return a random interior cell (x, y) not occupied by the snake,
        or None if the snake fills the whole interior.
        """
        occupied = set(self.state.snake.positions)
        free = [cell for cell in self.state.grid.interior_cells() if cell not in occupied]
        if not free:
            return None
        return self.rng.choice(free)

    def apply_command(self, command: Optional[str]):
        """
        Apply one player command before the movement step.
        None means no input this tick.
        """
        if self.state.game_over or command is None:
            return

        if command == QUIT:
            self.end_game(DEATH_QUIT)
        elif command in VALID_MOVES:
            if not self.state.direction.change_direction(command):
                logger.debug("Ignored reversal %s while heading %s", command, self.state.direction.current)
        else:
            raise ValueError(f"Unknown command: {command!r}")

    def update(self):
        """
        Advance the snake one cell in its current direction:
          1) compute the new head
          2) end the game on wall or body contact, before touching the body
          3) push the new head
          4) on food: score, re-place food, keep the tail
          5) otherwise drop the tail
        """
        state = self.state
        if state.game_over:
            return

        state.tick += 1
        new_head = state.grid.step(state.snake.head, state.direction.current)

        # The tail still counts even though it would move away this tick
        if state.snake.occupies(new_head):
            self.end_game(DEATH_SELF)
            return
        if not state.grid.in_interior(new_head):
            self.end_game(DEATH_WALL)
            return

        state.snake.push_head(new_head)

        if new_head == state.food:
            state.score += 1
            logger.debug("Food eaten at %s, score %d", new_head, state.score)
            state.food = self._random_free_cell()
            if state.food is None:
                self.end_game(DEATH_BOARD_FULL)
        else:
            state.snake.pop_tail()

    def run_round(self, player):
        """
        Execute one tick: ask the player for a command, apply it, then move.
        """
        if self.state.game_over:
            logger.debug("Game is already over. No more rounds.")
            return

        command = player.get_move(self.state)
        self.apply_command(command)
        self.update()

    def end_game(self, reason: str):
        self.state.game_over = True
        self.state.death_reason = reason
        logger.info(
            "Game %s over after %d ticks: %s (score %d, length %d)",
            self.game_id, self.state.tick, reason, self.state.score, len(self.state.snake),
        )


def run_game(
    game: SnakeGame,
    player,
    renderer=None,
    tick_delay: float = 0.1,
    sleep: Callable[[float], None] = time.sleep
) -> int:
    """
    Run the fixed-tick loop until the game ends.

    Args:
        game: the game to drive
        player: input source; its get_move() bounds the per-tick input wait
        renderer: optional object with draw(buffer, score)
        tick_delay: seconds to sleep after each drawn frame

    Returns:
        The final score.
    """
    if renderer is not None:
        renderer.draw(compose_buffer(game.state), game.score)

    while not game.game_over:
        game.run_round(player)
        if renderer is not None:
            renderer.draw(compose_buffer(game.state), game.score)
        if not game.game_over:
            sleep(tick_delay)

    return game.score
