"""
Tests for engine.py - movement, collision, food and the tick loop.
"""

import random
from unittest.mock import Mock

import pytest

from snaketerm.domain import UP, DOWN, LEFT, RIGHT, QUIT, DirectionState, Snake
from snaketerm.engine import SnakeGame, run_game
from snaketerm.players import RandomPlayer


class ScriptedPlayer:
    """Returns queued commands one per tick, then None."""

    def __init__(self, commands):
        self.commands = list(commands)
        self.calls = 0

    def get_move(self, game_state):
        self.calls += 1
        if self.commands:
            return self.commands.pop(0)
        return None


def make_game(width=30, height=20, seed=0):
    game = SnakeGame(width=width, height=height, rng=random.Random(seed), game_id="test")
    # Keep food out of the snake's way unless a test places it
    game.set_food((1, 1))
    return game


class TestSnakeGameSetup:
    """Tests for a freshly created game."""

    def test_game_initialization(self):
        """A new game has a 1-cell centered snake heading RIGHT."""
        game = SnakeGame(width=30, height=20, rng=random.Random(1))
        state = game.state

        assert list(state.snake) == [(15, 10)]
        assert state.direction.current == RIGHT
        assert state.score == 0
        assert state.game_over is False
        assert state.death_reason is None
        assert state.grid.in_interior(state.food)
        assert state.food != (15, 10)

    def test_game_id_generated(self):
        """A game id is generated unless provided."""
        assert SnakeGame(rng=random.Random(1)).game_id
        assert SnakeGame(rng=random.Random(1), game_id="abc").game_id == "abc"

    def test_invalid_dimensions_raise(self):
        with pytest.raises(ValueError):
            SnakeGame(width=2, height=20)

    def test_set_food_rejects_border(self):
        """set_food() only accepts interior positions."""
        game = make_game()
        with pytest.raises(ValueError):
            game.set_food((0, 5))
        with pytest.raises(ValueError):
            game.set_food((29, 5))

    def test_random_free_cell_not_on_snake(self):
        """_random_free_cell() returns an interior cell not occupied by the snake."""
        game = make_game(width=8, height=6)
        game.state.snake = Snake([(x, 2) for x in range(6, 0, -1)])
        occupied = set(game.state.snake.positions)

        for _ in range(100):
            cell = game._random_free_cell()
            assert cell not in occupied
            assert game.state.grid.in_interior(cell)


class TestMovement:
    """Tests for SnakeGame.update()."""

    def test_first_tick_moves_right(self):
        """30x20 start at (15,10) heading RIGHT moves to (16,10)."""
        game = make_game()
        game.update()

        assert game.state.snake.head == (16, 10)
        assert len(game.state.snake) == 1
        assert game.game_over is False
        assert game.state.tick == 1

    def test_tail_follows_head(self):
        """Without food the length stays constant while the head advances."""
        game = make_game()
        game.state.snake = Snake([(10, 10), (9, 10), (8, 10)])
        game.update()

        assert list(game.state.snake) == [(11, 10), (10, 10), (9, 10)]

    def test_turn_applies_on_next_step(self):
        game = make_game()
        game.apply_command(UP)
        game.update()

        assert game.state.snake.head == (15, 9)

    def test_reversal_ignored(self):
        """LEFT while heading RIGHT is ignored and the snake keeps going."""
        game = make_game()
        game.state.snake = Snake([(10, 10), (9, 10)])
        game.apply_command(LEFT)
        game.update()

        assert game.state.direction.current == RIGHT
        assert game.state.snake.head == (11, 10)
        assert game.game_over is False


class TestCollisions:
    """Tests for terminal conditions."""

    def test_left_wall(self):
        """Head at (1,10) heading LEFT dies on column 0 with score unchanged."""
        game = make_game()
        game.state.snake = Snake([(1, 10)])
        game.state.direction = DirectionState(LEFT)
        game.state.score = 3

        game.update()

        assert game.game_over is True
        assert game.state.death_reason == "wall"
        assert game.state.score == 3
        assert list(game.state.snake) == [(1, 10)]

    @pytest.mark.parametrize("head,direction", [
        ((28, 10), RIGHT),
        ((15, 1), UP),
        ((15, 18), DOWN),
        ((1, 5), LEFT),
    ])
    def test_every_wall_is_fatal(self, head, direction):
        """Entering the border ring on any side ends the game."""
        game = make_game()
        game.state.snake = Snake([head])
        game.state.direction = DirectionState(direction)

        game.update()

        assert game.game_over is True
        assert game.state.death_reason == "wall"

    def test_self_collision_leaves_body_untouched(self):
        """Moving into the body ends the game without mutating the body."""
        body = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
        game = make_game()
        game.state.snake = Snake(body)
        game.state.direction = DirectionState(DOWN)

        game.update()

        assert game.game_over is True
        assert game.state.death_reason == "self"
        assert list(game.state.snake) == body

    def test_tail_cell_is_fatal(self):
        """The tail about to move away still counts as body."""
        game = make_game()
        game.state.snake = Snake([(5, 5), (5, 6), (4, 6), (4, 5)])
        game.state.direction = DirectionState(LEFT)

        game.update()

        assert game.game_over is True
        assert game.state.death_reason == "self"

    def test_no_mutation_after_game_over(self):
        """Once game over, update() and apply_command() do nothing."""
        game = make_game()
        game.state.snake = Snake([(1, 10)])
        game.state.direction = DirectionState(LEFT)
        game.update()
        tick = game.state.tick

        game.apply_command(UP)
        game.update()

        assert game.state.tick == tick
        assert game.state.direction.current == LEFT
        assert list(game.state.snake) == [(1, 10)]

    def test_quit_ends_without_moving(self):
        game = make_game()
        game.apply_command(QUIT)

        assert game.game_over is True
        assert game.state.death_reason == "quit"
        assert game.state.snake.head == (15, 10)

    def test_unknown_command_raises(self):
        with pytest.raises(ValueError):
            make_game().apply_command("JUMP")

    def test_none_command_is_no_change(self):
        game = make_game()
        game.apply_command(None)
        assert game.state.direction.current == RIGHT


class TestFood:
    """Tests for food consumption and growth."""

    def test_eating_food(self):
        """Eating at (16,10) scores 1, grows to 2, re-places food in [1,28]x[1,18]."""
        game = make_game()
        game.set_food((16, 10))

        game.update()

        state = game.state
        assert state.score == 1
        assert len(state.snake) == 2
        assert list(state.snake) == [(16, 10), (15, 10)]
        fx, fy = state.food
        assert 1 <= fx <= 28
        assert 1 <= fy <= 18
        assert state.food not in state.snake

    def test_length_after_k_foods(self):
        """After eating k times the snake has length k + 1."""
        game = make_game()
        for k in range(1, 6):
            game.set_food(game.state.grid.step(game.state.snake.head, RIGHT))
            game.update()
            assert game.state.score == k
            assert len(game.state.snake) == k + 1

    def test_board_full_ends_game(self):
        """Filling the last free interior cell ends the game."""
        game = SnakeGame(width=4, height=3, rng=random.Random(0))
        assert game.state.snake.head == (2, 1)
        assert game.state.food == (1, 1)
        game.state.direction = DirectionState(LEFT)

        game.update()

        assert game.state.score == 1
        assert game.state.food is None
        assert game.game_over is True
        assert game.state.death_reason == "board_full"

    def test_autoplay_properties_hold(self):
        """Score only grows by one per food, length tracks score, food stays valid."""
        game = SnakeGame(width=12, height=10, rng=random.Random(2))
        player = RandomPlayer(random.Random(1))
        previous_score = 0

        for _ in range(2000):
            if game.game_over:
                break
            game.run_round(player)
            state = game.state
            assert state.score in (previous_score, previous_score + 1)
            assert len(state.snake) == state.score + 1
            assert len(set(state.snake.positions)) == len(state.snake)
            if state.food is not None:
                assert state.grid.in_interior(state.food)
                assert state.food not in state.snake
            previous_score = state.score


class TestRunGame:
    """Tests for the fixed-tick loop."""

    def test_quit_stops_loop(self):
        game = make_game()
        renderer = Mock()
        sleep = Mock()

        score = run_game(game, ScriptedPlayer([QUIT]), renderer, tick_delay=0.1, sleep=sleep)

        assert score == 0
        assert game.state.death_reason == "quit"
        assert game.state.tick == 0
        assert renderer.draw.call_count == 2
        sleep.assert_not_called()

    def test_runs_until_wall(self):
        """With no input the snake runs right into the wall."""
        game = make_game()
        player = ScriptedPlayer([])
        renderer = Mock()
        sleep = Mock()

        run_game(game, player, renderer, tick_delay=0.05, sleep=sleep)

        assert game.state.death_reason == "wall"
        assert game.state.snake.head == (28, 10)
        assert player.calls == 14
        assert sleep.call_count == 13
        sleep.assert_called_with(0.05)
        assert renderer.draw.call_count == 15

    def test_renderer_gets_buffer_and_score(self):
        game = make_game()
        renderer = Mock()

        run_game(game, ScriptedPlayer([QUIT]), renderer, sleep=Mock())

        buffer, score = renderer.draw.call_args[0]
        assert len(buffer) == 20
        assert len(buffer[0]) == 30
        assert score == 0

    def test_without_renderer(self):
        game = make_game()
        assert run_game(game, ScriptedPlayer([QUIT]), sleep=Mock()) == 0
