#!/usr/bin/env python3
"""
Play snake in the terminal.

Shows a text menu (new game, leaderboard, exit). A game runs full-screen
under curses; when it ends the final score and leaderboard are printed and
the player may enter a name to record the result.

Usage:
    snaketerm                          # play with arrow keys / WASD, Esc or q quits
    snaketerm --width 40 --height 25   # bigger board
    snaketerm --autoplay --seed 7      # watch the random autopilot
"""

import argparse
import curses
import logging
import random
from typing import List, Optional

from snaketerm.config import Settings, load_settings
from snaketerm.domain.constants import MIN_GRID_SIZE
from snaketerm.engine import SnakeGame, run_game
from snaketerm.players import KeyboardPlayer, RandomPlayer
from snaketerm.services import (
    CursesRenderer,
    ScoreStore,
    TerminalTooSmall,
    format_leaderboard,
)

logger = logging.getLogger(__name__)

MENU_NEW_GAME = "1"
MENU_LEADERBOARD = "2"
MENU_EXIT = "3"
MENU_CHOICES = {MENU_NEW_GAME, MENU_LEADERBOARD, MENU_EXIT}


def show_menu() -> str:
    """Print the menu until a valid choice is entered and return it."""
    while True:
        print("Menu:")
        print("1. New game")
        print("2. Leaderboard")
        print("3. Exit")

        choice = input().strip()
        if choice in MENU_CHOICES:
            return choice
        print("Invalid choice. Try again.")


def play_in_terminal(window, settings: Settings, autoplay: bool = False, seed: Optional[int] = None) -> SnakeGame:
    """Run one game on a curses window. Meant to be called via curses.wrapper."""
    renderer = CursesRenderer(window)
    renderer.ensure_fits(settings.width, settings.height)
    window.clear()

    rng = random.Random(seed) if seed is not None else None
    game = SnakeGame(settings.width, settings.height, rng=rng)

    if autoplay:
        player = RandomPlayer(rng)
    else:
        player = KeyboardPlayer(window, timeout_ms=settings.input_timeout_ms)

    run_game(game, player, renderer, tick_delay=settings.tick_delay_ms / 1000)
    return game


def finish_game(game: SnakeGame, store: ScoreStore):
    print(f"Game over! Final score: {game.score}")
    print(format_leaderboard(store.load_scores()))

    print("Enter your name (or press Enter to skip):")
    name = input().strip()
    store.save_score(game.score, name or None)


def show_leaderboard(store: ScoreStore):
    print(format_leaderboard(store.load_scores()))
    print("Press Enter to return to the menu...")
    input()


def configure_logging(settings: Settings):
    logging.basicConfig(
        filename=settings.log_file,
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width including walls (default: SNAKE_WIDTH or 30)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height including walls (default: SNAKE_HEIGHT or 20)")
    parser.add_argument("--scores-file", type=str, default=None,
                        help="Leaderboard file (default: SNAKE_SCORES_FILE or scores.txt)")
    parser.add_argument("--autoplay", action="store_true",
                        help="Let the random autopilot play instead of the keyboard")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the autopilot")

    args = parser.parse_args(argv)
    for flag in ("width", "height"):
        value = getattr(args, flag)
        if value is not None and value < MIN_GRID_SIZE:
            parser.error(f"--{flag} must be at least {MIN_GRID_SIZE}")
    return args


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from None
    if args.width is not None:
        settings.width = args.width
    if args.height is not None:
        settings.height = args.height
    if args.scores_file:
        settings.scores_file = args.scores_file
    if settings.width < MIN_GRID_SIZE or settings.height < MIN_GRID_SIZE:
        raise SystemExit(f"Board must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}.")
    return settings


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    settings = build_settings(args)
    configure_logging(settings)

    store = ScoreStore(settings.scores_file)
    logger.info("Using scores file %s", store.path)

    try:
        while True:
            choice = show_menu()
            if choice == MENU_NEW_GAME:
                try:
                    game = curses.wrapper(play_in_terminal, settings, args.autoplay, args.seed)
                except TerminalTooSmall as exc:
                    logger.warning("Cannot start game: %s", exc)
                    print(f"Cannot start game: {exc}")
                    continue
                finish_game(game, store)
            elif choice == MENU_LEADERBOARD:
                show_leaderboard(store)
            else:
                break
    except (EOFError, KeyboardInterrupt):
        print()

    logger.info("Exiting")


if __name__ == "__main__":
    main()
