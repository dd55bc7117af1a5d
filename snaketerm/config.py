"""
Runtime settings read from the environment (and a local .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from snaketerm.domain.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH


@dataclass
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    input_timeout_ms: int = 100
    tick_delay_ms: int = 100
    scores_file: str = "scores.txt"
    log_file: str = "snaketerm.log"
    log_level: str = "INFO"


def _get_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def _get_str(name: str, default: str) -> str:
    value = os.getenv(name, default).strip()
    return value or default


def load_settings(use_dotenv: bool = True, dotenv_path: Optional[str] = None) -> Settings:
    """
    Build Settings from SNAKE_* environment variables.

    Raises:
        ValueError: If a numeric variable is not an integer, or a timing
            variable is negative
    """
    if use_dotenv:
        load_dotenv(dotenv_path)

    return Settings(
        width=_get_int("SNAKE_WIDTH", DEFAULT_WIDTH),
        height=_get_int("SNAKE_HEIGHT", DEFAULT_HEIGHT),
        input_timeout_ms=_get_int("SNAKE_INPUT_TIMEOUT_MS", 100, minimum=0),
        tick_delay_ms=_get_int("SNAKE_TICK_DELAY_MS", 100, minimum=0),
        scores_file=_get_str("SNAKE_SCORES_FILE", "scores.txt"),
        log_file=_get_str("SNAKE_LOG_FILE", "snaketerm.log"),
        log_level=_get_str("SNAKE_LOG_LEVEL", "INFO").upper(),
    )
