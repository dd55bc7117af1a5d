"""
Flat-file score persistence.

Each finished game appends one line "<name>: <score>" to a text file.
The leaderboard reads every line back, skips anything that does not
parse, and sorts by score, highest first.

Failures here never end the program: a score that cannot be written is
logged and dropped, and an unreadable file reads as an empty leaderboard.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

ANONYMOUS = "Anonymous"
SEPARATOR = ": "


@dataclass
class ScoreEntry:
    name: str
    score: int


def parse_score_line(line: str) -> Optional[ScoreEntry]:
    """Parse "<name>: <score>", returning None for malformed lines."""
    line = line.strip()
    if SEPARATOR not in line:
        return None
    name, _, raw_score = line.rpartition(SEPARATOR)
    if not name:
        return None
    try:
        score = int(raw_score)
    except ValueError:
        return None
    if score < 0:
        return None
    return ScoreEntry(name=name, score=score)


def format_leaderboard(entries: List[ScoreEntry]) -> str:
    if not entries:
        return "No scores yet."
    lines = ["Leaderboard:"]
    lines.extend(f"{entry.name}{SEPARATOR}{entry.score}" for entry in entries)
    return "\n".join(lines)


class ScoreStore:
    """Append-only score file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save_score(self, score: int, name: Optional[str] = None) -> bool:
        """
        Append one result line.

        Returns:
            True if the line was written, False if the write failed.
        """
        name = (name or "").strip() or ANONYMOUS
        line = f"{name}{SEPARATOR}{score}\n"
        try:
            if not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line)
        except OSError as exc:
            logger.error("Could not save score for %s to %s: %s", name, self.path, exc)
            return False

        logger.info("Saved score %d for %s to %s", score, name, self.path)
        return True

    def load_scores(self) -> List[ScoreEntry]:
        """Return all parseable entries sorted by score, highest first."""
        if not self.path.exists():
            return []

        try:
            with self.path.open("r", encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read scores from %s: %s", self.path, exc)
            return []

        entries: List[ScoreEntry] = []
        for lineno, line in enumerate(lines, start=1):
            entry = parse_score_line(line)
            if entry is None:
                if line.strip():
                    logger.debug("Skipping malformed score line %d: %r", lineno, line)
                continue
            entries.append(entry)

        entries.sort(key=lambda e: e.score, reverse=True)
        return entries
