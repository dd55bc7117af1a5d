"""
Tests for flat-file score persistence.
"""

import logging

import pytest

from snaketerm.services.score_store import (
    ANONYMOUS,
    ScoreEntry,
    ScoreStore,
    format_leaderboard,
    parse_score_line,
)


class TestParseScoreLine:
    def test_valid_line(self):
        assert parse_score_line("Alice: 12\n") == ScoreEntry("Alice", 12)

    def test_name_with_separator(self):
        """The score is taken after the last ': '."""
        assert parse_score_line("Dr: Who: 7") == ScoreEntry("Dr: Who", 7)

    @pytest.mark.parametrize("line", [
        "",
        "no separator",
        "Bob: twelve",
        ": 5",
        "Eve: -3",
        "Eve:5",
    ])
    def test_malformed_lines(self, line):
        assert parse_score_line(line) is None


class TestScoreStore:
    """Tests for ScoreStore against a temporary file."""

    def test_save_appends_lines(self, tmp_path):
        path = tmp_path / "scores.txt"
        store = ScoreStore(path)

        assert store.save_score(5, "Alice") is True
        assert store.save_score(3) is True

        assert path.read_text(encoding="utf-8") == f"Alice: 5\n{ANONYMOUS}: 3\n"

    def test_blank_name_is_anonymous(self, tmp_path):
        store = ScoreStore(tmp_path / "scores.txt")
        store.save_score(1, "   ")
        assert store.load_scores() == [ScoreEntry(ANONYMOUS, 1)]

    def test_creates_parent_directory(self, tmp_path):
        store = ScoreStore(tmp_path / "nested" / "scores.txt")
        assert store.save_score(2, "Zed") is True
        assert store.load_scores() == [ScoreEntry("Zed", 2)]

    def test_missing_file_is_empty(self, tmp_path):
        assert ScoreStore(tmp_path / "missing.txt").load_scores() == []

    def test_sorted_descending_skipping_malformed(self, tmp_path):
        path = tmp_path / "scores.txt"
        path.write_text(
            "Alice: 5\n"
            "garbage\n"
            "Bob: 12\n"
            "\n"
            "Carol: x\n"
            "Anonymous: 0\n",
            encoding="utf-8",
        )

        entries = ScoreStore(path).load_scores()

        assert [(e.name, e.score) for e in entries] == [
            ("Bob", 12),
            ("Alice", 5),
            ("Anonymous", 0),
        ]

    def test_ties_keep_file_order(self, tmp_path):
        path = tmp_path / "scores.txt"
        path.write_text("A: 3\nB: 3\nC: 3\n", encoding="utf-8")
        assert [e.name for e in ScoreStore(path).load_scores()] == ["A", "B", "C"]

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        """A directory in place of the file makes the append fail."""
        path = tmp_path / "scores.txt"
        path.mkdir()
        store = ScoreStore(path)

        with caplog.at_level(logging.ERROR, logger="snaketerm.services.score_store"):
            assert store.save_score(4, "Alice") is False

        assert "Could not save score" in caplog.text

    def test_read_failure_is_empty(self, tmp_path, caplog):
        path = tmp_path / "scores.txt"
        path.mkdir()

        with caplog.at_level(logging.WARNING, logger="snaketerm.services.score_store"):
            assert ScoreStore(path).load_scores() == []

        assert "Failed to read scores" in caplog.text


class TestFormatLeaderboard:
    def test_empty(self):
        assert format_leaderboard([]) == "No scores yet."

    def test_entries(self):
        text = format_leaderboard([ScoreEntry("Bob", 12), ScoreEntry("Alice", 5)])
        assert text == "Leaderboard:\nBob: 12\nAlice: 5"
