"""
highscores.py: SQLite persistence for the top-five high score table.

Storage problems never reach the game: reads fall back to the default
table and writes report False.
"""

import logging
import sqlite3
from dataclasses import dataclass
from typing import List, Optional

from .constants import DB_FILE, DEFAULT_HIGH_SCORES, MAX_HIGH_SCORES, MAX_INITIALS
from .data_models import HighScore

logger = logging.getLogger(__name__)


def default_high_scores() -> List[HighScore]:
    return [HighScore(score, initials) for score, initials in DEFAULT_HIGH_SCORES]


@dataclass
class ScoreRow:
    """One line of the game-over score list."""
    score: Optional[int]
    initials: str
    highlighted: bool = False
    ellipsis: bool = False


class HighScoreStore:
    """Handles all interaction with the SQLite high score table."""

    def __init__(self, db_file: str = DB_FILE):
        self.db_file = str(db_file)
        self.conn: Optional[sqlite3.Connection] = None
        try:
            self.conn = sqlite3.connect(self.db_file)
            self.setup()
        except sqlite3.Error as e:
            logger.error(f"High score storage unavailable ({self.db_file}): {e}")
            self.close()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS HighScores (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                score INTEGER NOT NULL,
                initials TEXT NOT NULL DEFAULT ''
            )
        """)
        self.conn.commit()

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def _read(self) -> List[HighScore]:
        rows = self.conn.execute(
            "SELECT score, initials FROM HighScores ORDER BY score DESC, id ASC"
        ).fetchall()
        return [HighScore(int(score), str(initials)) for score, initials in rows]

    def _write(self, scores: List[HighScore]):
        with self.conn:
            self.conn.execute("DELETE FROM HighScores")
            self.conn.executemany(
                "INSERT INTO HighScores (score, initials) VALUES (?, ?)",
                [(s.score, s.initials) for s in scores],
            )

    def get_high_scores(self) -> List[HighScore]:
        """Returns the stored table, seeding the defaults on first run."""
        if self.conn is None:
            return default_high_scores()

        try:
            scores = self._read()
            if scores:
                return scores
        except (sqlite3.Error, ValueError, TypeError) as e:
            logger.warning(f"Error reading high scores: {e}")
            return default_high_scores()

        defaults = default_high_scores()
        try:
            self._write(defaults)
        except sqlite3.Error as e:
            logger.warning(f"Error saving default high scores: {e}")
        return defaults

    def get_top_score(self) -> HighScore:
        scores = self.get_high_scores()
        return scores[0] if scores else HighScore(0, "")

    def save_high_score(self, score: int, initials: str) -> bool:
        """Adds a score, keeping only the best five. Returns False on storage failure."""
        if self.conn is None:
            logger.warning("High score not saved: storage unavailable")
            return False

        scores = self.get_high_scores()
        scores.append(HighScore(score, (initials or "")[:MAX_INITIALS]))
        # sort is stable: an earlier entry wins a tie
        scores.sort(key=lambda s: s.score, reverse=True)
        try:
            self._write(scores[:MAX_HIGH_SCORES])
            return True
        except sqlite3.Error as e:
            logger.error(f"Error saving high score: {e}")
            return False

    def is_new_high_score(self, score: int) -> bool:
        scores = self.get_high_scores()
        return len(scores) < MAX_HIGH_SCORES or score > scores[-1].score

    def scoreboard(self, player_score: int, player_initials: str) -> List[ScoreRow]:
        """
        Rows for the game-over list. The player's own entry is highlighted;
        if they did not make the list, it is appended after an ellipsis.
        """
        scores = self.get_high_scores()
        player_index = next(
            (i for i, s in enumerate(scores)
             if s.score == player_score and s.initials == player_initials),
            None,
        )

        rows = [
            ScoreRow(s.score, s.initials, highlighted=(i == player_index))
            for i, s in enumerate(scores)
        ]
        if player_index is None and player_score > 0:
            rows.append(ScoreRow(None, "...", ellipsis=True))
            rows.append(ScoreRow(player_score, player_initials or "You", highlighted=True))
        return rows
