"""
score_store.py: Persistence layer for the best score.
Failures are logged and ignored: losing a best score is not worth a crash.
"""

import logging
import sqlite3

from .constants import DB_FILE

logger = logging.getLogger(__name__)

BEST_KEY = "best"


class ScoreStore:
    """Key-value store for the best score."""

    def load(self) -> int:
        raise NotImplementedError

    def save(self, best: int):
        raise NotImplementedError


class MemoryScoreStore(ScoreStore):
    """Keeps the best score for the lifetime of the process only."""

    def __init__(self, best: int = 0):
        self.best = best
        self.saves = []

    def load(self) -> int:
        return self.best

    def save(self, best: int):
        self.saves.append(best)
        self.best = best


class SqliteScoreStore(ScoreStore):
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE):
        self.db_file = db_file
        self.conn = None
        try:
            self.conn = sqlite3.connect(db_file)
            self.setup()
        except sqlite3.Error as e:
            logger.warning("Score store %s unavailable, best score will not persist: %s", db_file, e)
            self.conn = None

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                key TEXT PRIMARY KEY,
                value INTEGER DEFAULT 0
            )
        """)
        self.conn.commit()

    def load(self) -> int:
        """Fetches the stored best score, 0 if there is none."""
        if self.conn is None:
            return 0
        try:
            row = self.conn.execute(
                "SELECT value FROM Scores WHERE key=?", (BEST_KEY,)).fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read best score: %s", e)
            return 0
        return int(row[0]) if row else 0

    def save(self, best: int):
        """Stores the best score. Never lowers an existing value."""
        if self.conn is None:
            return
        try:
            self.conn.execute("""
                INSERT INTO Scores (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = MAX(value, excluded.value)
            """, (BEST_KEY, int(best)))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not save best score %d: %s", best, e)

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None
