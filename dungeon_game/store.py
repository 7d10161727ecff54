"""
Player record store.

Players are saved by name to a small SQLite database. Every call opens its
own connection and closes it before returning. Database errors never reach
the game: a failed load reads as "no saved player" and a failed save is
skipped, both with a logged warning.
"""

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from .power import STARTING_POWER

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = 1


@dataclass
class PlayerRecord:
    """
    A saved player. `inventory` is the comma-joined item names.

    `relic_found` stays set after the Relic is spent on the Guardian, so it
    is not offered again on resume.
    """

    name: str
    current_level: int = DEFAULT_LEVEL
    power_points: int = STARTING_POWER
    current_room: str = ""
    inventory: str = ""
    relic_found: bool = False


class PlayerStore:
    """SQLite-backed player records, keyed by player name."""

    def __init__(self, db_path: Union[str, Path] = "game.db", level_count: int = 3) -> None:
        self.db_path = db_path if str(db_path) == ":memory:" else Path(db_path)
        self.level_count = level_count
        self._memory_conn: Optional[sqlite3.Connection] = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        if str(self.db_path) == ":memory:":
            # In-memory databases vanish with their connection, so keep one
            if self._memory_conn is None:
                self._memory_conn = sqlite3.connect(":memory:")
            return self._memory_conn
        return sqlite3.connect(str(self.db_path))

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        conn = self._get_connection()
        try:
            yield conn
        finally:
            if conn is not self._memory_conn:
                conn.close()

    def create_table(self) -> bool:
        try:
            with self._connection() as conn, conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS users (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        name TEXT NOT NULL UNIQUE,
                        current_level INTEGER,
                        power_points INTEGER,
                        current_room TEXT,
                        inventory TEXT,
                        relic_found INTEGER NOT NULL DEFAULT 0
                    )
                """)
                columns = {row[1] for row in conn.execute("PRAGMA table_info(users)")}
                if "relic_found" not in columns:
                    # Tables created before the flag was saved
                    conn.execute(
                        "ALTER TABLE users ADD COLUMN relic_found INTEGER NOT NULL DEFAULT 0"
                    )
            return True
        except sqlite3.Error as e:
            logger.error("Could not create the users table in %s: %s", self.db_path, e)
            return False

    def load(self, name: str) -> Optional[PlayerRecord]:
        """
        Load a player by name.

        Levels outside 1..level_count are reset to level 1.
        Returns None if there is no such player or the database can't be read.
        """
        try:
            with self._connection() as conn:
                row = conn.execute(
                    "SELECT name, current_level, power_points, current_room, inventory, relic_found "
                    "FROM users WHERE name = ?",
                    (name,),
                ).fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not load player %r, starting fresh: %s", name, e)
            return None

        if row is None:
            logger.info("No saved player named %r", name)
            return None

        saved_name, level, points, room, inventory, relic_found = row
        if level is None or not 1 <= level <= self.level_count:
            logger.warning(
                "Player %r has invalid saved level %r, resetting to level %d",
                name,
                level,
                DEFAULT_LEVEL,
            )
            level = DEFAULT_LEVEL

        logger.info("Loaded player %r at level %d", saved_name, level)
        return PlayerRecord(
            name=saved_name,
            current_level=level,
            power_points=STARTING_POWER if points is None else points,
            current_room=room or "",
            inventory=inventory or "",
            relic_found=bool(relic_found),
        )

    def save(self, record: PlayerRecord) -> bool:
        """Insert or update a player. Returns False if the save was skipped."""
        values = (
            record.current_level,
            record.power_points,
            record.current_room,
            record.inventory,
            int(record.relic_found),
            record.name,
        )
        try:
            with self._connection() as conn, conn:
                updated = conn.execute(
                    "UPDATE users SET current_level = ?, power_points = ?, "
                    "current_room = ?, inventory = ?, relic_found = ? WHERE name = ?",
                    values,
                ).rowcount
                if not updated:
                    conn.execute(
                        "INSERT INTO users(current_level, power_points, current_room, inventory, "
                        "relic_found, name) VALUES(?, ?, ?, ?, ?, ?)",
                        values,
                    )
        except sqlite3.Error as e:
            logger.warning("Could not save player %r, save skipped: %s", record.name, e)
            return False

        logger.info("Saved player %r at level %d", record.name, record.current_level)
        return True
