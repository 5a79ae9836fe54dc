"""
Design (storage.py)
- Purpose: Load and save dog records to/from the local SQLite database.
- Inputs: Path (from get_db_path()), record fields for add/update, ids for update/remove.
- Outputs: list[DogRecord] on list(); rows changed from update/remove; None from add.
- Side effects: Creates/reads/writes the database file. Before initialize() every call is a
               no-op; sqlite errors during list/mutations are logged and ignored.
- Thread-safety: Call from main thread only (the monitor reads Repo snapshots, never the store).
"""

import logging
import os
import sqlite3
import sys
from pathlib import Path
from typing import List, Optional

from .config import DB_FILENAME, SEED_DOGS
from .models import DogRecord

logger = logging.getLogger(__name__)

# Exact schema text; existing databases created by earlier versions rely on it.
CREATE_TABLE_SQL = (
    "CREATE TABLE IF NOT EXISTS dogs ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "name TEXT, "
    "feedingTime TEXT"
    ");"
)
INSERT_SQL = "INSERT INTO dogs (name, feedingTime) VALUES (?, ?);"
SELECT_SQL = "SELECT id, name, feedingTime FROM dogs ORDER BY id;"
UPDATE_SQL = "UPDATE dogs SET name = ?, feedingTime = ? WHERE id = ?;"
DELETE_SQL = "DELETE FROM dogs WHERE id = ?;"


def get_db_path() -> Path:
    """
    Resolve path for dogcenter.db. Prefer app data dir so it works when installed
    (e.g. Program Files) and survives reinstalls. Fallback to dir next to executable.
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            base = Path(appdata) / "Dog Center"
            try:
                base.mkdir(parents=True, exist_ok=True)
                return base / DB_FILENAME
            except OSError:
                logger.warning("cannot create %s, falling back to app dir", base)
    # Fallback: next to executable (or project root when running as script)
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        base = Path(sys.executable).parent
    else:
        base = Path(__file__).resolve().parent.parent
    return base / DB_FILENAME


class DogStore:
    """
    Design (DogStore)
    - State:
        _path: database file path
        _conn: sqlite3.Connection once initialize() has run, else None
    - Every mutation commits before returning, so a following list() sees it.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = str(path)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_initialized(self) -> bool:
        return self._conn is not None

    # -------- Lifecycle --------

    def initialize(self) -> None:
        """
        Purpose: Open/create the database, create the dogs table if absent and seed it.
        Side effects: Seed rows are inserted only when this call created the table,
                      so running it again on an existing database adds nothing.
                      Check, CREATE and seed INSERTs share one transaction; on failure
                      the table is rolled back too, so a later call seeds again.
        Raises: sqlite3.Error (the app cannot run without its database).
        """
        if self._conn is None:
            if self._path != ":memory:":
                Path(self._path).parent.mkdir(parents=True, exist_ok=True)
            # autocommit mode: transactions are opened explicitly with BEGIN
            self._conn = sqlite3.connect(self._path, isolation_level=None)
        conn = self._conn
        conn.execute("BEGIN")
        try:
            existed = conn.execute(
                "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'dogs';"
            ).fetchone() is not None
            conn.execute(CREATE_TABLE_SQL)
            if not existed:
                conn.executemany(INSERT_SQL, SEED_DOGS)
        except sqlite3.Error:
            conn.execute("ROLLBACK")
            raise
        conn.execute("COMMIT")
        if not existed:
            logger.info("created dogs table in %s with %d seed rows", self._path, len(SEED_DOGS))
        else:
            logger.info("opened %s", self._path)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    # -------- CRUD --------

    def list(self) -> List[DogRecord]:
        """
        Purpose: Return all dogs in insertion (primary key) order.
        Outputs: list[DogRecord]; empty when not initialized or on a database error.
        """
        if self._conn is None:
            logger.debug("list() before initialize(); returning no dogs")
            return []
        try:
            rows = self._conn.execute(SELECT_SQL).fetchall()
        except sqlite3.Error:
            logger.warning("failed to read dogs from %s", self._path, exc_info=True)
            return []
        return [DogRecord(id=row[0], name=row[1], feeding_time=row[2]) for row in rows]

    def add(self, name: str, feeding_time: str) -> None:
        """Insert a dog. Callers validate first; the store stores what it is given."""
        self._write(INSERT_SQL, (name, feeding_time), "add")

    def update(self, dog_id: int, name: str, feeding_time: str) -> int:
        """Overwrite name/feedingTime of the row with dog_id. Returns rows changed (0 if absent)."""
        return self._write(UPDATE_SQL, (name, feeding_time, dog_id), "update")

    def remove(self, dog_id: int) -> int:
        """Delete the row with dog_id. Returns rows deleted (0 if absent)."""
        return self._write(DELETE_SQL, (dog_id,), "remove")

    def _write(self, sql: str, params: tuple, op: str) -> int:
        if self._conn is None:
            logger.debug("%s() before initialize(); ignored", op)
            return 0
        try:
            with self._conn:
                cur = self._conn.execute(sql, params)
        except sqlite3.Error:
            logger.warning("%s failed on %s", op, self._path, exc_info=True)
            return 0
        logger.debug("%s %r -> %d row(s)", op, params, cur.rowcount)
        return cur.rowcount
