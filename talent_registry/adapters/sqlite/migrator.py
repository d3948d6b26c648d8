"""
SQLite schema migrations.

Each `NNN_name.sql` file in the migrations directory is applied once, in
filename order, and recorded in `_migrations`. Only the part of a file
before its `-- Down` marker is executed.
"""

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MIGRATIONS_DIR = Path(__file__).parent / "migrations"
DOWN_MARKER = "-- Down"


def up_script(path: Path) -> str:
    return path.read_text().split(DOWN_MARKER, 1)[0]


class SQLiteMigrator:
    def __init__(self, db_path: str, migrations_dir: str | Path = DEFAULT_MIGRATIONS_DIR):
        self.db_path = db_path
        self.migrations_dir = Path(migrations_dir)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.execute(
            "CREATE TABLE IF NOT EXISTS _migrations ("
            " id INTEGER PRIMARY KEY AUTOINCREMENT,"
            " filename TEXT UNIQUE NOT NULL,"
            " applied_at DATETIME DEFAULT CURRENT_TIMESTAMP)"
        )
        return conn

    def available(self) -> list[Path]:
        return sorted(self.migrations_dir.glob("*.sql"))

    def pending_migrations(self) -> list[str]:
        """Filenames not yet recorded as applied."""
        conn = self._connect()
        try:
            applied = {row[0] for row in conn.execute("SELECT filename FROM _migrations")}
        finally:
            conn.close()
        return [path.name for path in self.available() if path.name not in applied]

    def run_migrations(self) -> list[str]:
        """Apply pending migrations. Returns the filenames applied."""
        pending = self.pending_migrations()
        conn = self._connect()
        try:
            for filename in pending:
                logger.info(f"Applying migration: {filename}")
                try:
                    conn.executescript(up_script(self.migrations_dir / filename))
                    conn.execute("INSERT INTO _migrations (filename) VALUES (?)", (filename,))
                    conn.commit()
                except sqlite3.Error as e:
                    conn.rollback()
                    raise RuntimeError(f"Migration {filename} failed: {e}") from e
        finally:
            conn.close()

        logger.info(f"{len(pending)} migration(s) applied to {self.db_path}")
        return pending
