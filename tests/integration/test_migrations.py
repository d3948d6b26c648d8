import sqlite3

import pytest

from talent_registry.adapters.sqlite.migrator import SQLiteMigrator


def _tables(db_path):
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    finally:
        conn.close()
    return {row[0] for row in rows}


def test_migrations_create_schema(tmp_path):
    db_path = str(tmp_path / "talent.db")

    applied = SQLiteMigrator(db_path).run_migrations()

    assert applied == ["001_talent_records.sql"]
    assert {"_migrations", "talent_records"} <= _tables(db_path)


def test_migrations_are_idempotent(tmp_path):
    db_path = str(tmp_path / "talent.db")
    migrator = SQLiteMigrator(db_path)
    migrator.run_migrations()

    assert migrator.run_migrations() == []


def test_down_section_is_ignored(tmp_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "001_demo.sql").write_text(
        "-- Up\nCREATE TABLE demo (id INTEGER);\n\n-- Down\nDROP TABLE demo;\n"
    )
    db_path = str(tmp_path / "demo.db")

    SQLiteMigrator(db_path, str(migrations)).run_migrations()

    assert "demo" in _tables(db_path)


def test_failed_migration_raises(tmp_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "001_broken.sql").write_text("CREATE TABLE (;\n")

    migrator = SQLiteMigrator(str(tmp_path / "broken.db"), str(migrations))

    with pytest.raises(RuntimeError, match="001_broken.sql"):
        migrator.run_migrations()


def test_pending_migrations(tmp_path):
    migrator = SQLiteMigrator(str(tmp_path / "talent.db"))

    assert migrator.pending_migrations() == ["001_talent_records.sql"]
    migrator.run_migrations()
    assert migrator.pending_migrations() == []
