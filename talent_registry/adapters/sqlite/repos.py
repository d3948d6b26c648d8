import json
import sqlite3
from datetime import UTC, datetime
from typing import Any

from talent_registry.domain.entities import Identity, TalentRecord


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteTalentStore:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def put(self, identity: Identity, record: TalentRecord) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO talent_records (
                    identity, personal_identifier, base_region,
                    expertise_json, weekly_capacity, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(identity) DO UPDATE SET
                    personal_identifier=excluded.personal_identifier,
                    base_region=excluded.base_region,
                    expertise_json=excluded.expertise_json,
                    weekly_capacity=excluded.weekly_capacity,
                    updated_at=excluded.updated_at
            """,
                (
                    identity,
                    record.personal_identifier,
                    record.base_region,
                    json.dumps(list(record.expertise_areas)),
                    record.weekly_capacity,
                    datetime.now(UTC).isoformat(),
                ),
            )
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get(self, identity: Identity) -> TalentRecord | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM talent_records WHERE identity = ?", (identity,)
            ).fetchone()
            if not row:
                return None
            return TalentRecord(
                personal_identifier=row["personal_identifier"],
                base_region=row["base_region"],
                expertise_areas=tuple(json.loads(row["expertise_json"])),
                weekly_capacity=row["weekly_capacity"],
            )
        finally:
            conn.close()

    def contains(self, identity: Identity) -> bool:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT 1 AS found FROM talent_records WHERE identity = ?", (identity,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()
