"""SQLite-backed record store for extracted profiles.

Reference implementation of the ``save(profile) -> record_id`` collaborator
the pipeline hands its results to.  Profiles are stored whole, as JSON.

Usage::

    from brandprint.store import SqliteProfileStore, get_connection, init_store

    conn = get_connection(Path("profiles.db"))
    init_store(conn)
    record_id = SqliteProfileStore(conn).save(profile)
"""

from __future__ import annotations

import json
import sqlite3
import uuid
from pathlib import Path
from time import time
from typing import Any, Optional, Union

from brandprint.models import ExtractedProfile

_SCHEMA = """
CREATE TABLE IF NOT EXISTS profiles (
    id           TEXT PRIMARY KEY,
    source_url   TEXT NOT NULL,
    title        TEXT NOT NULL DEFAULT '',
    payload      TEXT NOT NULL,
    extracted_at TEXT NOT NULL,
    created_at   INTEGER NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_profiles_source_url ON profiles (source_url);
"""


def get_connection(db_path: Union[Path, str]) -> sqlite3.Connection:
    """Open a SQLite connection with ``row_factory`` set to :class:`sqlite3.Row`.

    Args:
        db_path: Database file, or ``":memory:"``.  The extraction engine
            has no storage settings; the caller owns the location.
    """
    # Create parent directory if needed (no-op for `:memory:`)
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_store(conn: sqlite3.Connection) -> None:
    """Create the ``profiles`` table.  Idempotent."""
    conn.executescript(_SCHEMA)


class SqliteProfileStore:
    """Persist :class:`ExtractedProfile` records in a ``profiles`` table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def save(self, profile: ExtractedProfile) -> str:
        """Insert *profile* and return its new record id (a UUID string)."""
        record_id = str(uuid.uuid4())
        with self._conn:
            self._conn.execute(
                """
                INSERT INTO profiles (id, source_url, title, payload, extracted_at, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    record_id,
                    profile.source_url,
                    profile.title,
                    json.dumps(profile.to_dict()),
                    profile.extracted_at.isoformat(),
                    int(time()),
                ),
            )
        return record_id

    def get(self, record_id: str) -> Optional[dict[str, Any]]:
        """Return the stored profile payload, or ``None`` if not found."""
        row = self._conn.execute(
            "SELECT payload FROM profiles WHERE id = ?", (record_id,)
        ).fetchone()
        return json.loads(row["payload"]) if row else None

    def list_for_url(self, source_url: str) -> list[str]:
        """Record ids stored for *source_url*, newest first."""
        rows = self._conn.execute(
            "SELECT id FROM profiles WHERE source_url = ? ORDER BY created_at DESC, rowid DESC",
            (source_url,),
        ).fetchall()
        return [row["id"] for row in rows]
