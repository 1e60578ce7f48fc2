"""Database schema definitions and migration helpers."""

from __future__ import annotations

import sqlite3
from pathlib import Path

_SCHEMA_VERSION = 1

# Approximate values are stored as (value, is_approximate) column pairs and
# volumes as (amount, is_approximate, unit) triples.
_DDL = """
CREATE TABLE IF NOT EXISTS person (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    created_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime')),
    updated_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime'))
);

CREATE TABLE IF NOT EXISTS drink (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    normalized_name TEXT NOT NULL,
    min_abv REAL,
    min_abv_approx INTEGER,
    max_abv REAL,
    max_abv_approx INTEGER,
    multiplier REAL NOT NULL DEFAULT 1.0,
    created_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime')),
    updated_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime')),
    UNIQUE (normalized_name, min_abv, min_abv_approx, max_abv, max_abv_approx)
);

CREATE INDEX IF NOT EXISTS idx_drink_normalized_name ON drink(normalized_name);

CREATE TABLE IF NOT EXISTS entry (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    person_id INTEGER NOT NULL REFERENCES person(id) ON DELETE CASCADE,
    drank_on TEXT NOT NULL,
    time_period TEXT NOT NULL
        CHECK (time_period IN ('morning', 'afternoon', 'evening', 'night')),
    context TEXT NOT NULL DEFAULT '[]',
    drink_id INTEGER NOT NULL REFERENCES drink(id),
    min_quantity REAL NOT NULL,
    min_quantity_approx INTEGER NOT NULL,
    max_quantity REAL NOT NULL,
    max_quantity_approx INTEGER NOT NULL,
    volume REAL,
    volume_approx INTEGER,
    volume_unit TEXT CHECK (volume_unit IN ('fl oz', 'mL', 'cL', 'L')),
    volume_ml REAL,
    volume_ml_approx INTEGER,
    created_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime')),
    updated_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime'))
);

CREATE INDEX IF NOT EXISTS idx_entry_person_drink_date
    ON entry(person_id, drink_id, drank_on);

CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER NOT NULL
);
"""


def ensure_schema(db_path: str | Path) -> sqlite3.Connection:
    """Open (or create) the database and ensure the schema is up to date.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        An open sqlite3.Connection with the schema applied.
    """
    db_path = Path(db_path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")

    # Check current schema version
    try:
        row = conn.execute("SELECT version FROM schema_version").fetchone()
        current_version = row["version"] if row else 0
    except sqlite3.OperationalError:
        current_version = 0

    if current_version < _SCHEMA_VERSION:
        conn.executescript(_DDL)
        conn.execute("DELETE FROM schema_version")
        conn.execute(
            "INSERT INTO schema_version (version) VALUES (?)",
            (_SCHEMA_VERSION,),
        )
        conn.commit()

    return conn


def ensure_person(conn: sqlite3.Connection, person_id: int) -> None:
    """Create the person row if it does not exist yet."""
    conn.execute("INSERT OR IGNORE INTO person (id) VALUES (?)", (person_id,))
    conn.commit()
