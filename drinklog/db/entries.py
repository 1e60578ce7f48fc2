"""Entry storage; rows are read back joined with their drink."""

from __future__ import annotations

import json
import sqlite3
from datetime import date
from pathlib import Path

from ..config import DEFAULT_DB_PATH
from ..parsing.dates import DateContext
from ..parsing.quantity import QuantityRange
from ..parsing.volume import ParsedVolume
from ..reports import ResolvedEntry
from ..units import LiquidVolume, TimePeriod, VolumeUnit
from .drinks import approx_columns, approx_from_row, drink_from_row
from .schema import ensure_person, ensure_schema

_SELECT = """
SELECT entry.*, drink.name, drink.min_abv, drink.min_abv_approx,
       drink.max_abv, drink.max_abv_approx, drink.multiplier
FROM entry INNER JOIN drink ON drink.id = entry.drink_id
"""

_TIME_ORDER = (
    "CASE entry.time_period "
    + " ".join(f"WHEN '{p.value}' THEN {p.order}" for p in TimePeriod)
    + " END"
)


def _volume_from_row(row: sqlite3.Row) -> ParsedVolume | None:
    amount = approx_from_row(row, "volume")
    amount_ml = approx_from_row(row, "volume_ml")
    if amount is None or amount_ml is None:
        return None
    return ParsedVolume(
        volume=LiquidVolume(amount=amount, unit=VolumeUnit(row["volume_unit"])),
        volume_ml=LiquidVolume(amount=amount_ml, unit=VolumeUnit.ML),
    )


def entry_from_row(row: sqlite3.Row) -> ResolvedEntry:
    return ResolvedEntry(
        id=row["id"],
        context=DateContext(
            date=date.fromisoformat(row["drank_on"]),
            time=TimePeriod(row["time_period"]),
            context=tuple(json.loads(row["context"])),
        ),
        quantity=QuantityRange(
            min=approx_from_row(row, "min_quantity"),
            max=approx_from_row(row, "max_quantity"),
        ),
        drink_id=row["drink_id"],
        drink=drink_from_row(row),
        volume=_volume_from_row(row),
    )


class EntryDB:
    """Manages the entry table for a single person."""

    def __init__(
        self,
        db_path: str | Path = DEFAULT_DB_PATH,
        person_id: int = 1,
    ) -> None:
        self._db_path = db_path
        self._person_id = person_id
        self._conn: sqlite3.Connection | None = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = ensure_schema(self._db_path)
            ensure_person(self._conn, self._person_id)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def add_entry(self, entry: ResolvedEntry) -> int:
        """Insert an entry for its drink id.

        Returns:
            The inserted row ID.
        """
        conn = self._get_conn()
        volume = entry.volume
        cur = conn.execute(
            """INSERT INTO entry
               (person_id, drank_on, time_period, context, drink_id,
                min_quantity, min_quantity_approx, max_quantity, max_quantity_approx,
                volume, volume_approx, volume_unit, volume_ml, volume_ml_approx)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                self._person_id,
                entry.context.date.isoformat(),
                entry.context.time.value,
                json.dumps(list(entry.context.context), ensure_ascii=False),
                entry.drink_id,
                *approx_columns(entry.quantity.min),
                *approx_columns(entry.quantity.max),
                *approx_columns(volume.volume.amount if volume else None),
                volume.volume.unit.value if volume else None,
                *approx_columns(volume.volume_ml.amount if volume else None),
            ),
        )
        conn.commit()
        return cur.lastrowid

    def get_entry(self, entry_id: int) -> ResolvedEntry | None:
        conn = self._get_conn()
        row = conn.execute(
            _SELECT + " WHERE entry.person_id = ? AND entry.id = ?",
            (self._person_id, entry_id),
        ).fetchone()
        return entry_from_row(row) if row else None

    def get_entries(
        self, date_range: tuple[date, date] | None = None
    ) -> list[ResolvedEntry]:
        """Return entries, newest day first, optionally within an inclusive range."""
        conn = self._get_conn()
        sql = _SELECT + " WHERE entry.person_id = ?"
        params: list = [self._person_id]
        if date_range is not None:
            start, end = date_range
            sql += " AND entry.drank_on >= ? AND entry.drank_on <= ?"
            params += [start.isoformat(), end.isoformat()]
        sql += f" ORDER BY entry.drank_on DESC, {_TIME_ORDER}, entry.id"
        rows = conn.execute(sql, params).fetchall()
        return [entry_from_row(r) for r in rows]

    def update_entry(self, entry: ResolvedEntry) -> None:
        """Save an edited entry's time period and quantities."""
        conn = self._get_conn()
        conn.execute(
            """UPDATE entry
               SET time_period = ?,
                   min_quantity = ?, min_quantity_approx = ?,
                   max_quantity = ?, max_quantity_approx = ?,
                   updated_at = datetime('now', 'localtime')
               WHERE id = ?""",
            (
                entry.context.time.value,
                *approx_columns(entry.quantity.min),
                *approx_columns(entry.quantity.max),
                entry.id,
            ),
        )
        conn.commit()

    def delete_entry(self, entry_id: int) -> None:
        conn = self._get_conn()
        conn.execute("DELETE FROM entry WHERE id = ?", (entry_id,))
        conn.commit()
