"""Drink catalog storage."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from ..config import DEFAULT_DB_PATH
from ..parsing.abv import AbvRange
from ..registry import DrinkIdentity
from ..units import ApproxValue
from .schema import ensure_schema


def approx_from_row(row: sqlite3.Row, column: str) -> ApproxValue | None:
    """Rebuild an ApproxValue from a ``column`` / ``column_approx`` pair."""
    if row[column] is None:
        return None
    return ApproxValue(row[column], bool(row[f"{column}_approx"]))


def approx_columns(value: ApproxValue | None) -> tuple[float | None, int | None]:
    if value is None:
        return (None, None)
    return (value.magnitude, int(value.is_approximate))


def drink_from_row(row: sqlite3.Row) -> DrinkIdentity:
    min_abv = approx_from_row(row, "min_abv")
    max_abv = approx_from_row(row, "max_abv")
    abv = None
    if min_abv is not None and max_abv is not None:
        abv = AbvRange(min=min_abv, max=max_abv)
    return DrinkIdentity(name=row["name"], abv=abv, multiplier=row["multiplier"])


class DrinkDB:
    """Manages the drink table."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH) -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = ensure_schema(self._db_path)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def create_drink(self, drink: DrinkIdentity) -> int:
        """Insert a new drink.

        Returns:
            The inserted row ID.
        """
        conn = self._get_conn()
        min_abv = drink.abv.min if drink.abv else None
        max_abv = drink.abv.max if drink.abv else None
        cur = conn.execute(
            """INSERT INTO drink
               (name, normalized_name, min_abv, min_abv_approx,
                max_abv, max_abv_approx, multiplier)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (drink.name, drink.normalized_name,
             *approx_columns(min_abv), *approx_columns(max_abv),
             drink.multiplier),
        )
        conn.commit()
        return cur.lastrowid

    def get_drink(self, drink_id: int) -> DrinkIdentity | None:
        conn = self._get_conn()
        row = conn.execute("SELECT * FROM drink WHERE id = ?", (drink_id,)).fetchone()
        return drink_from_row(row) if row else None

    def find_drink(self, drink: DrinkIdentity) -> int | None:
        """Return the id of a stored drink equal to ``drink``, if any.

        Names match case-insensitively; ABV matches to the hundredth.
        """
        conn = self._get_conn()
        rows = conn.execute(
            "SELECT * FROM drink WHERE normalized_name = ? ORDER BY id",
            (drink.normalized_name,),
        ).fetchall()
        for row in rows:
            if drink_from_row(row) == drink:
                return row["id"]
        return None

    def get_or_create_drink(self, drink: DrinkIdentity) -> int:
        drink_id = self.find_drink(drink)
        if drink_id is None:
            drink_id = self.create_drink(drink)
        return drink_id

    def list_drinks(self) -> list[tuple[int, DrinkIdentity]]:
        conn = self._get_conn()
        rows = conn.execute("SELECT * FROM drink ORDER BY id").fetchall()
        return [(row["id"], drink_from_row(row)) for row in rows]
