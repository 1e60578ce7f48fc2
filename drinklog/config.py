"""TOML configuration loader."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from .units import TimePeriod

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DEFAULT_DB_PATH = "~/.config/drinklog/drinks.db"


@dataclass
class DatabaseConfig:
    path: str = DEFAULT_DB_PATH
    person_id: int = 1


@dataclass
class ImportConfig:
    start_date: date = date(2018, 1, 1)
    start_time: TimePeriod = TimePeriod.EVENING


@dataclass
class DrinkLogConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    importer: ImportConfig = field(default_factory=ImportConfig)


def _parse_start_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValueError(f"invalid import.start_date: {value!r}") from None


def _parse_start_time(value: str) -> TimePeriod:
    period = TimePeriod.from_str(value)
    if period is None:
        raise ValueError(
            f"invalid import.start_time: {value!r} "
            f"(choose from {', '.join(p.value for p in TimePeriod)})"
        )
    return period


def load_config(path: str | Path | None = None) -> DrinkLogConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    ``DRINKLOG_DB`` supplies the database path when the file doesn't.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    db = raw.get("database", {})
    imp = raw.get("import", {})

    # Resolve database path: config file → environment variable → default
    db_path = (
        db.get("path", "")
        or os.environ.get("DRINKLOG_DB", "")
        or DEFAULT_DB_PATH
    )

    return DrinkLogConfig(
        database=DatabaseConfig(
            path=db_path,
            person_id=db.get("person_id", 1),
        ),
        importer=ImportConfig(
            start_date=_parse_start_date(imp.get("start_date", "2018-01-01")),
            start_time=_parse_start_time(imp.get("start_time", "evening")),
        ),
    )
