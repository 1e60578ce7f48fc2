"""SQLite storage for the drink catalog and logged entries."""

from .drinks import DrinkDB
from .entries import EntryDB
from .schema import ensure_schema

__all__ = [
    "DrinkDB",
    "EntryDB",
    "ensure_schema",
]
