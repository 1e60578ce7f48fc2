"""Entry logging from already-split form fields.

This is what a web front end calls: the date arrives structurally, so the
line tokenizer and date context inference are bypassed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from .db import DrinkDB, EntryDB
from .errors import EntryInputError, LineError
from .parsing.abv import parse_abv
from .parsing.dates import DateContext
from .parsing.quantity import parse_quantity
from .parsing.volume import parse_volume
from .registry import DrinkIdentity
from .reports import DrinkAggregate, ResolvedEntry, aggregate
from .units import TimePeriod

logger = logging.getLogger(__name__)


@dataclass
class EntryForm:
    drank_on: date
    time_period: str
    quantity: str
    name: str
    abv: str | None = None
    volume: str | None = None


@dataclass
class AggregatedEntry:
    entry: ResolvedEntry
    aggregate: DrinkAggregate

    @classmethod
    def of(cls, entry: ResolvedEntry) -> AggregatedEntry:
        return cls(entry=entry, aggregate=aggregate(entry))

    def as_dict(self) -> dict:
        return {"entry": self.entry.as_dict(), "aggregate": self.aggregate.as_dict()}


class DrinkLogService:
    """Create and list entries for one person."""

    def __init__(self, drinks: DrinkDB, entries: EntryDB) -> None:
        self._drinks = drinks
        self._entries = entries

    def new_entry(self, form: EntryForm) -> AggregatedEntry:
        """Validate a form, store the entry and return it with its aggregate.

        Raises:
            EntryInputError: If any field is invalid.
        """
        time_period = TimePeriod.from_str(form.time_period)
        if time_period is None:
            logger.info("Received invalid time period input, %r", form.time_period)
            raise EntryInputError("Invalid time period value!")

        try:
            quantity = parse_quantity(form.quantity)
        except LineError as e:
            logger.info("Received invalid quantity input, %r", form.quantity)
            raise EntryInputError("Invalid quantity value!") from e

        try:
            abv = parse_abv(form.abv)
        except LineError as e:
            logger.info("Received invalid ABV input, %r", form.abv)
            raise EntryInputError("Invalid ABV value!") from e

        try:
            volume = parse_volume(form.volume)
        except LineError as e:
            logger.info("Received invalid Volume input, %r", form.volume)
            raise EntryInputError("Invalid Volume value!") from e

        try:
            drink = DrinkIdentity.from_fields(form.name, abv)
        except LineError as e:
            raise EntryInputError("Entry name can not be empty!") from e

        entry = ResolvedEntry(
            context=DateContext(date=form.drank_on, time=time_period, context=()),
            quantity=quantity,
            drink_id=self._drinks.get_or_create_drink(drink),
            drink=drink,
            volume=volume,
        )
        entry_id = self._entries.add_entry(entry)

        stored = self._entries.get_entry(entry_id)
        if stored is None:
            raise RuntimeError(f"entry {entry_id} was created but could not be read back")
        return AggregatedEntry.of(stored)

    def get_entries(
        self, date_range: tuple[date, date] | None = None
    ) -> list[AggregatedEntry]:
        return [AggregatedEntry.of(e) for e in self._entries.get_entries(date_range)]

    def get_entries_by_date(self, day: date) -> list[AggregatedEntry]:
        return self.get_entries((day, day))
