"""Line-by-line import of a drink log.

Field parsing is a pure function of each line. Date context and drink
identity resolution depend on every earlier line, so they run in order
inside an :class:`ImportRun`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from .errors import LineError
from .parsing.abv import parse_abv
from .parsing.dates import DateContext, resolve_date_context
from .parsing.quantity import QuantityRange, parse_quantity
from .parsing.tokenizer import RawEntry, tokenize_line
from .parsing.volume import ParsedVolume, parse_volume
from .registry import DrinkIdentity, DrinkRegistry
from .reports import ResolvedEntry

logger = logging.getLogger(__name__)


class DrinkStore(Protocol):
    def get_or_create_drink(self, drink: DrinkIdentity) -> int: ...


class EntryStore(Protocol):
    def add_entry(self, entry: ResolvedEntry) -> int: ...


@dataclass
class ParsedFields:
    quantity: QuantityRange
    drink: DrinkIdentity
    volume: ParsedVolume | None


def parse_fields(raw: RawEntry) -> ParsedFields:
    """Parse the quantity, drink and volume fields of a tokenized line.

    Raises:
        LineError: If any field is missing or malformed.
    """
    quantity = parse_quantity(raw.quantity)
    drink = DrinkIdentity.from_fields(raw.name, parse_abv(raw.abv))
    volume = parse_volume(raw.volume)
    return ParsedFields(quantity=quantity, drink=drink, volume=volume)


@dataclass
class SkippedLine:
    line_no: int
    line: str
    reason: str


@dataclass
class ImportSummary:
    lines_read: int = 0
    imported: list[ResolvedEntry] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)
    drinks_registered: int = 0


class ImportRun:
    """State carried from one line to the next during an import.

    Args:
        drinks: Assigns ids to drinks not yet seen in this run.
        entries: Persists each resolved entry. ``None`` for a dry run.
        start: Context used as the "previous line" of the first line.
    """

    def __init__(
        self,
        drinks: DrinkStore,
        entries: EntryStore | None = None,
        start: DateContext | None = None,
    ) -> None:
        self._drinks = drinks
        self._entries = entries
        self.previous = start or DateContext.seed()
        self.registry = DrinkRegistry()
        self.summary = ImportSummary()

    def _drink_id(self, drink: DrinkIdentity) -> int:
        drink_id = self.registry.find(drink)
        if drink_id is None:
            drink_id = self.registry.insert(self._drinks.get_or_create_drink(drink), drink)
            self.summary.drinks_registered += 1
            logger.debug("Registered drink %d: %s", drink_id, drink.name)
        return drink_id

    def feed(self, line: str, line_no: int = 0) -> ResolvedEntry | None:
        """Import one line.

        Returns ``None`` when the line is blank or skipped for a per-line
        parse error. Date context and registry errors propagate.
        """
        if not line.strip():
            return None
        self.summary.lines_read += 1

        try:
            raw = tokenize_line(line)
        except LineError as e:
            self._skip(line_no, line, e)
            return None

        # The date block still applies to later lines even if the fields fail.
        context = resolve_date_context(raw.date, self.previous)
        self.previous = context

        try:
            fields = parse_fields(raw)
        except LineError as e:
            self._skip(line_no, line, e)
            return None

        entry = ResolvedEntry(
            context=context,
            quantity=fields.quantity,
            drink_id=self._drink_id(fields.drink),
            drink=fields.drink,
            volume=fields.volume,
        )
        if self._entries is not None:
            entry.id = self._entries.add_entry(entry)
        self.summary.imported.append(entry)
        return entry

    def run(self, lines: Iterable[str]) -> ImportSummary:
        for line_no, line in enumerate(lines, start=1):
            self.feed(line, line_no)
        logger.info(
            "Imported %d of %d lines (%d skipped, %d new drinks)",
            len(self.summary.imported),
            self.summary.lines_read,
            len(self.summary.skipped),
            self.summary.drinks_registered,
        )
        return self.summary

    def _skip(self, line_no: int, line: str, error: LineError) -> None:
        logger.warning("Skipping line %d: %s (%r)", line_no, error, line.strip())
        self.summary.skipped.append(SkippedLine(line_no, line.strip(), str(error)))
