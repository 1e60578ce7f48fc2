"""Split a raw log line into its comma-delimited fields.

A line looks like::

    (5 jan, brunch) ~2, Mimosa, 12%, 6 oz

The parenthesized date/context block is optional, and so are the trailing
ABV and volume fields. A comma inside a field can be escaped as ``\\,``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import TokenizeError

_FIELD = r"(?:\\.|[^,\\])*"

_LINE_PATTERN = re.compile(
    r"^(?:\((?P<date>[^)]*)\))?\s*,?"
    rf"(?P<quantity>{_FIELD}),"
    rf"(?P<name>{_FIELD})"
    rf"(?:,(?P<abv>{_FIELD})"
    rf"(?:,(?P<volume>{_FIELD}))?)?$"
)

_ESCAPE = re.compile(r"\\(.)")


@dataclass(frozen=True)
class RawEntry:
    """The untyped fields of one log line, trimmed; ``None`` when absent."""

    date: str | None
    quantity: str | None
    name: str | None
    abv: str | None = None
    volume: str | None = None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return _ESCAPE.sub(r"\1", value.strip())


def tokenize_line(line: str) -> RawEntry:
    """Tokenize one log line.

    Raises:
        TokenizeError: If the line does not match the entry grammar.
    """
    m = _LINE_PATTERN.match(line.strip())
    if m is None:
        raise TokenizeError(line)
    return RawEntry(
        date=_clean(m.group("date")),
        quantity=_clean(m.group("quantity")),
        name=_clean(m.group("name")),
        abv=_clean(m.group("abv")),
        volume=_clean(m.group("volume")),
    )
