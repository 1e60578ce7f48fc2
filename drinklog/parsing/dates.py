"""Date/time-period context resolution.

Each line's parenthesized block (``"5 jan, brunch"``, ``"oct 1; party"``,
``"night"``) is resolved against the context of the previous line, so a
drinking session only needs annotating on its first line. The year is never
written; it is inferred from the previous line, rolling over at New Year.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date

from ..errors import DateContextError
from ..units import TimePeriod

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun",
           "jul", "aug", "sep", "oct", "nov", "dec")
_MONTH_RE = "|".join(_MONTHS)

_DATE_PATTERN = re.compile(
    rf"^(?:(?P<day>\d{{1,2}})\s+(?P<month>{_MONTH_RE})[a-z]*"
    rf"|(?P<month2>{_MONTH_RE})[a-z]*\s+(?P<day2>\d{{1,2}}))\b[\s,;]*"
)
_SEPARATOR = re.compile(r"[,;]")

BRUNCH = "brunch"
MAX_CONTEXT_TOKENS = 2


@dataclass(frozen=True)
class DateContext:
    date: date
    time: TimePeriod
    context: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def seed(
        cls,
        start: date = date(2018, 1, 1),
        time: TimePeriod = TimePeriod.EVENING,
    ) -> DateContext:
        """Starting context for the first line of a log."""
        return cls(date=start, time=time, context=())


def _parse_day(day: str, month: str, previous: date) -> date:
    month_num = _MONTHS.index(month) + 1
    try:
        resolved = date(previous.year, month_num, int(day))
        if month_num == 1 and previous.month == 12:
            resolved = resolved.replace(year=previous.year + 1)
    except ValueError as e:
        raise DateContextError(f"invalid date {day} {month}: {e}") from e
    return resolved


def _split_block(text: str, previous: date) -> tuple[date, list[str]]:
    m = _DATE_PATTERN.match(text)
    if m is None:
        resolved = previous
        rest = text
    else:
        if m.group("day") is not None:
            resolved = _parse_day(m.group("day"), m.group("month"), previous)
        else:
            resolved = _parse_day(m.group("day2"), m.group("month2"), previous)
        rest = text[m.end():]

    tokens = [t.strip() for t in _SEPARATOR.split(rest)]
    tokens = [t for t in tokens if t]
    if len(tokens) > MAX_CONTEXT_TOKENS:
        raise DateContextError(
            f"expected at most {MAX_CONTEXT_TOKENS} context tags, got {tokens!r}"
        )
    return resolved, tokens


def resolve_date_context(raw: str | None, previous: DateContext) -> DateContext:
    """Resolve one line's date block against the previous line's context.

    Raises:
        DateContextError: If both tags are time periods, there are too many
            tags, or the date does not exist.
    """
    if raw is None:
        return previous

    resolved_date, tokens = _split_block(raw.strip().lower(), previous.date)

    times = [i for i, t in enumerate(tokens) if TimePeriod.is_time_string(t)]
    if len(times) > 1:
        raise DateContextError(
            f"found two time periods, {tokens[times[0]]!r} and {tokens[times[1]]!r}"
        )

    consumed: int | None = None
    if times:
        consumed = times[0]
        time = TimePeriod(tokens[consumed])
    elif BRUNCH in tokens:
        consumed = tokens.index(BRUNCH)
        time = TimePeriod.AFTERNOON
    elif resolved_date == previous.date:
        time = previous.time
    else:
        time = TimePeriod.NIGHT

    context = tuple(t for i, t in enumerate(tokens) if i != consumed)
    return DateContext(date=resolved_date, time=time, context=context)
