"""Alcohol-by-volume field parsing ("5%", "~12%", "4-5%", "4.5% - ~6%")."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import MissingAbv
from ..units import ApproxValue
from .quantity import parse_number

_ABV_PATTERN = re.compile(
    r"^(?P<min_approx>~)?\s*(?P<min>[\d.]*)\s*%?"
    r"(?:\s*-\s*(?P<max_approx>~)?\s*(?P<max>[\d.]+)\s*)?%$"
)


@dataclass(frozen=True, eq=False)
class AbvRange:
    """ABV bounds in percent.

    Two ranges are equal when their bounds agree to the hundredth, so that
    re-parsed values do not produce distinct drinks.
    """

    min: ApproxValue
    max: ApproxValue

    def _key(self) -> tuple:
        return (self.min.key(), self.max.key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbvRange):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        if (
            self.min.magnitude == self.max.magnitude
            and self.min.is_approximate == self.max.is_approximate
        ):
            return f"{self.min.format(1)}%"
        return f"{self.min.format(1)}-{self.max.format(1)}%"


def parse_abv(text: str | None) -> AbvRange | None:
    """Parse an ABV field.

    Returns ``None`` when the field is absent or not shaped like an ABV at all.

    Raises:
        MissingAbv: If the field looks like an ABV but has no minimum value.
        InvalidNumber: If a value is not a decimal number.
    """
    if text is None:
        return None

    m = _ABV_PATTERN.match(text.strip())
    if m is None:
        return None
    if not m.group("min"):
        raise MissingAbv(text)

    low = ApproxValue(parse_number(m.group("min")), m.group("min_approx") is not None)
    if m.group("max") is None:
        high = ApproxValue(low.magnitude, low.is_approximate)
    else:
        high = ApproxValue(
            parse_number(m.group("max")), m.group("max_approx") is not None
        )
    return AbvRange(min=low, max=high)
