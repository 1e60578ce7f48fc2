"""Quantity field parsing ("2", "~2", "1-2", "1 - ~2")."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from ..errors import InvalidNumber, MissingQuantity
from ..units import ApproxValue

_QUANTITY_PATTERN = re.compile(
    r"^(?P<min_approx>~)?\s*(?P<min>[^\s~-]+)"
    r"(?:\s*-\s*(?P<max_approx>~)?\s*(?P<max>[^\s~-]+))?$"
)


@dataclass
class QuantityRange:
    min: ApproxValue
    max: ApproxValue

    def is_single(self) -> bool:
        return (
            self.min.magnitude == self.max.magnitude
            and self.min.is_approximate == self.max.is_approximate
        )

    def increment(self) -> None:
        self.min.increment()
        self.max.increment()

    def __str__(self) -> str:
        if self.is_single():
            return self.min.format(2)
        return f"{self.min.format(2)}-{self.max.format(2)}"


def parse_number(text: str) -> float:
    """Parse a decimal number, rejecting anything that is not finite."""
    try:
        value = float(text)
    except ValueError:
        raise InvalidNumber(text) from None
    if not math.isfinite(value):
        raise InvalidNumber(text)
    return value


def parse_quantity(text: str | None) -> QuantityRange:
    """Parse a quantity field into a min/max range.

    Each bound carries its own ``~`` flag; a single value is used for both.

    Raises:
        MissingQuantity: If the field is absent or has no value.
        InvalidNumber: If a value is not a decimal number.
    """
    if text is None or not text.replace("~", "").strip():
        raise MissingQuantity(text)

    m = _QUANTITY_PATTERN.match(text.strip())
    if m is None:
        raise InvalidNumber(text)

    low = ApproxValue(parse_number(m.group("min")), m.group("min_approx") is not None)
    if m.group("max") is None:
        high = ApproxValue(low.magnitude, low.is_approximate)
    else:
        high = ApproxValue(
            parse_number(m.group("max")), m.group("max_approx") is not None
        )
    return QuantityRange(min=low, max=high)
