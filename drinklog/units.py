"""Approximate values, liquid volume units and time periods."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

# Fraction added/removed from an approximate value to get its bounds.
APPROX_MODIFIER = 0.1

# Canonical unit → milliliters
_ML_PER_UNIT: dict[str, float] = {
    "fl oz": 29.5735,
    "mL": 1.0,
    "cL": 10.0,
    "L": 1000.0,
}

# Accepted spellings (lowercased, single-spaced) → canonical unit
_UNIT_ALIASES: dict[str, str] = {
    "fl oz": "fl oz",
    "oz": "fl oz",
    "ml": "mL",
    "cl": "cL",
    "l": "L",
}


@dataclass
class ApproxValue:
    """A number that may only be an estimate.

    Approximate values widen to +/- ``APPROX_MODIFIER`` when bounds are taken;
    exact values are their own bounds.
    """

    magnitude: float
    is_approximate: bool = False

    def __post_init__(self) -> None:
        self.magnitude = float(self.magnitude)
        if not math.isfinite(self.magnitude):
            raise ValueError(f"magnitude must be finite, got {self.magnitude!r}")

    def lower_bound(self) -> float:
        if self.is_approximate:
            return self.magnitude * (1.0 - APPROX_MODIFIER)
        return self.magnitude

    def upper_bound(self) -> float:
        if self.is_approximate:
            return self.magnitude * (1.0 + APPROX_MODIFIER)
        return self.magnitude

    def increment(self) -> None:
        """Add one to the magnitude (used when correcting logged counts)."""
        self.magnitude += 1.0

    def key(self) -> tuple[int, bool]:
        """Comparison key at hundredths precision."""
        # round() first so 5.01 * 100 == 500.99999... still truncates to 501
        return (math.trunc(round(self.magnitude * 100, 6)), self.is_approximate)

    def format(self, decimals: int = 2) -> str:
        prefix = "~" if self.is_approximate else ""
        return f"{prefix}{self.magnitude:.{decimals}f}"

    def as_dict(self) -> dict:
        return {"value": self.magnitude, "is_approximate": self.is_approximate}


class VolumeUnit(Enum):
    FL_OZ = "fl oz"
    ML = "mL"
    CL = "cL"
    L = "L"

    @classmethod
    def from_str(cls, unit: str) -> VolumeUnit | None:
        """Look up a unit token case-insensitively; ``None`` if unrecognized."""
        normalized = " ".join(unit.lower().split())
        canonical = _UNIT_ALIASES.get(normalized)
        if canonical is None:
            return None
        return cls(canonical)

    @property
    def ml_per_unit(self) -> float:
        return _ML_PER_UNIT[self.value]

    def __str__(self) -> str:
        return self.value


@dataclass
class LiquidVolume:
    amount: ApproxValue
    unit: VolumeUnit

    def to_ml(self) -> LiquidVolume:
        """Equivalent volume in milliliters, keeping the approximate flag."""
        return LiquidVolume(
            amount=ApproxValue(
                self.amount.magnitude * self.unit.ml_per_unit,
                self.amount.is_approximate,
            ),
            unit=VolumeUnit.ML,
        )

    def lower_bound(self) -> float:
        return self.amount.lower_bound()

    def upper_bound(self) -> float:
        return self.amount.upper_bound()

    def with_magnitude(self, magnitude: float) -> LiquidVolume:
        return LiquidVolume(
            amount=ApproxValue(magnitude, self.amount.is_approximate),
            unit=self.unit,
        )

    def __str__(self) -> str:
        return f"{self.amount.format(2)} {self.unit}"

    def as_dict(self) -> dict:
        return {"amount": self.amount.as_dict(), "unit": self.unit.value}


class TimePeriod(Enum):
    """The day split into four vague quarters."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    @classmethod
    def from_str(cls, text: str) -> TimePeriod | None:
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None

    @classmethod
    def is_time_string(cls, text: str) -> bool:
        return cls.from_str(text) is not None

    @property
    def order(self) -> int:
        return list(TimePeriod).index(self)

    def __str__(self) -> str:
        return self.value
