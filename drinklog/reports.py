"""Standard-drink estimates for logged entries."""

from __future__ import annotations

from dataclasses import dataclass

from .parsing.dates import DateContext
from .parsing.quantity import QuantityRange
from .parsing.volume import ParsedVolume
from .registry import DrinkIdentity
from .units import LiquidVolume

# Milliliters of pure alcohol in one standard drink.
ML_PER_STANDARD_DRINK = 18.0


@dataclass
class ResolvedEntry:
    """One fully resolved log entry."""

    context: DateContext
    quantity: QuantityRange
    drink_id: int
    drink: DrinkIdentity
    volume: ParsedVolume | None = None
    id: int | None = None

    @property
    def multiplier(self) -> float:
        return self.drink.multiplier

    def min_quantity(self) -> float:
        return self.quantity.min.lower_bound()

    def max_quantity(self) -> float:
        return self.quantity.max.upper_bound()

    def min_abv(self) -> float | None:
        if self.drink.abv is None:
            return None
        return self.drink.abv.min.lower_bound()

    def max_abv(self) -> float | None:
        if self.drink.abv is None:
            return None
        return self.drink.abv.max.upper_bound()

    def has_abv(self) -> bool:
        return self.drink.abv is not None

    def has_volume(self) -> bool:
        return self.volume is not None

    def increment(self) -> None:
        """Bump both quantity bounds by one."""
        self.quantity.increment()

    def as_dict(self) -> dict:
        abv = self.drink.abv
        return {
            "id": self.id,
            "drank_on": self.context.date.isoformat(),
            "time": self.context.time.value,
            "context": list(self.context.context),
            "drink_id": self.drink_id,
            "name": self.drink.name,
            "min_abv": abv.min.as_dict() if abv else None,
            "max_abv": abv.max.as_dict() if abv else None,
            "multiplier": self.drink.multiplier,
            "min_quantity": self.quantity.min.as_dict(),
            "max_quantity": self.quantity.max.as_dict(),
            "volume": self.volume.volume.as_dict() if self.volume else None,
            "volume_ml": self.volume.volume_ml.as_dict() if self.volume else None,
        }


@dataclass
class DrinkAggregate:
    min_drinks: float
    max_drinks: float
    min_volume: LiquidVolume | None = None
    max_volume: LiquidVolume | None = None

    def as_dict(self) -> dict:
        return {
            "min_drinks": self.min_drinks,
            "max_drinks": self.max_drinks,
            "min_volume": self.min_volume.as_dict() if self.min_volume else None,
            "max_volume": self.max_volume.as_dict() if self.max_volume else None,
        }


def aggregate(entry: ResolvedEntry) -> DrinkAggregate:
    """Estimate the min/max number of standard drinks in an entry.

    Min values are always paired with min values and max with max, giving a
    conservative and a liberal estimate.
    """
    min_qty = entry.min_quantity()
    max_qty = entry.max_quantity()
    multiplier = entry.multiplier
    volume = entry.volume.volume if entry.volume else None

    # Without ABV and volume, each quantity unit counts as one drink.
    if not entry.has_abv() or volume is None:
        return DrinkAggregate(
            min_drinks=min_qty * multiplier,
            max_drinks=max_qty * multiplier,
            min_volume=(
                volume.with_magnitude(volume.amount.magnitude * min_qty * multiplier)
                if volume else None
            ),
            max_volume=(
                volume.with_magnitude(volume.amount.magnitude * max_qty * multiplier)
                if volume else None
            ),
        )

    volume_ml = entry.volume.volume_ml
    return DrinkAggregate(
        min_drinks=(
            min_qty * (entry.min_abv() / 100.0) * volume_ml.lower_bound()
            / ML_PER_STANDARD_DRINK
        ),
        max_drinks=(
            max_qty * (entry.max_abv() / 100.0) * volume_ml.upper_bound()
            / ML_PER_STANDARD_DRINK
        ),
        min_volume=volume.with_magnitude(volume.lower_bound() * min_qty * multiplier),
        max_volume=volume.with_magnitude(volume.upper_bound() * max_qty * multiplier),
    )
