"""Volume field parsing ("12 oz", "~500ml", "33 cL", "1.5 fl oz")."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import UnknownVolumeUnit
from ..units import ApproxValue, LiquidVolume, VolumeUnit
from .quantity import parse_number

_VOLUME_PATTERN = re.compile(
    r"^(?P<approx>~)?\s*(?P<amount>\d+(?:\.\d*)?|\.\d+)\s*"
    r"(?P<unit>[a-zA-Z]+(?:\s+[a-zA-Z]+)?)$"
)


@dataclass
class ParsedVolume:
    """A volume as written, plus the same volume in milliliters."""

    volume: LiquidVolume
    volume_ml: LiquidVolume

    def __str__(self) -> str:
        return str(self.volume)


def parse_volume(text: str | None) -> ParsedVolume | None:
    """Parse a volume field.

    Returns ``None`` when the field is absent or not shaped like a volume.

    Raises:
        UnknownVolumeUnit: If the amount parses but the unit is not recognized.
    """
    if text is None:
        return None

    m = _VOLUME_PATTERN.match(text.strip())
    if m is None:
        return None

    unit = VolumeUnit.from_str(m.group("unit"))
    if unit is None:
        raise UnknownVolumeUnit(m.group("unit"))

    volume = LiquidVolume(
        amount=ApproxValue(parse_number(m.group("amount")), m.group("approx") is not None),
        unit=unit,
    )
    return ParsedVolume(volume=volume, volume_ml=volume.to_ml())
