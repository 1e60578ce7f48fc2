"""Drink identities and the per-run registry that deduplicates them."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import DuplicateRegistryEntry, MissingName
from .parsing.abv import AbvRange

DOUBLE_MULTIPLIER = 2.0


def derive_multiplier(name: str) -> float:
    """A "double" counts as two drinks."""
    return DOUBLE_MULTIPLIER if "double" in name.lower() else 1.0


@dataclass(frozen=True, eq=False)
class DrinkIdentity:
    """A drink as it appears in the catalog.

    Equality ignores case and surrounding whitespace in the name, compares
    ABV to the hundredth and the multiplier to two decimals.
    """

    name: str
    abv: AbvRange | None = None
    multiplier: float = 1.0

    @classmethod
    def from_fields(cls, name: str | None, abv: AbvRange | None) -> DrinkIdentity:
        """Build an identity from a parsed name and ABV, deriving the multiplier.

        Raises:
            MissingName: If the name is absent or blank.
        """
        name = (name or "").strip()
        if not name:
            raise MissingName()
        return cls(name=name, abv=abv, multiplier=derive_multiplier(name))

    @property
    def normalized_name(self) -> str:
        return self.name.strip().lower()

    def _key(self) -> tuple:
        return (self.normalized_name, self.abv, round(self.multiplier, 2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrinkIdentity):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class DrinkRegistry:
    """Two-way mapping between drink identities and catalog ids.

    Lives for a single import run. Every id and every identity may be bound
    exactly once.
    """

    def __init__(self) -> None:
        self._ids: dict[DrinkIdentity, int] = {}
        self._identities: dict[int, DrinkIdentity] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, identity: DrinkIdentity) -> bool:
        return identity in self._ids

    def find(self, identity: DrinkIdentity) -> int | None:
        return self._ids.get(identity)

    def get(self, drink_id: int) -> DrinkIdentity | None:
        return self._identities.get(drink_id)

    def insert(self, drink_id: int, identity: DrinkIdentity) -> int:
        """Bind ``identity`` to ``drink_id``.

        Raises:
            DuplicateRegistryEntry: If either side is already bound. Nothing
                is recorded in that case.
        """
        if identity in self._ids:
            raise DuplicateRegistryEntry(
                f"{identity.name!r} is already registered as id {self._ids[identity]}"
            )
        if drink_id in self._identities:
            raise DuplicateRegistryEntry(
                f"id {drink_id} is already bound to {self._identities[drink_id].name!r}"
            )
        self._ids[identity] = drink_id
        self._identities[drink_id] = identity
        return drink_id
