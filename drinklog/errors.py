"""Exception types raised while parsing and importing drink log lines."""

from __future__ import annotations


class DrinkLogError(Exception):
    """Base class for all drinklog errors."""


class LineError(DrinkLogError, ValueError):
    """A single log line could not be parsed.

    These are recoverable: the importer logs them and moves on to the next line.
    """


class TokenizeError(LineError):
    def __init__(self, line: str) -> None:
        super().__init__(f"line does not match the entry grammar: {line!r}")
        self.line = line


class MissingQuantity(LineError):
    def __init__(self, text: str | None = None) -> None:
        super().__init__(f"missing quantity: {text!r}")
        self.text = text


class InvalidNumber(LineError):
    def __init__(self, text: str) -> None:
        super().__init__(f"invalid number: {text!r}")
        self.text = text


class MissingAbv(LineError):
    def __init__(self, text: str) -> None:
        super().__init__(f"ABV field has no value: {text!r}")
        self.text = text


class UnknownVolumeUnit(LineError):
    def __init__(self, unit: str) -> None:
        super().__init__(f"unknown volume unit: {unit!r}")
        self.unit = unit


class MissingName(LineError):
    def __init__(self) -> None:
        super().__init__("drink name is empty")


class DateContextError(DrinkLogError, ValueError):
    """The date/context block is malformed (e.g. two time periods on one line).

    Not recoverable; indicates corrupted log data.
    """


class DuplicateRegistryEntry(DrinkLogError):
    """A drink id or identity was registered twice during one import run."""


class EntryInputError(DrinkLogError, ValueError):
    """Form input rejected by the entry service."""
