"""Parse and summarize a hand-written alcoholic drink log."""

from .config import DrinkLogConfig, load_config
from .errors import (
    DateContextError,
    DrinkLogError,
    DuplicateRegistryEntry,
    EntryInputError,
    InvalidNumber,
    LineError,
    MissingAbv,
    MissingName,
    MissingQuantity,
    TokenizeError,
    UnknownVolumeUnit,
)
from .parsing import (
    AbvRange,
    DateContext,
    ParsedVolume,
    QuantityRange,
    RawEntry,
    parse_abv,
    parse_quantity,
    parse_volume,
    resolve_date_context,
    tokenize_line,
)
from .pipeline import ImportRun, ImportSummary, parse_fields
from .registry import DrinkIdentity, DrinkRegistry
from .reports import DrinkAggregate, ResolvedEntry, aggregate
from .units import APPROX_MODIFIER, ApproxValue, LiquidVolume, TimePeriod, VolumeUnit

__all__ = [
    "APPROX_MODIFIER",
    "ApproxValue",
    "LiquidVolume",
    "TimePeriod",
    "VolumeUnit",
    "RawEntry",
    "tokenize_line",
    "QuantityRange",
    "parse_quantity",
    "AbvRange",
    "parse_abv",
    "ParsedVolume",
    "parse_volume",
    "DateContext",
    "resolve_date_context",
    "DrinkIdentity",
    "DrinkRegistry",
    "ResolvedEntry",
    "DrinkAggregate",
    "aggregate",
    "ImportRun",
    "ImportSummary",
    "parse_fields",
    "DrinkLogConfig",
    "load_config",
    "DrinkLogError",
    "LineError",
    "TokenizeError",
    "MissingQuantity",
    "InvalidNumber",
    "MissingAbv",
    "UnknownVolumeUnit",
    "MissingName",
    "DateContextError",
    "DuplicateRegistryEntry",
    "EntryInputError",
]
