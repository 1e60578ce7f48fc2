"""Parsers for the fields of a drink log line."""

from .abv import AbvRange, parse_abv
from .dates import DateContext, resolve_date_context
from .quantity import QuantityRange, parse_number, parse_quantity
from .tokenizer import RawEntry, tokenize_line
from .volume import ParsedVolume, parse_volume

__all__ = [
    "RawEntry",
    "tokenize_line",
    "QuantityRange",
    "parse_quantity",
    "parse_number",
    "AbvRange",
    "parse_abv",
    "ParsedVolume",
    "parse_volume",
    "DateContext",
    "resolve_date_context",
]
