"""Tests for splitting log lines into fields."""

import pytest

from drinklog.errors import TokenizeError
from drinklog.parsing.tokenizer import RawEntry, tokenize_line


def test_full_line():
    raw = tokenize_line("(5 jan, brunch) ~2, Mimosa, 12%, 6 oz")
    assert raw == RawEntry(
        date="5 jan, brunch",
        quantity="~2",
        name="Mimosa",
        abv="12%",
        volume="6 oz",
    )


def test_quantity_and_name_only():
    raw = tokenize_line("1, Beer")
    assert raw.date is None
    assert raw.quantity == "1"
    assert raw.name == "Beer"
    assert raw.abv is None
    assert raw.volume is None


def test_abv_without_volume():
    raw = tokenize_line("2, IPA, 6.5%")
    assert raw.abv == "6.5%"
    assert raw.volume is None


def test_comma_after_date_block():
    raw = tokenize_line("(oct 1), 1, Stout")
    assert raw.date == "oct 1"
    assert raw.quantity == "1"
    assert raw.name == "Stout"


def test_fields_are_trimmed():
    raw = tokenize_line("  ( night )  1 - 2 ,  House red  , ~13% ,  ~150 ml  ")
    assert raw.date == "night"
    assert raw.quantity == "1 - 2"
    assert raw.name == "House red"
    assert raw.abv == "~13%"
    assert raw.volume == "~150 ml"


def test_empty_date_block():
    raw = tokenize_line("() 1, Cider")
    assert raw.date == ""


def test_escaped_comma_in_name():
    raw = tokenize_line(r"1, Gin\, tonic, 5%")
    assert raw.name == "Gin, tonic"
    assert raw.abv == "5%"


def test_no_comma_is_an_error():
    with pytest.raises(TokenizeError) as exc:
        tokenize_line("just some words")
    assert exc.value.line == "just some words"


def test_too_many_fields_is_an_error():
    with pytest.raises(TokenizeError):
        tokenize_line("1, Beer, 5%, 12 oz, extra")
