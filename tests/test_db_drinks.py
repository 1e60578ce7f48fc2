"""Tests for the drink catalog storage."""

import pytest

from drinklog.db.drinks import DrinkDB
from drinklog.parsing.abv import parse_abv
from drinklog.registry import DrinkIdentity


@pytest.fixture
def db(tmp_path):
    """Create a temporary DrinkDB."""
    drinks = DrinkDB(db_path=tmp_path / "test.db")
    yield drinks
    drinks.close()


def test_create_and_get(db):
    drink = DrinkIdentity.from_fields("Double IPA", parse_abv("~8-9%"))
    drink_id = db.create_drink(drink)
    assert isinstance(drink_id, int)

    stored = db.get_drink(drink_id)
    assert stored == drink
    assert stored.name == "Double IPA"
    assert stored.multiplier == 2.0
    assert stored.abv.min.magnitude == 8.0
    assert stored.abv.min.is_approximate is True
    assert stored.abv.max.is_approximate is False


def test_get_missing(db):
    assert db.get_drink(999) is None


def test_find_is_case_insensitive(db):
    drink_id = db.create_drink(DrinkIdentity.from_fields("Guinness", parse_abv("4.2%")))
    assert db.find_drink(DrinkIdentity.from_fields("GUINNESS", parse_abv("4.2%"))) == drink_id


def test_find_matches_abv(db):
    db.create_drink(DrinkIdentity.from_fields("Cider", parse_abv("5%")))
    assert db.find_drink(DrinkIdentity.from_fields("Cider", parse_abv("6%"))) is None
    assert db.find_drink(DrinkIdentity.from_fields("Cider", None)) is None


def test_find_without_abv(db):
    drink_id = db.create_drink(DrinkIdentity.from_fields("Wine", None))
    assert db.find_drink(DrinkIdentity.from_fields("wine", None)) == drink_id


def test_get_or_create(db):
    first = db.get_or_create_drink(DrinkIdentity.from_fields("Lager", parse_abv("5%")))
    second = db.get_or_create_drink(DrinkIdentity.from_fields("lager", parse_abv("5%")))
    assert first == second
    assert len(db.list_drinks()) == 1


def test_find_folds_non_ascii_case(db):
    drink_id = db.create_drink(DrinkIdentity.from_fields("Äppelwijn", parse_abv("5%")))
    assert db.find_drink(DrinkIdentity.from_fields("äPPELWIJN", parse_abv("5%"))) == drink_id
    assert db.get_or_create_drink(DrinkIdentity.from_fields("Äppelwijn", parse_abv("5%"))) == drink_id
