"""Tests for quantity field parsing."""

import pytest

from drinklog.errors import InvalidNumber, MissingQuantity
from drinklog.parsing.quantity import parse_quantity


@pytest.mark.parametrize("text,value", [("1", 1.0), ("2", 2.0), ("0.5", 0.5), ("12", 12.0)])
def test_single_exact_value(text, value):
    q = parse_quantity(text)
    assert q.min.magnitude == q.max.magnitude == value
    assert q.min.is_approximate is False
    assert q.max.is_approximate is False


def test_single_approximate_value():
    q = parse_quantity("~2")
    assert q.min.magnitude == q.max.magnitude == 2.0
    assert q.min.is_approximate is True
    assert q.max.is_approximate is True


def test_range():
    q = parse_quantity("1-2")
    assert q.min.magnitude == 1.0
    assert q.max.magnitude == 2.0
    assert not q.min.is_approximate
    assert not q.max.is_approximate


def test_range_with_independent_flags():
    q = parse_quantity("1 - ~2")
    assert q.min.is_approximate is False
    assert q.max.is_approximate is True

    q = parse_quantity("~1-2")
    assert q.min.is_approximate is True
    assert q.max.is_approximate is False


def test_print_single():
    assert str(parse_quantity("2")) == "2.00"
    assert str(parse_quantity("~2")) == "~2.00"


def test_print_range():
    assert str(parse_quantity("1-2")) == "1.00-2.00"
    assert str(parse_quantity("1-~2")) == "1.00-~2.00"


def test_print_same_value_different_flags_is_a_range():
    assert str(parse_quantity("2-~2")) == "2.00-~2.00"


def test_print_is_stable():
    text = str(parse_quantity("~1 - 3"))
    assert str(parse_quantity(text)) == text


@pytest.mark.parametrize("text", [None, "", "   ", "~"])
def test_missing(text):
    with pytest.raises(MissingQuantity):
        parse_quantity(text)


@pytest.mark.parametrize("text", ["two", "1.2.3", "1-2-3", "inf", "nan", "1 2"])
def test_invalid(text):
    with pytest.raises(InvalidNumber):
        parse_quantity(text)


def test_increment():
    q = parse_quantity("1-~2")
    q.increment()
    assert q.min.magnitude == 2.0
    assert q.max.magnitude == 3.0
    assert q.max.is_approximate is True
