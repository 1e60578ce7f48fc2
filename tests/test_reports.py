"""Tests for standard-drink aggregation."""

from datetime import date

import pytest

from drinklog.parsing.abv import parse_abv
from drinklog.parsing.dates import DateContext
from drinklog.parsing.quantity import parse_quantity
from drinklog.parsing.volume import parse_volume
from drinklog.registry import DrinkIdentity
from drinklog.reports import ML_PER_STANDARD_DRINK, ResolvedEntry, aggregate
from drinklog.units import TimePeriod, VolumeUnit


def make_entry(quantity, name="Beer", abv=None, volume=None):
    return ResolvedEntry(
        context=DateContext(date=date(2019, 5, 1), time=TimePeriod.NIGHT),
        quantity=parse_quantity(quantity),
        drink_id=1,
        drink=DrinkIdentity.from_fields(name, parse_abv(abv)),
        volume=parse_volume(volume),
    )


def test_abv_and_volume():
    agg = aggregate(make_entry("2", abv="5%", volume="12 oz"))
    expected = 2 * 0.05 * 12 * 29.5735 / ML_PER_STANDARD_DRINK
    assert agg.min_drinks == pytest.approx(expected)
    assert agg.max_drinks == pytest.approx(expected)
    assert agg.min_drinks == pytest.approx(1.97, abs=0.01)


def test_abv_and_volume_scaled_volume_in_original_unit():
    agg = aggregate(make_entry("2", abv="5%", volume="12 oz"))
    assert agg.min_volume.unit is VolumeUnit.FL_OZ
    assert agg.min_volume.amount.magnitude == pytest.approx(24.0)
    assert agg.max_volume.amount.magnitude == pytest.approx(24.0)


def test_approximate_values_widen_the_range():
    agg = aggregate(make_entry("~2", abv="~5%", volume="~500 ml"))
    assert agg.min_drinks == pytest.approx(1.8 * 0.045 * 450 / 18)
    assert agg.max_drinks == pytest.approx(2.2 * 0.055 * 550 / 18)
    assert agg.min_volume.amount.magnitude == pytest.approx(450 * 1.8)
    assert agg.max_volume.amount.magnitude == pytest.approx(550 * 2.2)


def test_no_abv_no_volume():
    agg = aggregate(make_entry("1-2"))
    assert agg.min_drinks == 1.0
    assert agg.max_drinks == 2.0
    assert agg.min_volume is None
    assert agg.max_volume is None


def test_no_abv_uses_multiplier():
    agg = aggregate(make_entry("~1", name="Double gin"))
    assert agg.min_drinks == pytest.approx(1.8)
    assert agg.max_drinks == pytest.approx(2.2)


def test_volume_without_abv_still_reports_volume():
    agg = aggregate(make_entry("2-3", volume="~33 cl"))
    assert agg.min_drinks == 2.0
    assert agg.max_drinks == 3.0
    assert agg.min_volume.unit is VolumeUnit.CL
    assert agg.min_volume.amount.magnitude == pytest.approx(66.0)
    assert agg.max_volume.amount.magnitude == pytest.approx(99.0)
    assert agg.min_volume.amount.is_approximate is True


def test_abv_without_volume_falls_back():
    agg = aggregate(make_entry("3", abv="40%"))
    assert agg.min_drinks == 3.0
    assert agg.max_drinks == 3.0


def test_entry_helpers():
    entry = make_entry("~1-2", abv="4-~5%", volume="1 L")
    assert entry.has_abv() and entry.has_volume()
    assert entry.min_quantity() == pytest.approx(0.9)
    assert entry.max_quantity() == 2.0
    assert entry.min_abv() == 4.0
    assert entry.max_abv() == pytest.approx(5.5)

    entry.increment()
    assert entry.quantity.min.magnitude == 2.0
    assert entry.quantity.max.magnitude == 3.0


def test_as_dict():
    entry = make_entry("2", abv="5%", volume="12 oz")
    data = aggregate(entry).as_dict()
    assert data["min_volume"] == {
        "amount": {"value": pytest.approx(24.0), "is_approximate": False},
        "unit": "fl oz",
    }
    assert entry.as_dict()["time"] == "night"
    assert entry.as_dict()["volume_ml"]["unit"] == "mL"
