# Purpose: tenor parsing/arithmetic and day count lookup.

from datetime import date, datetime

import pytest

from ficcrisk.conventions import (
    ACT_360,
    ACT_365F,
    DayCountConvention,
    Tenor,
    get_day_count_convention,
    tenor_to_months,
)


@pytest.mark.parametrize(
    "text, amount, unit",
    [("3M", 3, "M"), (" 10y ", 10, "Y"), ("2W", 2, "W"), ("1D", 1, "D")],
)
def test_tenor_parse(text, amount, unit):
    tenor = Tenor.parse(text)

    assert tenor == Tenor(amount, unit)
    assert str(tenor) == f"{amount}{unit}"


@pytest.mark.parametrize("text", ["", "Y", "3X", "1.5Y", "-1Y"])
def test_tenor_parse_invalid(text):
    with pytest.raises(ValueError):
        Tenor.parse(text)


def test_tenor_units_are_not_normalized():
    assert Tenor.parse("12M") != Tenor.parse("1Y")
    assert Tenor.parse("12M").year_fraction() == pytest.approx(Tenor.parse("1Y").year_fraction())


def test_tenor_add_to():
    start = date(2024, 1, 31)

    assert Tenor.parse("1M").add_to(start) == date(2024, 2, 29)
    assert Tenor.parse("1Y").add_to(datetime(2024, 2, 29, 12)) == date(2025, 2, 28)
    assert Tenor.parse("2W").add_to(start) == date(2024, 2, 14)
    assert Tenor.parse("3D").add_to(start) == date(2024, 2, 3)


def test_tenor_to_months():
    assert tenor_to_months("18M") == 18
    assert tenor_to_months("2Y") == 24
    with pytest.raises(ValueError, match="months"):
        tenor_to_months("1W")


def test_day_count_lookup():
    assert get_day_count_convention("act/360") is ACT_360
    assert get_day_count_convention("ACT/365") is ACT_365F
    assert get_day_count_convention(ACT_365F) is ACT_365F
    with pytest.raises(ValueError, match="Unknown day count convention"):
        get_day_count_convention("BUS/252")


def test_day_count_year_fraction():
    start, end = date(2024, 1, 1), date(2025, 1, 1)

    assert ACT_360.day_count(start, end) == 366
    assert ACT_360.year_fraction(start, end) == pytest.approx(366 / 360)
    assert ACT_365F.year_fraction(start, end) == pytest.approx(366 / 365)


def test_day_count_identity():
    assert isinstance(ACT_360, DayCountConvention)
    assert str(ACT_360) == "ACT/360"
    assert get_day_count_convention("ACTUAL/360") == ACT_360
