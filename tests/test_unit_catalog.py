import pytest

from ConversionErrors import UnknownCategory
from UnitCatalog import Category, UnitCatalog


def test_categories_in_display_order():
    assert UnitCatalog().categories() == ("Length", "Weight", "Temperature", "Currency")


@pytest.mark.parametrize("category, units", [
    ("Length", ("Kilometers", "Miles", "Meters", "Feet")),
    ("Weight", ("Kilograms", "Pounds", "Grams", "Ounces")),
    ("Temperature", ("Celsius", "Fahrenheit", "Kelvin")),
    ("Currency", ("INR", "USD", "EUR", "GBP")),
])
def test_units_for_each_category(category, units):
    assert UnitCatalog().units_for(category) == units


def test_units_for_accepts_enum_member():
    assert UnitCatalog().units_for(Category.TEMPERATURE) == ("Celsius", "Fahrenheit", "Kelvin")


@pytest.mark.parametrize("category", ["Volume", "length", "", None])
def test_unknown_category_raises(category):
    with pytest.raises(UnknownCategory):
        UnitCatalog().units_for(category)


def test_contains():
    catalog = UnitCatalog()
    assert catalog.contains("Weight", "Ounces")
    assert not catalog.contains("Weight", "Miles")


def test_rejects_empty_category():
    units = {Category.LENGTH: ("Meters",), Category.WEIGHT: (), Category.TEMPERATURE: ("Celsius",),
             Category.CURRENCY: ("USD",)}
    with pytest.raises(ValueError):
        UnitCatalog(units)


def test_rejects_duplicate_units():
    units = {Category.LENGTH: ("Meters", "Meters"), Category.WEIGHT: ("Grams",),
             Category.TEMPERATURE: ("Celsius",), Category.CURRENCY: ("USD",)}
    with pytest.raises(ValueError):
        UnitCatalog(units)


def test_catalog_is_read_only():
    catalog = UnitCatalog()
    with pytest.raises(TypeError):
        catalog._units[Category.LENGTH] = ("Inches",)
