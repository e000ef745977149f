"""
Unit conversion engine.

This module defines `UnitConvertor`, which converts a value between two
units of the same category by normalizing to the category's base unit and
then scaling to the target unit.

Base units used per category
----------------------------
- Length: meters
- Weight: grams
- Temperature: Celsius (affine formulas, not plain multipliers)
- Currency: the rate table's base currency (USD)

Dispatch
--------
Each `Category` maps to a `CategoryFormulas` pair of `(to_base, from_base)`
callables, one entry per category.

Notes & caveats
---------------
- Identical source and target units short-circuit and return the input
  unchanged, so no floating-point round trip can alter it.
- No rounding is done here; formatting to a fixed number of decimals is up
  to the caller.
- A unit that belongs to the category but has no explicit factor passes
  through unscaled (factor 1).
"""

from dataclasses import dataclass
from typing import Callable

from ConversionErrors import UnsupportedUnit
from CurrencyConverter import CurrencyConverter
from UnitCatalog import Category, UnitCatalog


LENGTH_FACTORS = {
    'Kilometers': 1000,   # kilometers to meters
    'Miles': 1609.34,     # miles to meters
    'Feet': 0.3048,       # feet to meters
    'Meters': 1,          # meters to meters
}

WEIGHT_FACTORS = {
    'Kilograms': 1000,    # kilograms to grams
    'Pounds': 453.592,    # pounds to grams
    'Ounces': 28.3495,    # ounces to grams
    'Grams': 1,           # grams to grams
}


@dataclass(frozen=True)
class CategoryFormulas:
    to_base: Callable[[str, float], float]
    from_base: Callable[[str, float], float]


def scaled_formulas(factors):
    """
    Build multiplicative formulas from a unit-to-base factor table.
    """
    return CategoryFormulas(
        to_base=lambda unit, value: value * factors.get(unit, 1),
        from_base=lambda unit, value: value / factors.get(unit, 1),
    )


def celsius_from(unit, value):
    if unit == 'Fahrenheit':
        return (value - 32) * 5 / 9
    if unit == 'Kelvin':
        return value - 273.15
    return value


def celsius_to(unit, value):
    if unit == 'Fahrenheit':
        return (value * 9 / 5) + 32
    if unit == 'Kelvin':
        return value + 273.15
    return value


class UnitConvertor:
    """
    Convert values between units of one category using a strategy table.
    """

    def __init__(self, catalog=None, currency_converter=None):
        """
        Parameters
        ----------
        catalog : UnitCatalog | None
            Catalog used to validate units. Defaults to the built-in catalog.
        currency_converter : CurrencyConverter | None
            Supplies the currency formulas. Defaults to one backed by the
            built-in rate table.
        """
        self.catalog = catalog if catalog is not None else UnitCatalog()
        self.currency_converter = currency_converter if currency_converter is not None else CurrencyConverter()
        self.formulas = {
            Category.LENGTH: scaled_formulas(LENGTH_FACTORS),
            Category.WEIGHT: scaled_formulas(WEIGHT_FACTORS),
            Category.TEMPERATURE: CategoryFormulas(to_base=celsius_from, from_base=celsius_to),
            Category.CURRENCY: CategoryFormulas(
                to_base=lambda unit, value: self.currency_converter.to_base(value, unit),
                from_base=lambda unit, value: self.currency_converter.from_base(value, unit),
            ),
        }

    def get_units(self, category):
        """
        Return the units valid for `category`, in display order.
        """
        return self.catalog.units_for(category)

    def convert(self, category, from_unit, to_unit, value):
        """
        Convert `value` from `from_unit` to `to_unit` within `category`.

        Parameters
        ----------
        category : Category | str
            One of Length, Weight, Temperature, Currency.
        from_unit : str
            Source unit, e.g. 'Miles' or 'EUR'.
        to_unit : str
            Target unit from the same category.
        value : float | int
            Quantity expressed in `from_unit`.

        Returns
        -------
        float
            Converted value in `to_unit`, unrounded.

        Raises
        ------
        UnknownCategory
            If `category` is not a catalog category.
        UnsupportedUnit
            If either unit does not belong to `category`.
        UnknownCurrency
            If a currency unit has no rate in the rate table.
        """
        category = self.catalog.resolve(category)
        units = self.catalog.units_for(category)
        for unit in (from_unit, to_unit):
            if unit not in units:
                raise UnsupportedUnit(category.value, unit)

        if from_unit == to_unit:
            return value

        formulas = self.formulas[category]
        # Normalize to the category base unit, then scale to the target.
        base_value = formulas.to_base(from_unit, value)
        return formulas.from_base(to_unit, base_value)


if __name__ == "__main__":
    # Example usage / quick sanity checks
    unit_convertor = UnitConvertor()
    print(unit_convertor.convert('Length', 'Kilometers', 'Meters', 1))
    print(unit_convertor.convert('Temperature', 'Celsius', 'Fahrenheit', 100))
    print(unit_convertor.get_units('Currency'))
