"""
Fixed catalog of conversion categories and the units valid in each.

The catalog is built once at startup and handed to the engine and the
controller; it is never mutated afterwards.

Categories and units (display order)
------------------------------------
- Length: Kilometers, Miles, Meters, Feet
- Weight: Kilograms, Pounds, Grams, Ounces
- Temperature: Celsius, Fahrenheit, Kelvin
- Currency: INR, USD, EUR, GBP
"""

from enum import Enum
from types import MappingProxyType

from ConversionErrors import UnknownCategory


class Category(str, Enum):
    LENGTH = "Length"
    WEIGHT = "Weight"
    TEMPERATURE = "Temperature"
    CURRENCY = "Currency"


DEFAULT_UNITS = {
    Category.LENGTH: ("Kilometers", "Miles", "Meters", "Feet"),
    Category.WEIGHT: ("Kilograms", "Pounds", "Grams", "Ounces"),
    Category.TEMPERATURE: ("Celsius", "Fahrenheit", "Kelvin"),
    Category.CURRENCY: ("INR", "USD", "EUR", "GBP"),
}


class UnitCatalog:
    """
    Read-only mapping from `Category` to its ordered unit names.
    """

    def __init__(self, units=None):
        """
        Parameters
        ----------
        units : dict[Category, Sequence[str]] | None
            Units per category. Defaults to `DEFAULT_UNITS`. Every category
            must be present with a non-empty list of distinct unit names.

        Raises
        ------
        ValueError
            If a category is missing, empty, or lists a unit twice.
        """
        units = DEFAULT_UNITS if units is None else units
        frozen = {}
        for category in Category:
            names = tuple(units.get(category, ()))
            if not names:
                raise ValueError(f"Category {category.value} has no units.")
            if len(set(names)) != len(names):
                raise ValueError(f"Category {category.value} lists a unit more than once.")
            frozen[category] = names
        self._units = MappingProxyType(frozen)

    @staticmethod
    def resolve(category):
        """
        Return the `Category` for a `Category` member or its display name.

        Raises
        ------
        UnknownCategory
            If `category` does not name one of the four categories.
        """
        try:
            return Category(category)
        except ValueError:
            raise UnknownCategory(category) from None

    def categories(self):
        return tuple(category.value for category in self._units)

    def units_for(self, category):
        """
        Return the ordered unit names for `category`.

        Raises
        ------
        UnknownCategory
            If `category` is not one of the predefined names.
        """
        return self._units[self.resolve(category)]

    def contains(self, category, unit):
        return unit in self.units_for(category)
