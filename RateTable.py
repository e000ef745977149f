"""
Static exchange rates relative to a base currency.

Rates express how many units of a currency equal one unit of the base
currency (USD). Values are fixed constants; nothing here talks to a rate
provider.
"""

from types import MappingProxyType

from ConversionErrors import UnknownCurrency


BASE_CURRENCY = "USD"

DEFAULT_RATES = {
    "INR": 83.0,
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.78,
}


class RateTable:
    """
    Immutable currency-code to rate mapping.

    Attributes
    ----------
    base_currency : str
        Code whose rate is exactly 1.0.
    rates : Mapping[str, float]
        Read-only view of the rates.
    """

    def __init__(self, rates=None, base_currency=BASE_CURRENCY):
        """
        Raises
        ------
        ValueError
            If the base currency is missing or not 1.0, or if any rate is
            not strictly positive.
        """
        rates = dict(DEFAULT_RATES if rates is None else rates)
        if rates.get(base_currency) != 1.0:
            raise ValueError(f"Base currency {base_currency} must map to 1.0.")
        for code, rate in rates.items():
            if not rate > 0:
                raise ValueError(f"Rate for {code} must be positive, got {rate}.")
        self.base_currency = base_currency
        self.rates = MappingProxyType({code: float(rate) for code, rate in rates.items()})

    def __contains__(self, code):
        return code in self.rates

    def codes(self):
        return tuple(self.rates)

    def rate_for(self, code):
        """
        Return the rate for `code`.

        Raises
        ------
        UnknownCurrency
            If the table has no entry for `code`.
        """
        try:
            return self.rates[code]
        except KeyError:
            raise UnknownCurrency(code) from None
