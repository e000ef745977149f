"""
Currency conversion against a static `RateTable`.

Overview
--------
`CurrencyConverter` converts an amount between two currency codes by
normalizing to the rate table's base currency and then scaling to the
target:

    result = (amount / rate[from_currency]) * rate[to_currency]

Key points
----------
- If both codes are equal, the amount is returned unchanged as a float and
  no rate is looked up.
- Rates are constants supplied at startup; there is no network access and
  no caching layer.
- A code missing from the table raises `UnknownCurrency`. The catalog and
  the rate table are built from the same codes, so this only happens when
  the two disagree.
"""

from RateTable import RateTable


class CurrencyConverter:
    """
    Convert amounts between currencies listed in a `RateTable`.
    """

    def __init__(self, rate_table=None):
        self.rate_table = rate_table if rate_table is not None else RateTable()

    def to_base(self, amount, from_currency):
        """
        Express `amount` of `from_currency` in the base currency.

        Raises
        ------
        UnknownCurrency
            If `from_currency` has no rate.
        """
        return amount / self.rate_table.rate_for(from_currency)

    def from_base(self, amount, to_currency):
        """
        Express `amount` of the base currency in `to_currency`.

        Raises
        ------
        UnknownCurrency
            If `to_currency` has no rate.
        """
        return amount * self.rate_table.rate_for(to_currency)

    def convert(self, amount, from_currency, to_currency):
        """
        Convert `amount` from `from_currency` into `to_currency`.

        Parameters
        ----------
        amount : float | int
            Quantity expressed in `from_currency`.
        from_currency : str
            Source code (e.g. "USD", "INR").
        to_currency : str
            Target code.

        Returns
        -------
        float
            Converted amount in `to_currency`.

        Raises
        ------
        UnknownCurrency
            If either code is absent from the rate table.
        """
        # Short-circuit identical codes to avoid a divide/multiply round trip.
        if from_currency == to_currency:
            return float(amount)

        return self.from_base(self.to_base(amount, from_currency), to_currency)
