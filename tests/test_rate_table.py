import pytest

from ConversionErrors import UnknownCurrency
from CurrencyConverter import CurrencyConverter
from RateTable import RateTable


def test_default_rates():
    table = RateTable()
    assert table.base_currency == "USD"
    assert table.rate_for("USD") == 1.0
    assert table.rate_for("INR") == 83.0
    assert set(table.codes()) == {"INR", "USD", "EUR", "GBP"}
    assert "EUR" in table


def test_unknown_code_raises():
    with pytest.raises(UnknownCurrency) as exc_info:
        RateTable().rate_for("JPY")
    assert exc_info.value.code == "JPY"


@pytest.mark.parametrize("rates", [
    {"USD": 2.0, "EUR": 0.9},
    {"EUR": 0.9},
    {"USD": 1.0, "EUR": 0.0},
    {"USD": 1.0, "EUR": -1.5},
])
def test_invalid_tables_rejected(rates):
    with pytest.raises(ValueError):
        RateTable(rates)


def test_rates_are_read_only():
    with pytest.raises(TypeError):
        RateTable().rates["USD"] = 2.0


def test_currency_converter_uses_table():
    converter = CurrencyConverter(RateTable({"USD": 1.0, "XYZ": 4.0}))
    assert converter.convert(2, "USD", "XYZ") == 8.0
    assert converter.convert(8, "XYZ", "USD") == 2.0


def test_currency_converter_same_code_skips_lookup():
    assert CurrencyConverter().convert(5, "ABC", "ABC") == 5.0


def test_currency_converter_missing_rate():
    with pytest.raises(UnknownCurrency):
        CurrencyConverter().convert(1, "USD", "JPY")
