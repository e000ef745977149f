"""
Exceptions raised by the converter components.

Engine-level errors (`UnknownCategory`, `UnsupportedUnit`, `UnknownCurrency`)
indicate that a caller passed something outside the catalog; the controller
only ever passes catalog values, so seeing one of these means the tables are
inconsistent. `InvalidInput` and `HistoryIOFailure` are recoverable and are
turned into display state by `ConverterController`.
"""


class ConversionError(Exception):
    """Base class for every error raised by the converter."""


class UnknownCategory(ConversionError):
    def __init__(self, category):
        super().__init__(f"Unknown category: {category!r}")
        self.category = category


class UnsupportedUnit(ConversionError):
    def __init__(self, category, unit):
        super().__init__(f"Unit {unit!r} is not supported in category {category!r}")
        self.category = category
        self.unit = unit


class UnknownCurrency(ConversionError):
    def __init__(self, code):
        super().__init__(f"No exchange rate for currency {code!r}")
        self.code = code


class InvalidInput(ConversionError):
    def __init__(self, raw_value):
        super().__init__(f"Cannot parse {raw_value!r} as a number")
        self.raw_value = raw_value


class HistoryIOFailure(ConversionError):
    """Reading, appending to, or clearing the history file failed."""

    def __init__(self, operation, path, reason):
        super().__init__(f"History {operation} failed for {path}: {reason}")
        self.operation = operation
        self.path = path
