"""
Interaction controller for the converter form.

`ConverterController` holds the catalog, the conversion engine, and the
history log, and exposes one handler per user action:

- `select_category`: a new category was picked.
- `select_units`: the from/to choices changed.
- `convert`: the Convert button was pressed.
- `clear_history`: the Clear History button was pressed.

It knows nothing about widgets. Front ends (see `Main.py`) read the
returned values and `history_text()` and render them however they like.

Failure handling
----------------
- Text that does not parse as a number yields the "Invalid Input" display
  and leaves the history untouched.
- Engine errors are printed and shown the same way.
- History read/write/clear failures are printed; the conversion or reset
  still goes through, only persistence is skipped.
"""

import re
from dataclasses import dataclass

from ConversionErrors import ConversionError, HistoryIOFailure, InvalidInput
from HistoryEntry import HistoryEntry, format_fixed
from Settings import Settings


NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


@dataclass
class ConversionOutcome:
    display: str
    entry: HistoryEntry | None = None
    persisted: bool = False
    error: ConversionError | None = None

    @property
    def ok(self):
        return self.entry is not None


class ConverterController:
    """
    Orchestrates category selection, conversion, and history persistence.

    Attributes
    ----------
    category : str
        Currently selected category name.
    units : tuple[str, ...]
        Units offered for the current category.
    from_unit, to_unit : str
        Current selections; reset to the first unit on category change.
    history_lines : list[str]
        Entries shown under the history banner, oldest first.
    """

    def __init__(self, catalog, convertor, history_log, settings=None):
        self.catalog = catalog
        self.convertor = convertor
        self.history_log = history_log
        self.settings = settings if settings is not None else Settings()
        self.history_lines = []
        self.category = None
        self.units = ()
        self.from_unit = None
        self.to_unit = None

        self.load_history()
        self.select_category(self.catalog.categories()[0])

    def load_history(self):
        """
        Replace the displayed history with the contents of the log.
        """
        self.history_lines = []
        if not self.history_log.exists():
            print("History file not found. Starting fresh.")
            return
        try:
            self.history_lines = list(self.history_log.load_all())
        except HistoryIOFailure as ex:
            print("Error reading history:", ex)

    def select_category(self, category):
        """
        Switch to `category` and return its units.

        Prior from/to selections are discarded and both reset to the first
        unit of the new category.

        Raises
        ------
        UnknownCategory
            If `category` is not a catalog category.
        """
        units = self.catalog.units_for(category)
        self.category = self.catalog.resolve(category).value
        self.units = units
        self.from_unit = units[0]
        self.to_unit = units[0]
        return units

    def select_units(self, from_unit=None, to_unit=None):
        if from_unit is not None:
            self.from_unit = from_unit
        if to_unit is not None:
            self.to_unit = to_unit

    @staticmethod
    def parse_value(raw_value):
        """
        Parse user text as a float.

        Only plain ASCII decimals with an optional sign and exponent are
        accepted; underscores, non-ASCII digits, "nan" and "inf" are not.

        Raises
        ------
        InvalidInput
            If `raw_value` is not numeric text.
        """
        text = str(raw_value).strip()
        if not NUMBER_PATTERN.fullmatch(text):
            raise InvalidInput(raw_value)
        return float(text)

    def convert(self, raw_value, from_unit=None, to_unit=None):
        """
        Convert `raw_value` between the selected units and record it.

        Parameters
        ----------
        raw_value : str
            Text typed by the user.
        from_unit, to_unit : str | None
            Optional new selections, applied before converting.

        Returns
        -------
        ConversionOutcome
            `display` holds the formatted result or the invalid-input text.
        """
        self.select_units(from_unit, to_unit)
        invalid = self.settings.invalid_input_text

        try:
            value = self.parse_value(raw_value)
        except InvalidInput as ex:
            return ConversionOutcome(display=invalid, error=ex)

        try:
            result = self.convertor.convert(self.category, self.from_unit, self.to_unit, value)
        except ConversionError as ex:
            print("Conversion failed:", ex)
            return ConversionOutcome(display=invalid, error=ex)

        entry = HistoryEntry(value, self.from_unit, result, self.to_unit)
        self.history_lines.append(str(entry))
        outcome = ConversionOutcome(
            display=format_fixed(result, self.settings.result_decimals),
            entry=entry,
        )
        try:
            self.history_log.append(entry)
            outcome.persisted = True
        except HistoryIOFailure as ex:
            print("Error writing to file:", ex)
            outcome.error = ex
        return outcome

    def clear_history(self):
        """
        Truncate the history log and reset the displayed history.

        Returns
        -------
        bool
            True if the log was cleared on disk.
        """
        self.history_lines = []
        try:
            self.history_log.clear()
        except HistoryIOFailure as ex:
            print("Error clearing history:", ex)
            return False
        return True

    def history_text(self):
        lines = [self.settings.history_banner, *self.history_lines]
        return "\n".join(lines) + "\n"
