"""
Application settings.

Everything here is a compiled-in constant except the history file location,
which may be overridden through the environment (or a `.env` file picked up
by python-dotenv):

- UNIT_CONVERTER_HISTORY_FILE
    Path of the conversion history text file. Defaults to
    `conversion_history.txt` in the working directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


HISTORY_FILE_ENV = "UNIT_CONVERTER_HISTORY_FILE"
DEFAULT_HISTORY_FILE = "conversion_history.txt"


@dataclass(frozen=True)
class Settings:
    history_file: Path = Path(DEFAULT_HISTORY_FILE)
    result_decimals: int = 4
    history_banner: str = "Conversion History:"
    invalid_input_text: str = "Invalid Input"
    window_title: str = "Advanced Unit Converter"
    window_size: str = "500x600"

    @classmethod
    def from_env(cls):
        """
        Build settings, reading the history path override if one is set.
        """
        load_dotenv()
        history_file = os.getenv(HISTORY_FILE_ENV) or DEFAULT_HISTORY_FILE
        return cls(history_file=Path(history_file))
