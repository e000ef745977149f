"""
Append-only text log of completed conversions.

This module provides a `HistoryLog` class that owns one plain-text file:
- One entry per line, in the order the conversions happened.
- The file is opened only for the duration of each call and closed
  immediately afterwards; no handle is kept between operations.
- The file is created on the first append. A missing file is a valid
  initial state and reads back as an empty history.

Line format (written by `HistoryEntry.__str__`):

    <value %.2f> <from unit> = <result %.4f> <to unit>

Note:
- Entries are never edited or removed individually; the log is either
  appended to or cleared as a whole.
- Concurrent writers from other processes are not coordinated.
- Any OS-level failure is re-raised as `HistoryIOFailure` so callers can
  report it without dealing with `OSError` subclasses.
"""

from pathlib import Path

from ConversionErrors import HistoryIOFailure


class HistoryLog:
    """
    File-backed conversion history.

    Attributes
    ----------
    path : pathlib.Path
        Location of the history text file.
    """

    def __init__(self, path):
        self.path = Path(path)

    def exists(self):
        """
        Return True if the history file is present as a regular file.

        Paths the OS refuses to stat (too long, no permission) count as
        missing rather than raising.
        """
        try:
            return self.path.is_file()
        except OSError:
            return False

    def load_all(self):
        """
        Yield every stored line, oldest first, without the line terminator.

        The file is re-read from the start on every call and closed before
        the first line is yielded. Nothing is yielded if the file does not
        exist yet.

        Raises
        ------
        HistoryIOFailure
            If the file exists but cannot be read.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = [line.rstrip("\r\n") for line in f]
        except FileNotFoundError:
            return
        except OSError as ex:
            raise HistoryIOFailure("read", self.path, ex) from ex
        yield from lines

    def append(self, entry):
        """
        Append one entry as a single line.

        Args:
            entry (HistoryEntry | str): Rendered with `str()`; must not
                contain a line break.

        Raises:
            ValueError: If the rendered entry spans more than one line.
            HistoryIOFailure: If the file cannot be opened or written.
        """
        line = str(entry)
        if "\n" in line or "\r" in line:
            raise ValueError("History entries must fit on a single line.")
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as ex:
            raise HistoryIOFailure("append", self.path, ex) from ex

    def clear(self):
        """
        Truncate the history file to zero length.

        The file itself is kept (or created empty if it was missing).

        Raises:
            HistoryIOFailure: If the file cannot be truncated.
        """
        try:
            with open(self.path, "w", encoding="utf-8"):
                pass
        except OSError as ex:
            raise HistoryIOFailure("clear", self.path, ex) from ex
