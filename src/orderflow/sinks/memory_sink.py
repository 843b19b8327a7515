"""In-memory sink, useful for previews and tests."""

import csv
import io
from collections.abc import Sequence

from .base import BaseSink


class MemorySink(BaseSink):
    """
    Keep every destination as a CSV string in memory.

    Content is available through `contents` once the handle is closed.
    """

    def __init__(self):
        self.contents: dict[str, str] = {}
        self._open: dict[int, tuple[str, io.StringIO]] = {}

    def open(self, name: str) -> io.StringIO:
        buffer = io.StringIO()
        self._open[id(buffer)] = (name, buffer)
        return buffer

    def write_row(self, handle: io.StringIO, fields: Sequence[str]) -> None:
        csv.writer(handle).writerow(fields)

    def close(self, handle: io.StringIO) -> None:
        name, buffer = self._open.pop(id(handle))
        self.contents[name] = buffer.getvalue()

    def rows(self, name: str) -> list[list[str]]:
        """Parse a closed destination back into rows."""
        return list(csv.reader(io.StringIO(self.contents[name])))

    @property
    def open_count(self) -> int:
        """Number of destinations opened but not yet closed."""
        return len(self._open)
