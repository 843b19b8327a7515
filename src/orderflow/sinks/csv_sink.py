"""CSV file sink backed by the local filesystem."""

import csv
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ..core.exceptions import SinkError
from .base import BaseSink

logger = logging.getLogger(__name__)


class CSVFileSink(BaseSink):
    """Write rows as CSV files inside a storage directory."""

    def __init__(self, directory: Path | str, encoding: str = "utf-8"):
        self.directory = Path(directory)
        self.encoding = encoding

    def ensure_destination(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SinkError(f"Cannot create storage directory {self.directory}: {e}") from e

    def open(self, name: str) -> TextIO:
        path = self.directory / name
        try:
            handle = path.open("w", newline="", encoding=self.encoding)
        except OSError as e:
            raise SinkError(f"Cannot open {path} for writing: {e}") from e

        logger.debug(f"Opened CSV export {path}")
        return handle

    def write_row(self, handle: TextIO, fields: Sequence[str]) -> None:
        csv.writer(handle).writerow(fields)

    def close(self, handle: TextIO) -> None:
        handle.close()
