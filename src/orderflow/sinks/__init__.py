"""Row sinks for order exports."""

from .base import BaseSink
from .csv_sink import CSVFileSink
from .memory_sink import MemorySink

__all__ = ["BaseSink", "CSVFileSink", "MemorySink"]
