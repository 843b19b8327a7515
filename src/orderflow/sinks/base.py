"""Base sink interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class BaseSink(ABC):
    """Abstract base class for row-oriented export destinations."""

    def ensure_destination(self) -> None:
        """
        Make sure the underlying storage location exists.

        Must be idempotent. The default implementation does nothing, which
        suits sinks without a physical location.

        Raises:
            SinkError: If the location cannot be created
        """

    @abstractmethod
    def open(self, name: str) -> Any:
        """
        Open a named destination for writing.

        Args:
            name: Destination name (e.g. a file name)

        Returns:
            Handle to pass to write_row and close

        Raises:
            SinkError: If the destination cannot be opened
        """
        pass

    @abstractmethod
    def write_row(self, handle: Any, fields: Sequence[str]) -> None:
        """Write one row of fields to an open destination."""
        pass

    @abstractmethod
    def close(self, handle: Any) -> None:
        """Close a destination returned by open."""
        pass
