"""Base classification client interface."""

from abc import ABC, abstractmethod
from typing import Any

from ..core.models import ClassificationResponse


class ClassificationClient(ABC):
    """Abstract remote classification capability for type B orders."""

    @abstractmethod
    def classify(self, order_id: Any) -> ClassificationResponse:
        """
        Classify an order remotely.

        Args:
            order_id: Identifier of the order to classify

        Returns:
            ClassificationResponse envelope (success or not)

        Raises:
            ClassificationError: If the call itself could not be completed
        """
        pass
