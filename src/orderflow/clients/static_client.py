"""Fixed-answer classification client for local runs and tests."""

from decimal import Decimal
from typing import Any

from ..core.models import ClassificationResponse
from .base import ClassificationClient


class StaticClassificationClient(ClassificationClient):
    """Return the same envelope for every order and record the ids asked for."""

    def __init__(self, status: str = "success", data: Decimal | int | float | None = 0):
        self.response = ClassificationResponse(status=status, data=data)
        self.calls: list[Any] = []

    def classify(self, order_id: Any) -> ClassificationResponse:
        self.calls.append(order_id)
        return self.response.model_copy()
