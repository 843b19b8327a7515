"""Core module - models and exceptions."""

from .exceptions import ClassificationError, OrderFlowError, PersistenceError, SinkError
from .models import ClassificationResponse, Order, OrderStatus, OrderType, Priority

__all__ = [
    "ClassificationError",
    "ClassificationResponse",
    "Order",
    "OrderFlowError",
    "OrderStatus",
    "OrderType",
    "PersistenceError",
    "Priority",
    "SinkError",
]
