"""Order repositories."""

from .base import OrderRepository
from .memory import InMemoryOrderRepository

__all__ = ["InMemoryOrderRepository", "OrderRepository"]
