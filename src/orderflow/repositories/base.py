"""Base order repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from ..core.models import Order, OrderStatus, Priority


class OrderRepository(ABC):
    """Abstract data-access capability used by the order processor."""

    @abstractmethod
    def fetch_orders_for_user(self, user_id: int) -> list[Order]:
        """
        Load the orders belonging to a user.

        Any exception raised here is fatal to the whole batch.

        Args:
            user_id: Owner of the orders

        Returns:
            Orders in store order, possibly empty
        """
        pass

    @abstractmethod
    def update_status(self, order_id: Any, status: OrderStatus, priority: Priority) -> bool:
        """
        Persist the processed status and priority of an order.

        Raises:
            PersistenceError: If the store rejects or fails the update
        """
        pass
