"""In-memory order repository."""

import logging
import threading
from typing import Any

from ..core.exceptions import PersistenceError
from ..core.models import Order, OrderStatus, Priority
from .base import OrderRepository

logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    Keep orders in a process-local dict keyed by user id.

    Fetches hand out copies, so the stored records only change through
    update_status.
    """

    def __init__(self):
        self._orders: dict[int, list[Order]] = {}
        self._lock = threading.Lock()

    def add_order(self, user_id: int, order: Order) -> Order:
        """Store an order for a user and return the stored copy."""
        stored = order.model_copy()
        with self._lock:
            self._orders.setdefault(user_id, []).append(stored)
        return stored.model_copy()

    def list_orders(self, user_id: int) -> list[Order]:
        with self._lock:
            return [order.model_copy() for order in self._orders.get(user_id, [])]

    def fetch_orders_for_user(self, user_id: int) -> list[Order]:
        orders = self.list_orders(user_id)
        logger.debug(f"Fetched {len(orders)} orders for user {user_id}")
        return orders

    def update_status(self, order_id: Any, status: OrderStatus, priority: Priority) -> bool:
        updated = 0
        with self._lock:
            for orders in self._orders.values():
                for order in orders:
                    if order.id is not None and order.id == order_id:
                        order.status = status
                        order.priority = priority
                        updated += 1

        if not updated:
            raise PersistenceError(f"No stored order with id {order_id!r}")
        return True
