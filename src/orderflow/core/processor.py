"""Main order processing pipeline."""

import logging
import time
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from ..clients.base import ClassificationClient
from ..config import get_settings
from ..repositories.base import OrderRepository
from ..sinks.base import BaseSink
from ..sinks.csv_sink import CSVFileSink
from .exceptions import ClassificationError, PersistenceError, SinkError
from .models import Order, OrderStatus, OrderType, Priority

logger = logging.getLogger(__name__)

HIGH_PRIORITY_THRESHOLD = Decimal("200")
HIGH_VALUE_NOTE_THRESHOLD = Decimal("150")

# Type B rules
CLASSIFICATION_DATA_THRESHOLD = Decimal("50")
CLASSIFICATION_AMOUNT_LIMIT = Decimal("100")

CSV_HEADER = ["ID", "Type", "Amount", "Flag", "Status", "Priority"]
HIGH_VALUE_NOTE_ROW = ["", "", "", "", "Note", "High value order"]


class OrderProcessor:
    """
    Order post-processing pipeline.

    Orchestrates: Fetch -> Dispatch by type -> Priority -> Persist
    """

    def __init__(
        self,
        repository: OrderRepository,
        classification_client: ClassificationClient,
        sink: BaseSink | None = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize processor with its collaborators.

        If no sink is provided, orders are exported as CSV files into the
        configured storage directory.
        """
        self.repository = repository
        self.classification_client = classification_client
        self.sink = sink or CSVFileSink(get_settings().storage_dir)
        self.clock = clock

        self._handlers: dict[OrderType, Callable[[Order], None]] = {
            OrderType.A: self._export_to_csv,
            OrderType.B: self._classify_remotely,
            OrderType.C: self._apply_flag,
            OrderType.UNKNOWN: self._mark_unknown,
        }
        missing = set(OrderType) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler registered for order types: {sorted(missing)}")

    def process_all(self, user_id: int) -> list[Order]:
        """
        Process every order of a user and persist the results.

        Args:
            user_id: Owner of the orders

        Returns:
            The fetched orders, mutated in place, in fetch order

        Raises:
            Exception: Whatever the repository raises while fetching, and
                any non-persistence error raised while updating
        """
        orders = self.repository.fetch_orders_for_user(user_id)
        logger.info(f"Processing {len(orders)} orders for user {user_id}")

        for order in orders:
            self._dispatch(order)
            self._update_priority(order)
            self._persist(order)
            logger.debug(
                f"Order {order.id} ({order.kind.value}): "
                f"status={order.status.value} priority={order.priority.value}"
            )

        logger.info(f"Finished processing {len(orders)} orders for user {user_id}")
        return orders

    def _dispatch(self, order: Order) -> None:
        """Run the handler matching the order's type."""
        self._handlers[order.kind](order)

    def _export_to_csv(self, order: Order) -> None:
        """Type A: write the order to a CSV destination."""
        filename = f"orders_type_A_{self._safe_name_part(order.id)}_{int(self.clock())}.csv"

        try:
            self.sink.ensure_destination()
            handle = self.sink.open(filename)
        except SinkError as e:
            logger.warning(f"Export of order {order.id} failed: {e}")
            order.status = OrderStatus.EXPORT_FAILED
            return

        try:
            self._write_order_rows(handle, order)
        finally:
            self.sink.close(handle)

        order.status = OrderStatus.EXPORTED

    def _write_order_rows(self, handle: Any, order: Order) -> None:
        """Write header, data row and the optional high value note."""
        self.sink.write_row(handle, CSV_HEADER)
        self.sink.write_row(handle, [
            self._format_cell(order.id),
            self._format_cell(order.type),
            self._format_cell(order.amount),
            "true" if order.is_flagged else "false",
            order.status.value,
            order.priority.value,
        ])

        if order.amount_value > HIGH_VALUE_NOTE_THRESHOLD:
            self.sink.write_row(handle, HIGH_VALUE_NOTE_ROW)

    def _classify_remotely(self, order: Order) -> None:
        """Type B: derive the status from the classification service."""
        try:
            response = self.classification_client.classify(order.id)
        except ClassificationError as e:
            logger.warning(f"Classification of order {order.id} failed: {e}")
            order.status = OrderStatus.API_FAILURE
            return

        if not response.is_success:
            logger.warning(f"Classification of order {order.id} returned status {response.status!r}")
            order.status = OrderStatus.API_ERROR
            return

        order.status = self._classification_status(order, response.data_value)

    def _classification_status(self, order: Order, data: Decimal) -> OrderStatus:
        # The amount/data rule is checked before the flag, so a flagged
        # cheap order with high data is still "processed".
        if data >= CLASSIFICATION_DATA_THRESHOLD and order.amount_value < CLASSIFICATION_AMOUNT_LIMIT:
            return OrderStatus.PROCESSED
        if data < CLASSIFICATION_DATA_THRESHOLD or order.is_flagged:
            return OrderStatus.PENDING
        return OrderStatus.ERROR

    def _apply_flag(self, order: Order) -> None:
        """Type C: the flag alone decides."""
        order.status = OrderStatus.COMPLETED if order.is_flagged else OrderStatus.IN_PROGRESS

    def _mark_unknown(self, order: Order) -> None:
        order.status = OrderStatus.UNKNOWN_TYPE

    def _update_priority(self, order: Order) -> None:
        order.priority = Priority.HIGH if order.amount_value > HIGH_PRIORITY_THRESHOLD else Priority.LOW

    def _persist(self, order: Order) -> None:
        """Save status and priority; a store failure only downgrades this order."""
        try:
            self.repository.update_status(order.id, order.status, order.priority)
        except PersistenceError as e:
            logger.warning(f"Could not persist order {order.id}: {e}")
            order.status = OrderStatus.DB_ERROR

    def _safe_name_part(self, value: Any) -> str:
        # Destination names must stay inside the sink's directory.
        return self._format_cell(value).replace("/", "_").replace("\\", "_")

    def _format_cell(self, value: Any) -> str:
        """Format a value for CSV output."""
        if value is None:
            return ""
        return str(value)
