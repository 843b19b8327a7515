"""Pytest configuration and fixtures."""

from decimal import Decimal
from typing import Any

import pytest

from orderflow.clients import ClassificationClient, StaticClassificationClient
from orderflow.config import get_settings
from orderflow.core.exceptions import ClassificationError, SinkError
from orderflow.core.models import ClassificationResponse, Order, OrderStatus, Priority
from orderflow.core.processor import OrderProcessor
from orderflow.repositories import OrderRepository
from orderflow.sinks import BaseSink, MemorySink

FIXED_TIMESTAMP = 1700000000


class RecordingRepository(OrderRepository):
    """Repository double that records every call and raises on demand."""

    def __init__(
        self,
        orders: list[Order] | None = None,
        fetch_error: Exception | None = None,
        update_errors: dict[Any, Exception] | None = None,
    ):
        self.orders = list(orders or [])
        self.fetch_error = fetch_error
        self.update_errors = dict(update_errors or {})
        self.fetch_calls: list[int] = []
        self.updates: list[tuple[Any, OrderStatus, Priority]] = []

    def fetch_orders_for_user(self, user_id: int) -> list[Order]:
        self.fetch_calls.append(user_id)
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.orders

    def update_status(self, order_id: Any, status: OrderStatus, priority: Priority) -> bool:
        self.updates.append((order_id, status, priority))
        error = self.update_errors.get(order_id)
        if error is not None:
            raise error
        return True


class UnreachableClassificationClient(ClassificationClient):
    """Classification client whose every call fails."""

    def __init__(self):
        self.calls: list[Any] = []

    def classify(self, order_id: Any) -> ClassificationResponse:
        self.calls.append(order_id)
        raise ClassificationError("connection timed out")


class UnopenableSink(MemorySink):
    """Sink that refuses to open any destination."""

    def __init__(self):
        super().__init__()
        self.rows_written = 0

    def open(self, name: str):
        raise SinkError(f"permission denied: {name}")

    def write_row(self, handle, fields) -> None:
        self.rows_written += 1


class BrokenWriteSink(MemorySink):
    """Sink that opens fine but fails on the first write."""

    def __init__(self):
        super().__init__()
        self.closed = 0

    def write_row(self, handle, fields) -> None:
        raise RuntimeError("disk full")

    def close(self, handle) -> None:
        self.closed += 1
        super().close(handle)


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def static_client() -> StaticClassificationClient:
    """Successful classification with data 60."""
    return StaticClassificationClient(status="success", data=60)


@pytest.fixture
def make_processor(memory_sink, static_client):
    """
    Build a processor around a RecordingRepository.

    Returns a factory: make_processor(orders, client=..., sink=..., **repo_kwargs)
    -> (processor, repository).
    """

    def _make(
        orders: list[Order] | None = None,
        client: ClassificationClient | None = None,
        sink: BaseSink | None = None,
        **repo_kwargs,
    ) -> tuple[OrderProcessor, RecordingRepository]:
        repository = RecordingRepository(orders, **repo_kwargs)
        processor = OrderProcessor(
            repository=repository,
            classification_client=client or static_client,
            sink=sink or memory_sink,
            clock=lambda: FIXED_TIMESTAMP,
        )
        return processor, repository

    return _make


@pytest.fixture
def mixed_high_value_orders() -> list[Order]:
    """One order of each kind, all above the high priority threshold."""
    return [
        Order(id=1, type="A", amount=Decimal("250"), flag=True),
        Order(id=2, type="B", amount=Decimal("300"), flag=True),
        Order(id=3, type="C", amount=Decimal("201"), flag=False),
        Order(id=4, type="Z", amount=Decimal("1000"), flag=False),
    ]


@pytest.fixture
def settings_env(monkeypatch, tmp_path):
    """Point settings at a temporary storage directory."""
    storage = tmp_path / "storage"
    monkeypatch.setenv("STORAGE_DIR", str(storage))
    monkeypatch.setenv("CLASSIFICATION_API_URL", "http://classifier.test/")
    monkeypatch.setenv("CLASSIFICATION_TIMEOUT_SECONDS", "3.5")
    get_settings.cache_clear()
    yield storage
    get_settings.cache_clear()


@pytest.fixture
def unreachable_client() -> UnreachableClassificationClient:
    return UnreachableClassificationClient()


@pytest.fixture
def unopenable_sink() -> UnopenableSink:
    return UnopenableSink()


@pytest.fixture
def broken_write_sink() -> BrokenWriteSink:
    return BrokenWriteSink()
