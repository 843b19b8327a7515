"""Pydantic models for orders and classification envelopes."""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class OrderType(str, Enum):
    """Closed set of order kinds the processor knows how to handle."""

    A = "A"
    B = "B"
    C = "C"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value: Any) -> "OrderType":
        """Map a raw discriminant to its kind; anything unrecognised is UNKNOWN."""
        if value in (cls.A.value, cls.B.value, cls.C.value):
            return cls(value)
        return cls.UNKNOWN


class OrderStatus(str, Enum):
    """Status of an order after processing."""

    NEW = "new"
    EXPORTED = "exported"
    EXPORT_FAILED = "export_failed"
    PROCESSED = "processed"
    PENDING = "pending"
    ERROR = "error"
    API_ERROR = "api_error"
    API_FAILURE = "api_failure"
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    UNKNOWN_TYPE = "unknown_type"
    DB_ERROR = "db_error"


class Priority(str, Enum):
    """Priority derived from the order amount."""

    LOW = "low"
    HIGH = "high"


def coerce_decimal(value: Any) -> Decimal | None:
    """Parse a numeric value leniently; unparseable input becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return parsed if parsed.is_finite() else None


def coerce_flag(value: Any) -> bool | None:
    """Parse a boolean leniently, accepting the usual string spellings."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return bool(value)


class Order(BaseModel):
    """
    A single unit of work flowing through the processing pipeline.

    Orders are loaded by a repository, mutated in place by the processor
    and handed back to the caller. Only `status` and `priority` change.
    """

    id: int | str | None = Field(default=None, description="Opaque order identifier")
    type: str | None = Field(default=None, description="Raw type discriminant (A, B, C or other)")
    amount: Decimal | None = Field(default=None, description="Monetary amount")
    flag: bool | None = Field(default=None)
    status: OrderStatus = Field(default=OrderStatus.NEW)
    priority: Priority = Field(default=Priority.LOW)

    @field_validator("type", mode="before")
    @classmethod
    def stringify_type(cls, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Decimal | None:
        return coerce_decimal(value)

    @field_validator("flag", mode="before")
    @classmethod
    def parse_flag(cls, value: Any) -> bool | None:
        return coerce_flag(value)

    @property
    def kind(self) -> OrderType:
        """Closed variant of the raw `type` discriminant."""
        return OrderType.from_raw(self.type)

    @property
    def amount_value(self) -> Decimal:
        """Amount for comparisons; a missing amount counts as zero."""
        return self.amount if self.amount is not None else Decimal("0")

    @property
    def is_flagged(self) -> bool:
        return bool(self.flag)


class ClassificationResponse(BaseModel):
    """Envelope returned by the remote classification service."""

    status: str = Field(default="", description="'success' or any other value on failure")
    data: Decimal | None = Field(default=None, description="Numeric payload for type B orders")

    @field_validator("status", mode="before")
    @classmethod
    def stringify_status(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("data", mode="before")
    @classmethod
    def parse_data(cls, value: Any) -> Decimal | None:
        return coerce_decimal(value)

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def data_value(self) -> Decimal:
        return self.data if self.data is not None else Decimal("0")
