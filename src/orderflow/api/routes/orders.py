"""Order endpoints."""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...core.models import Order
from ...core.processor import OrderProcessor
from ...repositories import InMemoryOrderRepository, OrderRepository
from ..dependencies import get_processor, get_repository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users/{user_id}/orders", tags=["orders"])


class OrderCreate(BaseModel):
    """Payload for storing a new order."""

    id: int | str | None = None
    type: str | None = None
    amount: Decimal | float | str | None = None
    flag: bool | str | None = None


class ProcessResponse(BaseModel):
    """Response for a processing run."""

    user_id: int
    processed: int
    orders: list[Order]


@router.post("", response_model=Order, status_code=201)
def create_order(
    user_id: int,
    payload: OrderCreate,
    repository: OrderRepository = Depends(get_repository),
) -> Order:
    """Store a new order for the user with status 'new' and priority 'low'."""
    if not isinstance(repository, InMemoryOrderRepository):
        raise ValueError("The configured repository does not accept new orders")

    order = Order(**payload.model_dump())
    logger.info(f"Storing order {order.id} for user {user_id}")
    return repository.add_order(user_id, order)


@router.get("", response_model=list[Order])
def list_orders(
    user_id: int,
    repository: OrderRepository = Depends(get_repository),
) -> list[Order]:
    """List the orders stored for the user."""
    return repository.fetch_orders_for_user(user_id)


@router.post("/process", response_model=ProcessResponse)
def process_orders(
    user_id: int,
    processor: OrderProcessor = Depends(get_processor),
) -> ProcessResponse:
    """
    Process all orders of a user.

    Each order gets a status from its type-specific rule and a priority
    from its amount; both are saved back to the order store.
    """
    orders = processor.process_all(user_id)
    return ProcessResponse(user_id=user_id, processed=len(orders), orders=orders)
