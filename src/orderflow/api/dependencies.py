"""FastAPI dependencies wiring the processor to its collaborators."""

from functools import lru_cache

from fastapi import Depends

from ..clients import ClassificationClient, HTTPClassificationClient
from ..core.processor import OrderProcessor
from ..repositories import InMemoryOrderRepository, OrderRepository

# Process-local order store (replace with a database-backed repository later)
_repository = InMemoryOrderRepository()


def get_repository() -> OrderRepository:
    return _repository


@lru_cache
def get_classification_client() -> ClassificationClient:
    """Get cached HTTP classification client built from settings."""
    return HTTPClassificationClient()


def get_processor(
    repository: OrderRepository = Depends(get_repository),
    classification_client: ClassificationClient = Depends(get_classification_client),
) -> OrderProcessor:
    return OrderProcessor(repository, classification_client)


def close_classification_client() -> None:
    """Close the cached HTTP client, if one was ever built."""
    if get_classification_client.cache_info().currsize:
        client = get_classification_client()
        if isinstance(client, HTTPClassificationClient):
            client.close()
        get_classification_client.cache_clear()
