"""Classification clients for type B orders."""

from .base import ClassificationClient
from .http_client import HTTPClassificationClient
from .static_client import StaticClassificationClient

__all__ = ["ClassificationClient", "HTTPClassificationClient", "StaticClassificationClient"]
