"""
HTTP classification client.

Calls the remote classification service with httpx and normalizes its
JSON body into a ClassificationResponse. Every way the call can fail
surfaces as ClassificationError; a well-formed body with a non-success
status is returned as-is for the caller to interpret.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..config import get_settings
from ..core.exceptions import ClassificationError
from ..core.models import ClassificationResponse
from .base import ClassificationClient

logger = logging.getLogger(__name__)


class HTTPClassificationClient(ClassificationClient):
    """Classify orders through `GET {base_url}/orders/{order_id}/classification`."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Service base URL. If None, uses settings.
            api_key: Bearer token. If None, uses settings.
            timeout_seconds: Per-call timeout. If None, uses settings.
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        settings = get_settings()
        self.base_url = (base_url if base_url is not None else settings.classification_api_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.classification_api_key
        self.timeout_seconds = timeout_seconds or settings.classification_timeout_seconds
        self._transport = transport
        self._client: httpx.Client | None = None

        if not self.base_url:
            logger.warning("Classification API URL is not set; type B orders will fail classification.")

    @property
    def client(self) -> httpx.Client:
        """Lazy-load the httpx client."""
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self.api_key:
                headers["Authorization"] = f"Bearer {self.api_key}"
            self._client = httpx.Client(
                timeout=self.timeout_seconds,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    def classify(self, order_id: Any) -> ClassificationResponse:
        if not self.base_url:
            raise ClassificationError("Classification API URL is not configured")

        url = f"{self.base_url}/orders/{quote(str(order_id), safe='')}/classification"
        try:
            response = self.client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Classification API returned {e.response.status_code} for order {order_id}")
            raise ClassificationError(
                f"Classification API returned HTTP {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Classification request for order {order_id} failed: {e}")
            raise ClassificationError(f"Classification request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Classification API sent a non-JSON body for order {order_id}")
            raise ClassificationError("Classification API returned invalid JSON") from e

        if not isinstance(payload, dict):
            raise ClassificationError("Classification API returned an unexpected payload")

        logger.debug(f"Classification for order {order_id}: {payload}")
        return ClassificationResponse(status=payload.get("status"), data=payload.get("data"))

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
