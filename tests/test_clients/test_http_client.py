"""Tests for classification clients."""

from decimal import Decimal

import httpx
import pytest

from orderflow.clients import HTTPClassificationClient, StaticClassificationClient
from orderflow.core.exceptions import ClassificationError
from orderflow.core.models import Order, OrderStatus


def make_client(handler, base_url: str = "http://classifier.test", api_key: str = "") -> HTTPClassificationClient:
    return HTTPClassificationClient(
        base_url=base_url,
        api_key=api_key,
        timeout_seconds=2.0,
        transport=httpx.MockTransport(handler),
    )


class TestHTTPClassificationClient:
    """Test cases for HTTPClassificationClient."""

    def test_success_envelope(self):
        """Test that a JSON body becomes a ClassificationResponse."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "success", "data": 60})

        response = make_client(handler, api_key="secret").classify(42)

        assert response.is_success
        assert response.data == Decimal("60")
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/orders/42/classification"
        assert seen[0].headers["Authorization"] == "Bearer secret"

    def test_non_success_envelope_is_returned(self):
        """Test that a well-formed failure envelope is not an exception."""
        client = make_client(lambda request: httpx.Response(200, json={"status": "error", "data": None}))

        response = client.classify(1)

        assert not response.is_success
        assert response.status == "error"

    def test_no_auth_header_without_key(self):
        """Test that the bearer token is optional."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "success", "data": 1})

        make_client(handler).classify(1)

        assert "Authorization" not in seen[0].headers

    def test_http_error_status(self):
        """Test that non-2xx responses raise ClassificationError."""
        client = make_client(lambda request: httpx.Response(503, text="unavailable"))

        with pytest.raises(ClassificationError, match="503"):
            client.classify(1)

    def test_transport_error(self):
        """Test that connection failures raise ClassificationError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ClassificationError):
            make_client(handler).classify(1)

    def test_timeout(self):
        """Test that timeouts raise ClassificationError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ClassificationError):
            make_client(handler).classify(1)

    def test_invalid_json(self):
        """Test that a non-JSON body raises ClassificationError."""
        client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ClassificationError, match="invalid JSON"):
            client.classify(1)

    def test_unexpected_payload(self):
        """Test that a JSON list is rejected."""
        client = make_client(lambda request: httpx.Response(200, json=[1, 2]))

        with pytest.raises(ClassificationError):
            client.classify(1)

    def test_order_id_is_path_encoded(self):
        """Test that an id with slashes cannot rewrite the request path."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "success", "data": 1})

        make_client(handler).classify("1/../../admin")

        assert seen[0].url.raw_path == b"/orders/1%2F..%2F..%2Fadmin/classification"

    def test_control_character_in_id_is_encoded(self):
        """Test that a newline in the id is sent percent-encoded."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "success", "data": 1})

        make_client(handler).classify("bad\nid")

        assert seen[0].url.raw_path == b"/orders/bad%0Aid/classification"

    def test_invalid_url(self):
        """Test that a URL httpx refuses to build raises ClassificationError."""
        client = make_client(lambda request: httpx.Response(200, json={}), base_url="http://classifier.test/api\n")

        with pytest.raises(ClassificationError):
            client.classify(1)

    def test_missing_base_url(self):
        """Test that an unconfigured client fails every call."""
        client = make_client(lambda request: httpx.Response(200, json={}), base_url="")

        with pytest.raises(ClassificationError, match="not configured"):
            client.classify(1)

    def test_settings_defaults(self, settings_env):
        """Test that URL and timeout come from settings."""
        client = HTTPClassificationClient()

        assert client.base_url == "http://classifier.test"
        assert client.timeout_seconds == 3.5


class TestStaticClassificationClient:
    """Test cases for StaticClassificationClient."""

    def test_returns_fixed_envelope(self):
        """Test that every call gets the same answer and is recorded."""
        client = StaticClassificationClient(status="success", data=55)

        first = client.classify("a")
        second = client.classify("b")

        assert first.data == second.data == Decimal("55")
        assert client.calls == ["a", "b"]


class TestHTTPClassificationInBatch:
    """The HTTP client plugged into the processor."""

    def test_unbuildable_request_does_not_abort_batch(self, make_processor):
        """Test that an invalid request URL only fails its own order."""
        client = make_client(
            lambda request: httpx.Response(200, json={"status": "success", "data": 60}),
            base_url="http://classifier.test/api\n",
        )
        orders = [
            Order(id="bad\nid", type="B", amount=80),
            Order(id=2, type="C", flag=True),
        ]
        processor, repository = make_processor(orders, client=client)

        result = processor.process_all(1)

        assert [o.status for o in result] == [OrderStatus.API_FAILURE, OrderStatus.COMPLETED]
        assert [u[0] for u in repository.updates] == ["bad\nid", 2]

    def test_awkward_order_ids_are_classified(self, make_processor):
        """Test that ids with slashes or newlines still reach the service."""
        client = make_client(lambda request: httpx.Response(200, json={"status": "success", "data": 60}))
        orders = [
            Order(id="bad\nid", type="B", amount=80),
            Order(id="1/../../admin", type="B", amount=80),
        ]
        processor, _ = make_processor(orders, client=client)

        result = processor.process_all(1)

        assert [o.status for o in result] == [OrderStatus.PROCESSED, OrderStatus.PROCESSED]
