"""Pytest configuration and fixtures for codeengine-client tests."""

import json
from typing import Any, Callable, Dict, List, Optional, Union

import httpx
import pytest
import respx

from codeengine_client.auth import BearerTokenAuthenticator
from codeengine_client.client import CodeEngineClient

SERVICE_URL = "https://api.example.test/v2"


# ============================================================================
# Mock server
# ============================================================================


class MockServer:
    """
    Serves queued responses through ``httpx.MockTransport``.

    Every request that reaches the transport is recorded, so tests can
    assert on request shapes and on how many calls were made.
    """

    def __init__(self, handler: Optional[Callable[[httpx.Request], Any]] = None):
        self.requests: List[httpx.Request] = []
        self._queue: List[Union[httpx.Response, Exception]] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def queue(self, *responses: Union[httpx.Response, Exception]) -> "MockServer":
        self._queue.extend(responses)
        return self

    def _handle(self, request: httpx.Request):
        self.requests.append(request)
        if self._handler is not None:
            return self._handler(request)
        if not self._queue:
            return httpx.Response(500, json={"message": "no response queued"})
        response = self._queue.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def json_body(request: httpx.Request) -> Any:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)


def error_body(code: str, message: str, status_code: int) -> Dict[str, Any]:
    """Error body in the shape the service returns."""
    return {
        "errors": [{"code": code, "message": message}],
        "status_code": status_code,
        "trace": "trace-0123",
    }


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def service_url():
    """Default service URL for testing."""
    return SERVICE_URL


@pytest.fixture
def server():
    """Mock server with an empty response queue."""
    return MockServer()


@pytest.fixture
def authenticator():
    return BearerTokenAuthenticator("test-token")


@pytest.fixture
def client(server, authenticator):
    """Client wired to the mock server."""
    return CodeEngineClient(SERVICE_URL, authenticator=authenticator, transport=server.transport)


@pytest.fixture
def project_data():
    """Project as returned by the service."""
    return {
        "account_id": "acc-1",
        "created_at": "2024-01-01T12:00:00Z",
        "crn": "crn:v1:bluemix:public:codeengine:us-east:a/acc-1:proj-1::",
        "href": f"{SERVICE_URL}/projects/proj-1",
        "id": "proj-1",
        "name": "my-project",
        "region": "us-east",
        "resource_group_id": "rg-1",
        "resource_type": "project_v2",
        "status": "active",
    }


@pytest.fixture
def respx_mock():
    """respx router for clients created without a custom transport."""
    with respx.mock(base_url=SERVICE_URL, assert_all_called=False) as mock:
        yield mock
