"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import httpx
import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from conversation.api.client import ConversationAPIClient  # noqa: E402
from conversation.service import ConversationService  # noqa: E402

SERVICE_URL = "https://conversation.test/api"
VERSION = "2017-05-26"


class FakeConversationServer:
    """Records requests sent through an httpx.MockTransport and replays queued responses."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: List[httpx.Response] = []
        self.transport = httpx.MockTransport(self._handle)

    def respond(self, status_code: int = 200, json: Any = None, content: Optional[bytes] = None):
        if json is not None:
            self._responses.append(httpx.Response(status_code, json=json))
        else:
            self._responses.append(httpx.Response(status_code, content=content or b""))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(500, json={"error": "no response queued"})
        return self._responses.pop(0)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        """Raw (still percent-encoded) path of the last request."""
        return self.last_request.url.raw_path.decode("ascii").split("?")[0]

    @property
    def last_query(self) -> List[Tuple[str, str]]:
        return self.last_request.url.params.multi_items()

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def pagination():
    """Minimal pagination object of a collection response."""
    return {"refresh_url": "/v1/workspaces?version=2017-05-26"}


@pytest.fixture
def server():
    """Fake service answering through an in-memory transport."""
    return FakeConversationServer()


@pytest.fixture
def api_client(server):
    """API client with basic credentials wired to the fake server."""
    return ConversationAPIClient(
        service_url=SERVICE_URL,
        version=VERSION,
        username="user",
        password="secret",
        transport=server.transport,
    )


@pytest.fixture
def service(server):
    """ConversationService wired to the fake server."""
    return ConversationService(
        service_url=SERVICE_URL,
        version=VERSION,
        username="user",
        password="secret",
        transport=server.transport,
    )
