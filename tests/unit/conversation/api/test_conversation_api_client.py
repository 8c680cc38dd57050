"""Tests for ConversationAPIClient."""

import base64
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from common.exception.exceptions import EncodingError, ServiceError, TransportError
from conversation.api.client import ConversationAPIClient
from conversation.models import Example, Workspace

SERVICE_URL = "https://conversation.test/api"


def basic(username, password):
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


@pytest.fixture
def no_env_credentials():
    """Clear the credentials read from the environment."""
    with patch("conversation.api.client.CONVERSATION_USERNAME", None), patch(
        "conversation.api.client.CONVERSATION_PASSWORD", None
    ), patch("conversation.api.client.CONVERSATION_BEARER_TOKEN", None):
        yield


class TestInitialization:
    """Test client configuration."""

    def test_defaults_from_config(self, no_env_credentials):
        """Test that unset arguments fall back to configuration."""
        with patch("conversation.api.client.CONVERSATION_URL", "https://env.test/api/"), patch(
            "conversation.api.client.CONVERSATION_VERSION", "2018-02-16"
        ):
            client = ConversationAPIClient()

        assert client.service_url == "https://env.test/api"
        assert client.version == "2018-02-16"
        assert client.username is None
        assert client.bearer_token is None

    def test_explicit_arguments(self):
        """Test that explicit arguments take precedence."""
        client = ConversationAPIClient(
            service_url=SERVICE_URL, version="2017-05-26", timeout=5, connect_timeout=2
        )

        assert client.service_url == SERVICE_URL
        assert client.version == "2017-05-26"
        assert client.timeout == 5
        assert client.connect_timeout == 2

    def test_environment_credentials_used_when_none_given(self):
        """Test that credentials come from the environment by default."""
        with patch("conversation.api.client.CONVERSATION_USERNAME", "env-user"), patch(
            "conversation.api.client.CONVERSATION_PASSWORD", "env-pass"
        ), patch("conversation.api.client.CONVERSATION_BEARER_TOKEN", None):
            client = ConversationAPIClient(service_url=SERVICE_URL)

        assert client.username == "env-user"
        assert client.password == "env-pass"

    def test_explicit_credentials_ignore_environment(self):
        """Test that any explicit credential disables the environment ones."""
        with patch("conversation.api.client.CONVERSATION_USERNAME", "env-user"), patch(
            "conversation.api.client.CONVERSATION_PASSWORD", "env-pass"
        ):
            client = ConversationAPIClient(service_url=SERVICE_URL, bearer_token="token")

        assert client.username is None
        assert client.bearer_token == "token"


class TestAuthHeaders:
    """Test the Authorization header."""

    @pytest.mark.asyncio
    async def test_basic_auth(self):
        client = ConversationAPIClient(service_url=SERVICE_URL, username="user", password="secret")

        headers = await client._get_auth_headers()

        assert headers == {"Authorization": basic("user", "secret")}

    @pytest.mark.asyncio
    async def test_static_bearer_token(self):
        client = ConversationAPIClient(service_url=SERVICE_URL, bearer_token="abc")

        assert await client._get_auth_headers() == {"Authorization": "Bearer abc"}

    @pytest.mark.asyncio
    async def test_token_provider_takes_precedence(self):
        """Test that the token provider is asked on every call."""
        provider = AsyncMock(side_effect=["first", "second"])
        client = ConversationAPIClient(
            service_url=SERVICE_URL, bearer_token="static", token_provider=provider
        )

        assert await client._get_auth_headers() == {"Authorization": "Bearer first"}
        assert await client._get_auth_headers() == {"Authorization": "Bearer second"}
        assert provider.await_count == 2

    @pytest.mark.asyncio
    async def test_no_credentials(self, no_env_credentials):
        client = ConversationAPIClient(service_url=SERVICE_URL)

        assert await client._get_auth_headers() == {}


class TestRequest:
    """Test sending requests through the transport."""

    @pytest.mark.asyncio
    async def test_get_sends_version_and_auth(self, server, api_client):
        """Test the shape of a request as seen by the transport."""
        server.respond(200, json={"text": "hello"})

        example = await api_client.get(
            "/v1/workspaces/{workspace_id}/intents/{intent}/examples/{text}",
            path_params={"workspace_id": "ws-1", "intent": "greeting", "text": "hello there"},
            response_model=Example,
        )

        assert example.text == "hello"
        request = server.last_request
        assert request.method == "GET"
        assert request.url.host == "conversation.test"
        assert server.last_path == "/api/v1/workspaces/ws-1/intents/greeting/examples/hello%20there"
        assert server.last_query == [("version", "2017-05-26")]
        assert request.headers["Authorization"] == basic("user", "secret")
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_default_headers_are_sent(self, server):
        client = ConversationAPIClient(
            service_url=SERVICE_URL,
            bearer_token="abc",
            default_headers={"X-Watson-Learning-Opt-Out": "true"},
            transport=server.transport,
        )
        server.respond(204)

        await client.delete("/v1/workspaces/{workspace_id}", path_params={"workspace_id": "ws-1"})

        assert server.last_request.method == "DELETE"
        assert server.last_request.headers["X-Watson-Learning-Opt-Out"] == "true"
        assert server.last_request.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_encoding_error_sends_nothing(self, server, api_client):
        """Test that request construction failures happen before any I/O."""
        with pytest.raises(EncodingError):
            await api_client.get("/v1/workspaces/{workspace_id}", path_params={"workspace_id": ""})

        assert server.requests == []

    @pytest.mark.asyncio
    async def test_service_error(self, server, api_client):
        server.respond(404, json={"error": "Resource not found", "code": 404})

        with pytest.raises(ServiceError) as exc_info:
            await api_client.get(
                "/v1/workspaces/{workspace_id}",
                path_params={"workspace_id": "missing"},
                response_model=Workspace,
            )

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Resource not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error", [httpx.ConnectError("connection refused"), httpx.ReadTimeout("timed out")]
    )
    async def test_transport_failures(self, error):
        """Test that network failures are surfaced as TransportError."""

        def handler(request):
            raise error

        client = ConversationAPIClient(
            service_url=SERVICE_URL, bearer_token="abc", transport=httpx.MockTransport(handler)
        )

        with pytest.raises(TransportError) as exc_info:
            await client.get("/v1/workspaces", response_model=Workspace)

        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_timeouts_are_applied(self):
        """Test that the configured timeouts reach the HTTP client."""
        client = ConversationAPIClient(
            service_url=SERVICE_URL, bearer_token="abc", timeout=12.5, connect_timeout=3
        )
        response = httpx.Response(200, json={"text": "hi"})

        with patch.object(
            client, "_execute_http_request", new=AsyncMock(return_value=response)
        ) as mock_execute:
            await client.get("/v1/workspaces", response_model=Example)

        timeout_config = mock_execute.await_args.args[2]
        assert timeout_config.read == 12.5
        assert timeout_config.connect == 3

    @pytest.mark.asyncio
    async def test_client_is_reusable(self, server, api_client):
        """Test that one client serves several independent calls."""
        server.respond(500)
        server.respond(200, json={"text": "ok"})

        with pytest.raises(ServiceError):
            await api_client.get("/v1/workspaces", response_model=Example)
        example = await api_client.get("/v1/workspaces", response_model=Example)

        assert example.text == "ok"
        assert len(server.requests) == 2
