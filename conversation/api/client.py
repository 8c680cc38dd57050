"""
Conversation API client for making authenticated requests.
Supports basic authentication and bearer tokens (static or from a provider).
"""

import base64
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Sequence, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel

from common.config.config import (
    CONVERSATION_BEARER_TOKEN,
    CONVERSATION_CONNECT_TIMEOUT,
    CONVERSATION_PASSWORD,
    CONVERSATION_REQUEST_TIMEOUT,
    CONVERSATION_URL,
    CONVERSATION_USERNAME,
    CONVERSATION_VERSION,
)
from common.exception.exceptions import (
    ConversationError,
    DecodeError,
    ServiceError,
    TransportError,
)
from conversation.api.request_builder import RequestDescriptor, build_request
from conversation.api.response_dispatcher import dispatch_response

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

TokenProvider = Callable[[], Awaitable[str]]


class ConversationAPIClient:
    """Base client for Conversation API interactions.

    The client holds only immutable configuration, so one instance can serve
    any number of concurrent calls.
    """

    def __init__(
        self,
        service_url: Optional[str] = None,
        version: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        bearer_token: Optional[str] = None,
        token_provider: Optional[TokenProvider] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Conversation API client.

        Args:
            service_url: Base URL of the service (defaults to config)
            version: API version date, "YYYY-MM-DD" (defaults to config)
            username: Basic authentication username
            password: Basic authentication password
            bearer_token: Static bearer token
            token_provider: Async callable returning a bearer token per call
            default_headers: Headers sent with every request
            timeout: Request timeout in seconds (defaults to config)
            connect_timeout: Connect timeout in seconds (defaults to config)
            transport: httpx transport to send requests through (defaults to network)
        """
        if username is None and password is None and bearer_token is None and token_provider is None:
            username = CONVERSATION_USERNAME
            password = CONVERSATION_PASSWORD
            bearer_token = CONVERSATION_BEARER_TOKEN

        self.service_url = (service_url or CONVERSATION_URL).rstrip("/")
        self.version = version or CONVERSATION_VERSION
        self.username = username
        self.password = password
        self.bearer_token = bearer_token
        self.default_headers = dict(default_headers or {})
        self.timeout = timeout if timeout is not None else CONVERSATION_REQUEST_TIMEOUT
        self.connect_timeout = (
            connect_timeout if connect_timeout is not None else CONVERSATION_CONNECT_TIMEOUT
        )
        self._token_provider = token_provider
        self._transport = transport

        if token_provider or bearer_token:
            logger.info(f"Conversation API client initialized for {self.service_url} with bearer authentication")
        elif username and password:
            logger.info(f"Conversation API client initialized for {self.service_url} with basic authentication")
        else:
            logger.warning("Conversation API client initialized without credentials - authentication may fail")

    async def _get_token(self) -> Optional[str]:
        """Get bearer token (from the provider, else the static token).

        Returns:
            Bearer token or None
        """
        if self._token_provider:
            return await self._token_provider()
        return self.bearer_token

    async def _get_auth_headers(self) -> Dict[str, str]:
        """Get the Authorization header for a request.

        Returns:
            Headers dictionary (empty without credentials)
        """
        token = await self._get_token()
        if token:
            return {"Authorization": f"Bearer {token}"}
        if self.username is not None and self.password is not None:
            credentials = f"{self.username}:{self.password}".encode("utf-8")
            return {"Authorization": f"Basic {base64.b64encode(credentials).decode('ascii')}"}
        return {}

    async def request(
        self,
        method: str,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[Sequence[Tuple[str, Any]]] = None,
        body: Optional[BaseModel] = None,
        response_model: Optional[Type[RecordT]] = None,
    ) -> Optional[RecordT]:
        """Make a Conversation API request.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path template with ``{name}`` placeholders
            path_params: Values for the path placeholders
            query: Optional query parameters as (name, value) pairs
            body: Request body record
            response_model: Record type of the response body (None for no result)

        Returns:
            Decoded response record, or None for an empty success

        Raises:
            EncodingError: If a path parameter cannot be encoded (no request is sent)
            SerializationError: If the body cannot be serialized (no request is sent)
            TransportError: If the request could not be completed
            ServiceError: If the service answered with a non-2xx status
            DecodeError: If the response body does not match response_model
        """
        try:
            descriptor = build_request(
                method,
                self.service_url,
                path,
                self.version,
                path_params=path_params,
                query=query,
                body=body,
                headers=self.default_headers,
            )
        except ConversationError as e:
            logger.error(f"Failed to build Conversation API {method} request for {path}: {e}")
            raise

        headers = dict(descriptor.headers)
        headers.update(await self._get_auth_headers())

        try:
            timeout_config = httpx.Timeout(self.timeout, connect=self.connect_timeout)
            response = await self._execute_http_request(descriptor, headers, timeout_config)
        except httpx.RequestError as e:
            error_msg = f"Conversation API request error: {e}"
            logger.error(error_msg)
            raise TransportError(error_msg) from e

        return self._process_response(response, descriptor, response_model)

    async def _execute_http_request(
        self,
        descriptor: RequestDescriptor,
        headers: Dict[str, str],
        timeout_config: httpx.Timeout,
    ) -> httpx.Response:
        """Send a request descriptor through the transport.

        Args:
            descriptor: Request to send
            headers: Final request headers (including Authorization)
            timeout_config: Timeout configuration

        Returns:
            HTTP response
        """
        async with httpx.AsyncClient(
            timeout=timeout_config, transport=self._transport, trust_env=False
        ) as client:
            return await client.request(
                descriptor.method,
                descriptor.url,
                params=descriptor.query_items,
                headers=headers,
                content=descriptor.body,
            )

    def _process_response(
        self,
        response: httpx.Response,
        descriptor: RequestDescriptor,
        response_model: Optional[Type[RecordT]],
    ) -> Optional[RecordT]:
        """Classify an HTTP response and decode its body.

        Args:
            response: HTTP response object
            descriptor: Request that produced the response
            response_model: Expected record type

        Returns:
            Decoded record or None
        """
        try:
            result = dispatch_response(response.status_code, response.content, response_model)
        except ServiceError as e:
            logger.error(
                f"Conversation API {descriptor.method} request to {descriptor.url} "
                f"failed (status {e.status_code}): {e.message or e.body}"
            )
            raise
        except DecodeError as e:
            logger.error(
                f"Conversation API {descriptor.method} response from {descriptor.url} "
                f"could not be decoded: {e}"
            )
            raise

        logger.info(
            f"Conversation API {descriptor.method} request to {descriptor.url} "
            f"successful (status: {response.status_code})"
        )
        return result

    async def get(
        self,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[Sequence[Tuple[str, Any]]] = None,
        response_model: Optional[Type[RecordT]] = None,
    ) -> Optional[RecordT]:
        """Make a GET request."""
        return await self.request(
            "GET", path, path_params=path_params, query=query, response_model=response_model
        )

    async def post(
        self,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        body: Optional[BaseModel] = None,
        response_model: Optional[Type[RecordT]] = None,
    ) -> Optional[RecordT]:
        """Make a POST request."""
        return await self.request(
            "POST", path, path_params=path_params, body=body, response_model=response_model
        )

    async def delete(
        self,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Make a DELETE request."""
        await self.request("DELETE", path, path_params=path_params)
