"""
Main Conversation Service - Unified facade for all Conversation operations.

This service provides a single entry point for:
- Workspace management (workspaces, intents, entities, dialog nodes)
- Training data (examples, values, synonyms, counterexamples)
- Message exchange and conversation logs
"""

from typing import List, Mapping, Optional, Union

import httpx

from conversation.api.client import ConversationAPIClient, TokenProvider
from conversation.api.counterexamples import CounterexampleOperations
from conversation.api.dialog_nodes import DialogNodeOperations
from conversation.api.entities import EntityOperations
from conversation.api.examples import ExampleOperations
from conversation.api.intents import IntentOperations
from conversation.api.logs import LogOperations
from conversation.api.message import MessageOperations
from conversation.api.synonyms import SynonymOperations
from conversation.api.values import ValueOperations
from conversation.api.workspaces import WorkspaceOperations
from conversation.models.message import (
    Context,
    InputData,
    MessageResponse,
    OutputData,
    RuntimeEntity,
    RuntimeIntent,
)


class ConversationService:
    """
    Unified Conversation service providing all Conversation functionality.

    All operation groups share one API client, and therefore one service URL,
    API version and set of credentials.
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
        """Initialize Conversation service.

        Args:
            service_url: Base URL of the service (defaults to config)
            version: API version date, "YYYY-MM-DD" (defaults to config)
            username: Basic authentication username (defaults to config)
            password: Basic authentication password (defaults to config)
            bearer_token: Static bearer token (defaults to config)
            token_provider: Async callable returning a bearer token per call
            default_headers: Headers sent with every request
            timeout: Request timeout in seconds (defaults to config)
            connect_timeout: Connect timeout in seconds (defaults to config)
            transport: httpx transport to send requests through
        """
        self.api_client = ConversationAPIClient(
            service_url=service_url,
            version=version,
            username=username,
            password=password,
            bearer_token=bearer_token,
            token_provider=token_provider,
            default_headers=default_headers,
            timeout=timeout,
            connect_timeout=connect_timeout,
            transport=transport,
        )

        self.workspaces = WorkspaceOperations(client=self.api_client)
        self.intents = IntentOperations(client=self.api_client)
        self.examples = ExampleOperations(client=self.api_client)
        self.entities = EntityOperations(client=self.api_client)
        self.values = ValueOperations(client=self.api_client)
        self.synonyms = SynonymOperations(client=self.api_client)
        self.counterexamples = CounterexampleOperations(client=self.api_client)
        self.dialog_nodes = DialogNodeOperations(client=self.api_client)
        self.logs = LogOperations(client=self.api_client)
        self.messages = MessageOperations(client=self.api_client)

    async def message(
        self,
        workspace_id: str,
        input: Optional[Union[InputData, str]] = None,
        alternate_intents: Optional[bool] = None,
        context: Optional[Context] = None,
        entities: Optional[List[RuntimeEntity]] = None,
        intents: Optional[List[RuntimeIntent]] = None,
        output: Optional[OutputData] = None,
    ) -> MessageResponse:
        """Send user input to a workspace (see MessageOperations.message)."""
        return await self.messages.message(
            workspace_id,
            input=input,
            alternate_intents=alternate_intents,
            context=context,
            entities=entities,
            intents=intents,
            output=output,
        )
