"""
Conversation intent operations.
"""

import logging
from typing import List, Optional

from common.constants import (
    CURSOR_PARAM,
    EXPORT_PARAM,
    INCLUDE_COUNT_PARAM,
    PAGE_LIMIT_PARAM,
    SORT_PARAM,
)
from conversation.api.client import ConversationAPIClient
from conversation.api.request_builder import build_body
from conversation.api.workspaces import WORKSPACE_PATH
from conversation.models.intent import (
    CreateExample,
    CreateIntent,
    Intent,
    IntentCollection,
    IntentExport,
    UpdateIntent,
)

logger = logging.getLogger(__name__)

INTENTS_PATH = WORKSPACE_PATH + "/intents"
INTENT_PATH = INTENTS_PATH + "/{intent}"


class IntentOperations:
    """Handles Conversation intent operations."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        """Initialize intent operations.

        Args:
            client: Conversation API client (creates new if not provided)
        """
        self.client = client or ConversationAPIClient()

    async def list_intents(
        self,
        workspace_id: str,
        export: Optional[bool] = None,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> IntentCollection:
        """List the intents of a workspace.

        Args:
            workspace_id: Workspace ID
            export: Whether to include the examples of each intent
            page_limit: Number of records to return in each page of results
            include_count: Whether to include the total number of records
            sort: Property to sort by (prefix with ``-`` for descending)
            cursor: Token identifying the page of results to retrieve

        Returns:
            IntentCollection with intents and pagination
        """
        return await self.client.get(
            INTENTS_PATH,
            path_params={"workspace_id": workspace_id},
            query=[
                (EXPORT_PARAM, export),
                (PAGE_LIMIT_PARAM, page_limit),
                (INCLUDE_COUNT_PARAM, include_count),
                (SORT_PARAM, sort),
                (CURSOR_PARAM, cursor),
            ],
            response_model=IntentCollection,
        )

    async def create_intent(
        self,
        workspace_id: str,
        intent: str,
        description: Optional[str] = None,
        examples: Optional[List[CreateExample]] = None,
    ) -> Intent:
        """Create a new intent.

        Args:
            workspace_id: Workspace ID
            intent: Name of the intent
            description: Description of the intent
            examples: User input examples for the intent

        Returns:
            Created Intent
        """
        body = build_body(CreateIntent, intent=intent, description=description, examples=examples)
        created = await self.client.post(
            INTENTS_PATH,
            path_params={"workspace_id": workspace_id},
            body=body,
            response_model=Intent,
        )
        logger.info(f"Created intent {intent} in workspace {workspace_id}")
        return created

    async def get_intent(
        self, workspace_id: str, intent: str, export: Optional[bool] = None
    ) -> IntentExport:
        """Get information about an intent, optionally including its examples."""
        return await self.client.get(
            INTENT_PATH,
            path_params={"workspace_id": workspace_id, "intent": intent},
            query=[(EXPORT_PARAM, export)],
            response_model=IntentExport,
        )

    async def update_intent(
        self,
        workspace_id: str,
        intent: str,
        new_intent: Optional[str] = None,
        new_description: Optional[str] = None,
        new_examples: Optional[List[CreateExample]] = None,
    ) -> Intent:
        """Update an existing intent.

        Args:
            workspace_id: Workspace ID
            intent: Current name of the intent
            new_intent: New name of the intent
            new_description: New description of the intent
            new_examples: Examples replacing the existing ones

        Returns:
            Updated Intent
        """
        body = build_body(
            UpdateIntent, intent=new_intent, description=new_description, examples=new_examples
        )
        updated = await self.client.post(
            INTENT_PATH,
            path_params={"workspace_id": workspace_id, "intent": intent},
            body=body,
            response_model=Intent,
        )
        logger.info(f"Updated intent {intent} in workspace {workspace_id}")
        return updated

    async def delete_intent(self, workspace_id: str, intent: str) -> None:
        """Delete an intent from a workspace."""
        await self.client.delete(
            INTENT_PATH, path_params={"workspace_id": workspace_id, "intent": intent}
        )
        logger.info(f"Deleted intent {intent} from workspace {workspace_id}")
