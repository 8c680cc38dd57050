"""
Conversation intent example operations.
"""

import logging
from typing import Optional

from common.constants import CURSOR_PARAM, INCLUDE_COUNT_PARAM, PAGE_LIMIT_PARAM, SORT_PARAM
from conversation.api.client import ConversationAPIClient
from conversation.api.intents import INTENT_PATH
from conversation.api.request_builder import build_body
from conversation.models.intent import CreateExample, Example, ExampleCollection, UpdateExample

logger = logging.getLogger(__name__)

EXAMPLES_PATH = INTENT_PATH + "/examples"
EXAMPLE_PATH = EXAMPLES_PATH + "/{text}"


class ExampleOperations:
    """Handles user input examples of an intent."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        self.client = client or ConversationAPIClient()

    async def list_examples(
        self,
        workspace_id: str,
        intent: str,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> ExampleCollection:
        """List the user input examples of an intent.

        Args:
            workspace_id: Workspace ID
            intent: Intent name
            page_limit: Number of records to return in each page of results
            include_count: Whether to include the total number of records
            sort: Property to sort by (prefix with ``-`` for descending)
            cursor: Token identifying the page of results to retrieve

        Returns:
            ExampleCollection with examples and pagination
        """
        return await self.client.get(
            EXAMPLES_PATH,
            path_params={"workspace_id": workspace_id, "intent": intent},
            query=[
                (PAGE_LIMIT_PARAM, page_limit),
                (INCLUDE_COUNT_PARAM, include_count),
                (SORT_PARAM, sort),
                (CURSOR_PARAM, cursor),
            ],
            response_model=ExampleCollection,
        )

    async def create_example(self, workspace_id: str, intent: str, text: str) -> Example:
        """Add a user input example to an intent."""
        example = await self.client.post(
            EXAMPLES_PATH,
            path_params={"workspace_id": workspace_id, "intent": intent},
            body=build_body(CreateExample, text=text),
            response_model=Example,
        )
        logger.info(f"Created example for intent {intent} in workspace {workspace_id}")
        return example

    async def get_example(self, workspace_id: str, intent: str, text: str) -> Example:
        """Get a user input example of an intent."""
        return await self.client.get(
            EXAMPLE_PATH,
            path_params={"workspace_id": workspace_id, "intent": intent, "text": text},
            response_model=Example,
        )

    async def update_example(
        self, workspace_id: str, intent: str, text: str, new_text: Optional[str] = None
    ) -> Example:
        """Update the text of a user input example."""
        example = await self.client.post(
            EXAMPLE_PATH,
            path_params={"workspace_id": workspace_id, "intent": intent, "text": text},
            body=build_body(UpdateExample, text=new_text),
            response_model=Example,
        )
        logger.info(f"Updated example for intent {intent} in workspace {workspace_id}")
        return example

    async def delete_example(self, workspace_id: str, intent: str, text: str) -> None:
        """Delete a user input example from an intent."""
        await self.client.delete(
            EXAMPLE_PATH,
            path_params={"workspace_id": workspace_id, "intent": intent, "text": text},
        )
        logger.info(f"Deleted example from intent {intent} in workspace {workspace_id}")
