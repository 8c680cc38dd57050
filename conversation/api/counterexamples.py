"""
Conversation counterexample operations.

Counterexamples are user inputs marked as irrelevant, so that the service
does not match them to any intent.
"""

import logging
from typing import Optional

from common.constants import CURSOR_PARAM, INCLUDE_COUNT_PARAM, PAGE_LIMIT_PARAM, SORT_PARAM
from conversation.api.client import ConversationAPIClient
from conversation.api.request_builder import build_body
from conversation.api.workspaces import WORKSPACE_PATH
from conversation.models.counterexample import (
    Counterexample,
    CounterexampleCollection,
    CreateCounterexample,
    UpdateCounterexample,
)

logger = logging.getLogger(__name__)

COUNTEREXAMPLES_PATH = WORKSPACE_PATH + "/counterexamples"
COUNTEREXAMPLE_PATH = COUNTEREXAMPLES_PATH + "/{text}"


class CounterexampleOperations:
    """Handles Conversation counterexample operations."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        self.client = client or ConversationAPIClient()

    async def list_counterexamples(
        self,
        workspace_id: str,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> CounterexampleCollection:
        """List the counterexamples of a workspace.

        Args:
            workspace_id: Workspace ID
            page_limit: Number of records to return in each page of results
            include_count: Whether to include the total number of records
            sort: Property to sort by (prefix with ``-`` for descending)
            cursor: Token identifying the page of results to retrieve

        Returns:
            CounterexampleCollection with counterexamples and pagination
        """
        return await self.client.get(
            COUNTEREXAMPLES_PATH,
            path_params={"workspace_id": workspace_id},
            query=[
                (PAGE_LIMIT_PARAM, page_limit),
                (INCLUDE_COUNT_PARAM, include_count),
                (SORT_PARAM, sort),
                (CURSOR_PARAM, cursor),
            ],
            response_model=CounterexampleCollection,
        )

    async def create_counterexample(self, workspace_id: str, text: str) -> Counterexample:
        """Mark a user input as irrelevant."""
        counterexample = await self.client.post(
            COUNTEREXAMPLES_PATH,
            path_params={"workspace_id": workspace_id},
            body=build_body(CreateCounterexample, text=text),
            response_model=Counterexample,
        )
        logger.info(f"Created counterexample in workspace {workspace_id}")
        return counterexample

    async def get_counterexample(self, workspace_id: str, text: str) -> Counterexample:
        return await self.client.get(
            COUNTEREXAMPLE_PATH,
            path_params={"workspace_id": workspace_id, "text": text},
            response_model=Counterexample,
        )

    async def update_counterexample(
        self, workspace_id: str, text: str, new_text: Optional[str] = None
    ) -> Counterexample:
        """Update the text of a counterexample."""
        counterexample = await self.client.post(
            COUNTEREXAMPLE_PATH,
            path_params={"workspace_id": workspace_id, "text": text},
            body=build_body(UpdateCounterexample, text=new_text),
            response_model=Counterexample,
        )
        logger.info(f"Updated counterexample in workspace {workspace_id}")
        return counterexample

    async def delete_counterexample(self, workspace_id: str, text: str) -> None:
        await self.client.delete(
            COUNTEREXAMPLE_PATH, path_params={"workspace_id": workspace_id, "text": text}
        )
        logger.info(f"Deleted counterexample from workspace {workspace_id}")
