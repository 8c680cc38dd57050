"""
Conversation log operations.
"""

import logging
from typing import Optional

from common.constants import CURSOR_PARAM, FILTER_PARAM, PAGE_LIMIT_PARAM, SORT_PARAM
from conversation.api.client import ConversationAPIClient
from conversation.api.workspaces import WORKSPACE_PATH
from conversation.models.log import LogCollection

logger = logging.getLogger(__name__)

LOGS_PATH = WORKSPACE_PATH + "/logs"


class LogOperations:
    """Handles the message log of a workspace."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        self.client = client or ConversationAPIClient()

    async def list_logs(
        self,
        workspace_id: str,
        sort: Optional[str] = None,
        filter: Optional[str] = None,
        page_limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> LogCollection:
        """List the events from the log of a workspace.

        Args:
            workspace_id: Workspace ID
            sort: Property to sort by (prefix with ``-`` for descending)
            filter: Filter limiting the results to matching log events
            page_limit: Number of records to return in each page of results
            cursor: Token identifying the page of results to retrieve

        Returns:
            LogCollection with log events and pagination
        """
        return await self.client.get(
            LOGS_PATH,
            path_params={"workspace_id": workspace_id},
            query=[
                (SORT_PARAM, sort),
                (FILTER_PARAM, filter),
                (PAGE_LIMIT_PARAM, page_limit),
                (CURSOR_PARAM, cursor),
            ],
            response_model=LogCollection,
        )
