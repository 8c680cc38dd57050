"""
Conversation workspace operations.
"""

import logging
from typing import Any, Dict, List, Optional

from common.constants import (
    CURSOR_PARAM,
    EXPORT_PARAM,
    INCLUDE_COUNT_PARAM,
    PAGE_LIMIT_PARAM,
    SORT_PARAM,
    WORKSPACES_PATH,
)
from conversation.api.client import ConversationAPIClient
from conversation.api.request_builder import build_body
from conversation.models.counterexample import CreateCounterexample
from conversation.models.dialog_node import CreateDialogNode
from conversation.models.entity import CreateEntity
from conversation.models.intent import CreateIntent
from conversation.models.workspace import (
    CreateWorkspace,
    UpdateWorkspace,
    Workspace,
    WorkspaceCollection,
    WorkspaceExport,
)

logger = logging.getLogger(__name__)

WORKSPACE_PATH = WORKSPACES_PATH + "/{workspace_id}"


class WorkspaceOperations:
    """Handles Conversation workspace operations."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        """Initialize workspace operations.

        Args:
            client: Conversation API client (creates new if not provided)
        """
        self.client = client or ConversationAPIClient()

    async def list_workspaces(
        self,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> WorkspaceCollection:
        """List the workspaces associated with the service instance.

        Args:
            page_limit: Number of records to return in each page of results
            include_count: Whether to include the total number of records
            sort: Property to sort by (prefix with ``-`` for descending)
            cursor: Token identifying the page of results to retrieve

        Returns:
            WorkspaceCollection with workspaces and pagination
        """
        return await self.client.get(
            WORKSPACES_PATH,
            query=[
                (PAGE_LIMIT_PARAM, page_limit),
                (INCLUDE_COUNT_PARAM, include_count),
                (SORT_PARAM, sort),
                (CURSOR_PARAM, cursor),
            ],
            response_model=WorkspaceCollection,
        )

    async def create_workspace(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        language: Optional[str] = None,
        intents: Optional[List[CreateIntent]] = None,
        entities: Optional[List[CreateEntity]] = None,
        dialog_nodes: Optional[List[CreateDialogNode]] = None,
        counterexamples: Optional[List[CreateCounterexample]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Workspace:
        """Create a workspace from component objects.

        Args:
            name: Name of the workspace
            description: Description of the workspace
            language: Language of the workspace
            intents: Intents for the workspace
            entities: Entities for the workspace
            dialog_nodes: Nodes of the workspace dialog
            counterexamples: Input examples marked as irrelevant input
            metadata: Any metadata related to the workspace

        Returns:
            Created Workspace
        """
        body = build_body(
            CreateWorkspace,
            name=name,
            description=description,
            language=language,
            intents=intents,
            entities=entities,
            dialog_nodes=dialog_nodes,
            counterexamples=counterexamples,
            metadata=metadata,
        )
        workspace = await self.client.post(WORKSPACES_PATH, body=body, response_model=Workspace)
        logger.info(f"Created workspace {name}")
        return workspace

    async def get_workspace(self, workspace_id: str, export: Optional[bool] = None) -> WorkspaceExport:
        """Get information about a workspace.

        Args:
            workspace_id: Workspace ID
            export: Whether to include all workspace content

        Returns:
            WorkspaceExport (content fields are set only when exported)
        """
        return await self.client.get(
            WORKSPACE_PATH,
            path_params={"workspace_id": workspace_id},
            query=[(EXPORT_PARAM, export)],
            response_model=WorkspaceExport,
        )

    async def update_workspace(
        self,
        workspace_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        language: Optional[str] = None,
        intents: Optional[List[CreateIntent]] = None,
        entities: Optional[List[CreateEntity]] = None,
        dialog_nodes: Optional[List[CreateDialogNode]] = None,
        counterexamples: Optional[List[CreateCounterexample]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Workspace:
        """Update an existing workspace with new or modified data.

        Args:
            workspace_id: Workspace ID
            name: New name of the workspace
            description: New description of the workspace
            language: New language of the workspace
            intents: Intents replacing the workspace intents
            entities: Entities replacing the workspace entities
            dialog_nodes: Nodes replacing the workspace dialog
            counterexamples: Counterexamples replacing the existing ones
            metadata: Metadata replacing the existing metadata

        Returns:
            Updated Workspace
        """
        body = build_body(
            UpdateWorkspace,
            name=name,
            description=description,
            language=language,
            intents=intents,
            entities=entities,
            dialog_nodes=dialog_nodes,
            counterexamples=counterexamples,
            metadata=metadata,
        )
        workspace = await self.client.post(
            WORKSPACE_PATH,
            path_params={"workspace_id": workspace_id},
            body=body,
            response_model=Workspace,
        )
        logger.info(f"Updated workspace {workspace_id}")
        return workspace

    async def delete_workspace(self, workspace_id: str) -> None:
        """Delete a workspace.

        Args:
            workspace_id: Workspace ID
        """
        await self.client.delete(WORKSPACE_PATH, path_params={"workspace_id": workspace_id})
        logger.info(f"Deleted workspace {workspace_id}")
