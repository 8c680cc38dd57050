"""
Conversation dialog node operations.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from common.constants import CURSOR_PARAM, INCLUDE_COUNT_PARAM, PAGE_LIMIT_PARAM, SORT_PARAM
from conversation.api.client import ConversationAPIClient
from conversation.api.request_builder import build_body
from conversation.api.workspaces import WORKSPACE_PATH
from conversation.models.dialog_node import (
    CreateDialogNode,
    DialogNode,
    DialogNodeAction,
    DialogNodeCollection,
    DialogNodeNextStep,
    EventName,
    NodeType,
    UpdateDialogNode,
)

logger = logging.getLogger(__name__)

DIALOG_NODES_PATH = WORKSPACE_PATH + "/dialog_nodes"
DIALOG_NODE_PATH = DIALOG_NODES_PATH + "/{dialog_node}"


class DialogNodeOperations:
    """Handles Conversation dialog node operations."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        """Initialize dialog node operations.

        Args:
            client: Conversation API client (creates new if not provided)
        """
        self.client = client or ConversationAPIClient()

    async def list_dialog_nodes(
        self,
        workspace_id: str,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> DialogNodeCollection:
        """List the dialog nodes of a workspace.

        Args:
            workspace_id: Workspace ID
            page_limit: Number of records to return in each page of results
            include_count: Whether to include the total number of records
            sort: Property to sort by (prefix with ``-`` for descending)
            cursor: Token identifying the page of results to retrieve

        Returns:
            DialogNodeCollection with dialog nodes and pagination
        """
        return await self.client.get(
            DIALOG_NODES_PATH,
            path_params={"workspace_id": workspace_id},
            query=[
                (PAGE_LIMIT_PARAM, page_limit),
                (INCLUDE_COUNT_PARAM, include_count),
                (SORT_PARAM, sort),
                (CURSOR_PARAM, cursor),
            ],
            response_model=DialogNodeCollection,
        )

    async def create_dialog_node(
        self,
        workspace_id: str,
        dialog_node: str,
        description: Optional[str] = None,
        conditions: Optional[str] = None,
        parent: Optional[str] = None,
        previous_sibling: Optional[str] = None,
        output: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        next_step: Optional[DialogNodeNextStep] = None,
        actions: Optional[List[DialogNodeAction]] = None,
        title: Optional[str] = None,
        node_type: Optional[Union[NodeType, str]] = None,
        event_name: Optional[Union[EventName, str]] = None,
        variable: Optional[str] = None,
    ) -> DialogNode:
        """Create a dialog node.

        Args:
            workspace_id: Workspace ID
            dialog_node: Dialog node ID
            description: Description of the dialog node
            conditions: Condition that triggers the dialog node
            parent: ID of the parent dialog node
            previous_sibling: ID of the previous sibling dialog node
            output: Output of the dialog node
            context: Context set by the dialog node
            metadata: Metadata of the dialog node
            next_step: What the dialog does after this node
            actions: Actions invoked by the dialog node
            title: Alias used to identify the dialog node
            node_type: How the dialog node is processed
            event_name: How an event_handler node is processed
            variable: Location in the dialog context where output is stored

        Returns:
            Created DialogNode
        """
        body = build_body(
            CreateDialogNode,
            dialog_node=dialog_node,
            description=description,
            conditions=conditions,
            parent=parent,
            previous_sibling=previous_sibling,
            output=output,
            context=context,
            metadata=metadata,
            next_step=next_step,
            actions=actions,
            title=title,
            node_type=node_type,
            event_name=event_name,
            variable=variable,
        )
        created = await self.client.post(
            DIALOG_NODES_PATH,
            path_params={"workspace_id": workspace_id},
            body=body,
            response_model=DialogNode,
        )
        logger.info(f"Created dialog node {dialog_node} in workspace {workspace_id}")
        return created

    async def get_dialog_node(self, workspace_id: str, dialog_node: str) -> DialogNode:
        """Get information about a dialog node."""
        return await self.client.get(
            DIALOG_NODE_PATH,
            path_params={"workspace_id": workspace_id, "dialog_node": dialog_node},
            response_model=DialogNode,
        )

    async def update_dialog_node(
        self,
        workspace_id: str,
        dialog_node: str,
        new_dialog_node: str,
        new_description: Optional[str] = None,
        new_conditions: Optional[str] = None,
        new_parent: Optional[str] = None,
        new_previous_sibling: Optional[str] = None,
        new_output: Optional[Dict[str, Any]] = None,
        new_context: Optional[Dict[str, Any]] = None,
        new_metadata: Optional[Dict[str, Any]] = None,
        new_next_step: Optional[DialogNodeNextStep] = None,
        new_title: Optional[str] = None,
        new_node_type: Optional[Union[NodeType, str]] = None,
        new_event_name: Optional[Union[EventName, str]] = None,
        new_variable: Optional[str] = None,
        new_actions: Optional[List[DialogNodeAction]] = None,
    ) -> DialogNode:
        """Update a dialog node.

        The dialog node ID is always sent; pass the current ID as
        ``new_dialog_node`` to keep it.

        Returns:
            Updated DialogNode
        """
        body = build_body(
            UpdateDialogNode,
            dialog_node=new_dialog_node,
            description=new_description,
            conditions=new_conditions,
            parent=new_parent,
            previous_sibling=new_previous_sibling,
            output=new_output,
            context=new_context,
            metadata=new_metadata,
            next_step=new_next_step,
            title=new_title,
            node_type=new_node_type,
            event_name=new_event_name,
            variable=new_variable,
            actions=new_actions,
        )
        updated = await self.client.post(
            DIALOG_NODE_PATH,
            path_params={"workspace_id": workspace_id, "dialog_node": dialog_node},
            body=body,
            response_model=DialogNode,
        )
        logger.info(f"Updated dialog node {dialog_node} in workspace {workspace_id}")
        return updated

    async def delete_dialog_node(self, workspace_id: str, dialog_node: str) -> None:
        """Delete a dialog node from a workspace."""
        await self.client.delete(
            DIALOG_NODE_PATH,
            path_params={"workspace_id": workspace_id, "dialog_node": dialog_node},
        )
        logger.info(f"Deleted dialog node {dialog_node} from workspace {workspace_id}")
