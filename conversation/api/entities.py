"""
Conversation entity operations.
"""

import logging
from typing import Any, Dict, List, Optional

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
from conversation.models.entity import (
    CreateEntity,
    CreateValue,
    Entity,
    EntityCollection,
    EntityExport,
    UpdateEntity,
)

logger = logging.getLogger(__name__)

ENTITIES_PATH = WORKSPACE_PATH + "/entities"
ENTITY_PATH = ENTITIES_PATH + "/{entity}"


class EntityOperations:
    """Handles Conversation entity operations."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        """Initialize entity operations.

        Args:
            client: Conversation API client (creates new if not provided)
        """
        self.client = client or ConversationAPIClient()

    async def list_entities(
        self,
        workspace_id: str,
        export: Optional[bool] = None,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> EntityCollection:
        """List the entities of a workspace.

        Args:
            workspace_id: Workspace ID
            export: Whether to include the values of each entity
            page_limit: Number of records to return in each page of results
            include_count: Whether to include the total number of records
            sort: Property to sort by (prefix with ``-`` for descending)
            cursor: Token identifying the page of results to retrieve

        Returns:
            EntityCollection with entities and pagination
        """
        return await self.client.get(
            ENTITIES_PATH,
            path_params={"workspace_id": workspace_id},
            query=[
                (EXPORT_PARAM, export),
                (PAGE_LIMIT_PARAM, page_limit),
                (INCLUDE_COUNT_PARAM, include_count),
                (SORT_PARAM, sort),
                (CURSOR_PARAM, cursor),
            ],
            response_model=EntityCollection,
        )

    async def create_entity(
        self,
        workspace_id: str,
        entity: str,
        description: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        values: Optional[List[CreateValue]] = None,
        fuzzy_match: Optional[bool] = None,
    ) -> Entity:
        """Create a new entity.

        Args:
            workspace_id: Workspace ID
            entity: Name of the entity
            description: Description of the entity
            metadata: Any metadata related to the entity
            values: Values of the entity
            fuzzy_match: Whether to use fuzzy matching for the entity

        Returns:
            Created Entity
        """
        body = build_body(
            CreateEntity,
            entity=entity,
            description=description,
            metadata=metadata,
            values=values,
            fuzzy_match=fuzzy_match,
        )
        created = await self.client.post(
            ENTITIES_PATH,
            path_params={"workspace_id": workspace_id},
            body=body,
            response_model=Entity,
        )
        logger.info(f"Created entity {entity} in workspace {workspace_id}")
        return created

    async def get_entity(
        self, workspace_id: str, entity: str, export: Optional[bool] = None
    ) -> EntityExport:
        """Get information about an entity, optionally including its values."""
        return await self.client.get(
            ENTITY_PATH,
            path_params={"workspace_id": workspace_id, "entity": entity},
            query=[(EXPORT_PARAM, export)],
            response_model=EntityExport,
        )

    async def update_entity(
        self,
        workspace_id: str,
        entity: str,
        new_entity: Optional[str] = None,
        new_description: Optional[str] = None,
        new_metadata: Optional[Dict[str, Any]] = None,
        new_fuzzy_match: Optional[bool] = None,
        new_values: Optional[List[CreateValue]] = None,
    ) -> Entity:
        """Update an existing entity.

        Args:
            workspace_id: Workspace ID
            entity: Current name of the entity
            new_entity: New name of the entity
            new_description: New description of the entity
            new_metadata: Metadata replacing the existing metadata
            new_fuzzy_match: Whether to use fuzzy matching for the entity
            new_values: Values replacing the existing ones

        Returns:
            Updated Entity
        """
        body = build_body(
            UpdateEntity,
            entity=new_entity,
            description=new_description,
            metadata=new_metadata,
            fuzzy_match=new_fuzzy_match,
            values=new_values,
        )
        updated = await self.client.post(
            ENTITY_PATH,
            path_params={"workspace_id": workspace_id, "entity": entity},
            body=body,
            response_model=Entity,
        )
        logger.info(f"Updated entity {entity} in workspace {workspace_id}")
        return updated

    async def delete_entity(self, workspace_id: str, entity: str) -> None:
        """Delete an entity from a workspace."""
        await self.client.delete(
            ENTITY_PATH, path_params={"workspace_id": workspace_id, "entity": entity}
        )
        logger.info(f"Deleted entity {entity} from workspace {workspace_id}")
