"""
Conversation entity value operations.
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
from conversation.api.entities import ENTITY_PATH
from conversation.api.request_builder import build_body
from conversation.models.entity import (
    CreateValue,
    UpdateValue,
    Value,
    ValueCollection,
    ValueExport,
)

logger = logging.getLogger(__name__)

VALUES_PATH = ENTITY_PATH + "/values"
VALUE_PATH = VALUES_PATH + "/{value}"


class ValueOperations:
    """Handles the values of an entity."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        self.client = client or ConversationAPIClient()

    async def list_values(
        self,
        workspace_id: str,
        entity: str,
        export: Optional[bool] = None,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> ValueCollection:
        """List the values of an entity.

        Args:
            workspace_id: Workspace ID
            entity: Entity name
            export: Whether to include the synonyms of each value
            page_limit: Number of records to return in each page of results
            include_count: Whether to include the total number of records
            sort: Property to sort by (prefix with ``-`` for descending)
            cursor: Token identifying the page of results to retrieve

        Returns:
            ValueCollection with values and pagination
        """
        return await self.client.get(
            VALUES_PATH,
            path_params={"workspace_id": workspace_id, "entity": entity},
            query=[
                (EXPORT_PARAM, export),
                (PAGE_LIMIT_PARAM, page_limit),
                (INCLUDE_COUNT_PARAM, include_count),
                (SORT_PARAM, sort),
                (CURSOR_PARAM, cursor),
            ],
            response_model=ValueCollection,
        )

    async def create_value(
        self,
        workspace_id: str,
        entity: str,
        value: str,
        metadata: Optional[Dict[str, Any]] = None,
        synonyms: Optional[List[str]] = None,
    ) -> Value:
        """Add a value to an entity.

        Args:
            workspace_id: Workspace ID
            entity: Entity name
            value: Text of the value
            metadata: Any metadata related to the value
            synonyms: Synonyms of the value

        Returns:
            Created Value
        """
        created = await self.client.post(
            VALUES_PATH,
            path_params={"workspace_id": workspace_id, "entity": entity},
            body=build_body(CreateValue, value=value, metadata=metadata, synonyms=synonyms),
            response_model=Value,
        )
        logger.info(f"Created value {value} for entity {entity} in workspace {workspace_id}")
        return created

    async def get_value(
        self, workspace_id: str, entity: str, value: str, export: Optional[bool] = None
    ) -> ValueExport:
        """Get information about an entity value, optionally including its synonyms."""
        return await self.client.get(
            VALUE_PATH,
            path_params={"workspace_id": workspace_id, "entity": entity, "value": value},
            query=[(EXPORT_PARAM, export)],
            response_model=ValueExport,
        )

    async def update_value(
        self,
        workspace_id: str,
        entity: str,
        value: str,
        new_value: Optional[str] = None,
        new_metadata: Optional[Dict[str, Any]] = None,
        new_synonyms: Optional[List[str]] = None,
    ) -> Value:
        """Update the text, metadata or synonyms of an entity value.

        Returns:
            Updated Value
        """
        body = build_body(
            UpdateValue, value=new_value, metadata=new_metadata, synonyms=new_synonyms
        )
        updated = await self.client.post(
            VALUE_PATH,
            path_params={"workspace_id": workspace_id, "entity": entity, "value": value},
            body=body,
            response_model=Value,
        )
        logger.info(f"Updated value {value} of entity {entity} in workspace {workspace_id}")
        return updated

    async def delete_value(self, workspace_id: str, entity: str, value: str) -> None:
        """Delete a value from an entity."""
        await self.client.delete(
            VALUE_PATH,
            path_params={"workspace_id": workspace_id, "entity": entity, "value": value},
        )
        logger.info(f"Deleted value {value} from entity {entity} in workspace {workspace_id}")
