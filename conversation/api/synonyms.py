"""
Conversation entity value synonym operations.
"""

import logging
from typing import Optional

from common.constants import CURSOR_PARAM, INCLUDE_COUNT_PARAM, PAGE_LIMIT_PARAM, SORT_PARAM
from conversation.api.client import ConversationAPIClient
from conversation.api.request_builder import build_body
from conversation.api.values import VALUE_PATH
from conversation.models.entity import CreateSynonym, Synonym, SynonymCollection, UpdateSynonym

logger = logging.getLogger(__name__)

SYNONYMS_PATH = VALUE_PATH + "/synonyms"
SYNONYM_PATH = SYNONYMS_PATH + "/{synonym}"


class SynonymOperations:
    """Handles the synonyms of an entity value."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        self.client = client or ConversationAPIClient()

    @staticmethod
    def _path_params(workspace_id: str, entity: str, value: str, **extra: str):
        return {"workspace_id": workspace_id, "entity": entity, "value": value, **extra}

    async def list_synonyms(
        self,
        workspace_id: str,
        entity: str,
        value: str,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> SynonymCollection:
        """List the synonyms of an entity value."""
        return await self.client.get(
            SYNONYMS_PATH,
            path_params=self._path_params(workspace_id, entity, value),
            query=[
                (PAGE_LIMIT_PARAM, page_limit),
                (INCLUDE_COUNT_PARAM, include_count),
                (SORT_PARAM, sort),
                (CURSOR_PARAM, cursor),
            ],
            response_model=SynonymCollection,
        )

    async def create_synonym(
        self, workspace_id: str, entity: str, value: str, synonym: str
    ) -> Synonym:
        """Add a synonym to an entity value."""
        created = await self.client.post(
            SYNONYMS_PATH,
            path_params=self._path_params(workspace_id, entity, value),
            body=build_body(CreateSynonym, synonym=synonym),
            response_model=Synonym,
        )
        logger.info(f"Created synonym {synonym} for value {value} of entity {entity}")
        return created

    async def get_synonym(
        self, workspace_id: str, entity: str, value: str, synonym: str
    ) -> Synonym:
        return await self.client.get(
            SYNONYM_PATH,
            path_params=self._path_params(workspace_id, entity, value, synonym=synonym),
            response_model=Synonym,
        )

    async def update_synonym(
        self,
        workspace_id: str,
        entity: str,
        value: str,
        synonym: str,
        new_synonym: Optional[str] = None,
    ) -> Synonym:
        """Update the text of a synonym."""
        updated = await self.client.post(
            SYNONYM_PATH,
            path_params=self._path_params(workspace_id, entity, value, synonym=synonym),
            body=build_body(UpdateSynonym, synonym=new_synonym),
            response_model=Synonym,
        )
        logger.info(f"Updated synonym {synonym} of value {value} of entity {entity}")
        return updated

    async def delete_synonym(
        self, workspace_id: str, entity: str, value: str, synonym: str
    ) -> None:
        await self.client.delete(
            SYNONYM_PATH,
            path_params=self._path_params(workspace_id, entity, value, synonym=synonym),
        )
        logger.info(f"Deleted synonym {synonym} from value {value} of entity {entity}")
