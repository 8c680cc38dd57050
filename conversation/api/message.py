"""
Conversation message operation.

Each call is one turn of a conversation. To continue a conversation, pass
the ``context`` of the previous response back unchanged; the service keeps
the dialog state in it.
"""

import logging
from typing import List, Optional, Union

from conversation.api.client import ConversationAPIClient
from conversation.api.request_builder import build_body
from conversation.api.workspaces import WORKSPACE_PATH
from conversation.models.message import (
    Context,
    InputData,
    MessageRequest,
    MessageResponse,
    OutputData,
    RuntimeEntity,
    RuntimeIntent,
)

logger = logging.getLogger(__name__)

MESSAGE_PATH = WORKSPACE_PATH + "/message"


class MessageOperations:
    """Sends user input to a workspace and returns the dialog's response."""

    def __init__(self, client: Optional[ConversationAPIClient] = None):
        self.client = client or ConversationAPIClient()

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
        """Get a response to a user's input.

        Args:
            workspace_id: Workspace ID
            input: User input, as text or an InputData record
            alternate_intents: Whether to return more than one intent
            context: Context of the previous response, to continue a conversation
            entities: Entities of the previous response, to keep them unchanged
            intents: Intents of the previous response, to keep them unchanged
            output: Output of the previous response, for several requests
                within the same dialog turn

        Returns:
            MessageResponse with intents, entities, context and output
        """
        if isinstance(input, str):
            input = InputData(text=input)

        body = build_body(
            MessageRequest,
            input=input,
            alternate_intents=alternate_intents,
            context=context,
            entities=entities,
            intents=intents,
            output=output,
        )
        response = await self.client.post(
            MESSAGE_PATH,
            path_params={"workspace_id": workspace_id},
            body=body,
            response_model=MessageResponse,
        )
        logger.info(f"Sent message to workspace {workspace_id}")
        return response
