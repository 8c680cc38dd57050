"""Conversation log records."""

from typing import List, Optional

from conversation.models.base import WireModel
from conversation.models.message import MessageRequest, MessageResponse
from conversation.models.pagination import LogPagination


class LogExport(WireModel):
    request: MessageRequest
    response: MessageResponse
    log_id: str
    request_timestamp: str
    response_timestamp: str
    workspace_id: Optional[str] = None
    language: Optional[str] = None


class LogCollection(WireModel):
    logs: List[LogExport]
    pagination: LogPagination
