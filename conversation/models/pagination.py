"""Pagination records returned with every collection."""

from typing import Optional

from conversation.models.base import WireModel


class Pagination(WireModel):
    refresh_url: str
    next_url: Optional[str] = None
    total: Optional[int] = None
    matched: Optional[int] = None
    refresh_cursor: Optional[str] = None
    next_cursor: Optional[str] = None


class LogPagination(WireModel):
    next_url: Optional[str] = None
    matched: Optional[int] = None
    next_cursor: Optional[str] = None
