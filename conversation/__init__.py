"""
Conversation Service Package

Asynchronous client for the Conversation REST service: build, train and
query a dialog workspace, and exchange messages with it.

Main Components:
- ConversationService: Main facade for all Conversation operations
- API Client: request building, transport and response handling
- Models: typed records for every request and response body
"""

from conversation.service import ConversationService

__all__ = ["ConversationService"]
