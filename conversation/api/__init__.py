"""
Conversation API Module

Handles all Conversation REST API interactions including:
- Workspace management
- Intents, examples and counterexamples
- Entities, values and synonyms
- Dialog nodes
- Message exchange and logs
"""

from conversation.api.client import ConversationAPIClient
from conversation.api.counterexamples import CounterexampleOperations
from conversation.api.dialog_nodes import DialogNodeOperations
from conversation.api.entities import EntityOperations
from conversation.api.examples import ExampleOperations
from conversation.api.intents import IntentOperations
from conversation.api.logs import LogOperations
from conversation.api.message import MessageOperations
from conversation.api.synonyms import SynonymOperations
from conversation.api.values import ValueOperations
from conversation.api.workspaces import WorkspaceOperations

__all__ = [
    "ConversationAPIClient",
    "WorkspaceOperations",
    "IntentOperations",
    "ExampleOperations",
    "EntityOperations",
    "ValueOperations",
    "SynonymOperations",
    "CounterexampleOperations",
    "DialogNodeOperations",
    "LogOperations",
    "MessageOperations",
]
