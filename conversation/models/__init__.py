"""
Conversation Models Module

Typed records for every request and response body of the Conversation service.
"""

from conversation.models.base import ExtensibleModel, OpenEnum, WireModel
from conversation.models.counterexample import (
    Counterexample,
    CounterexampleCollection,
    CreateCounterexample,
    UpdateCounterexample,
)
from conversation.models.dialog_node import (
    ActionType,
    CreateDialogNode,
    DialogNode,
    DialogNodeAction,
    DialogNodeCollection,
    DialogNodeNextStep,
    EventName,
    NextStepBehavior,
    NextStepSelector,
    NodeType,
    UpdateDialogNode,
)
from conversation.models.entity import (
    CreateEntity,
    CreateSynonym,
    CreateValue,
    Entity,
    EntityCollection,
    EntityExport,
    Synonym,
    SynonymCollection,
    UpdateEntity,
    UpdateSynonym,
    UpdateValue,
    Value,
    ValueCollection,
    ValueExport,
)
from conversation.models.intent import (
    CreateExample,
    CreateIntent,
    Example,
    ExampleCollection,
    Intent,
    IntentCollection,
    IntentExport,
    UpdateExample,
    UpdateIntent,
)
from conversation.models.log import LogCollection, LogExport
from conversation.models.message import (
    Context,
    InputData,
    LogLevel,
    LogMessage,
    MessageInput,
    MessageRequest,
    MessageResponse,
    OutputData,
    RuntimeEntity,
    RuntimeIntent,
    SystemResponse,
)
from conversation.models.pagination import LogPagination, Pagination
from conversation.models.workspace import (
    CreateWorkspace,
    UpdateWorkspace,
    Workspace,
    WorkspaceCollection,
    WorkspaceExport,
)

__all__ = [
    "ExtensibleModel",
    "OpenEnum",
    "WireModel",
    "Counterexample",
    "CounterexampleCollection",
    "CreateCounterexample",
    "UpdateCounterexample",
    "ActionType",
    "CreateDialogNode",
    "DialogNode",
    "DialogNodeAction",
    "DialogNodeCollection",
    "DialogNodeNextStep",
    "EventName",
    "NextStepBehavior",
    "NextStepSelector",
    "NodeType",
    "UpdateDialogNode",
    "CreateEntity",
    "CreateSynonym",
    "CreateValue",
    "Entity",
    "EntityCollection",
    "EntityExport",
    "Synonym",
    "SynonymCollection",
    "UpdateEntity",
    "UpdateSynonym",
    "UpdateValue",
    "Value",
    "ValueCollection",
    "ValueExport",
    "CreateExample",
    "CreateIntent",
    "Example",
    "ExampleCollection",
    "Intent",
    "IntentCollection",
    "IntentExport",
    "UpdateExample",
    "UpdateIntent",
    "LogCollection",
    "LogExport",
    "Context",
    "InputData",
    "LogLevel",
    "LogMessage",
    "MessageInput",
    "MessageRequest",
    "MessageResponse",
    "OutputData",
    "RuntimeEntity",
    "RuntimeIntent",
    "SystemResponse",
    "LogPagination",
    "Pagination",
    "CreateWorkspace",
    "UpdateWorkspace",
    "Workspace",
    "WorkspaceCollection",
    "WorkspaceExport",
]
