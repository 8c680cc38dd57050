"""Workspace records."""

from typing import Dict, List, Optional

from pydantic import JsonValue

from conversation.models.base import WireModel
from conversation.models.counterexample import Counterexample, CreateCounterexample
from conversation.models.dialog_node import CreateDialogNode, DialogNode
from conversation.models.entity import CreateEntity, EntityExport
from conversation.models.intent import CreateIntent, IntentExport
from conversation.models.pagination import Pagination


class Workspace(WireModel):
    name: str
    language: str
    workspace_id: str
    created: Optional[str] = None
    updated: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, JsonValue]] = None
    learning_opt_out: Optional[bool] = None


class WorkspaceExport(Workspace):
    """Workspace including its content (returned when export=true)."""

    status: Optional[str] = None
    intents: Optional[List[IntentExport]] = None
    entities: Optional[List[EntityExport]] = None
    counterexamples: Optional[List[Counterexample]] = None
    dialog_nodes: Optional[List[DialogNode]] = None


class WorkspaceCollection(WireModel):
    workspaces: List[Workspace]
    pagination: Pagination


class CreateWorkspace(WireModel):
    name: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    intents: Optional[List[CreateIntent]] = None
    entities: Optional[List[CreateEntity]] = None
    dialog_nodes: Optional[List[CreateDialogNode]] = None
    counterexamples: Optional[List[CreateCounterexample]] = None
    metadata: Optional[Dict[str, JsonValue]] = None


class UpdateWorkspace(CreateWorkspace):
    pass
