"""
Dialog node records.

A dialog node is one node of the conversation flow graph: the condition that
triggers it, the output it produces, and what the dialog does next.
"""

from typing import Dict, List, Optional

from pydantic import Field, JsonValue

from conversation.models.base import OpenEnum, WireModel
from conversation.models.pagination import Pagination


class NodeType(OpenEnum):
    STANDARD = "standard"
    EVENT_HANDLER = "event_handler"
    FRAME = "frame"
    SLOT = "slot"
    RESPONSE_CONDITION = "response_condition"


class EventName(OpenEnum):
    FOCUS = "focus"
    INPUT = "input"
    FILLED = "filled"
    VALIDATE = "validate"
    FILLED_MULTIPLE = "filled_multiple"
    GENERIC = "generic"
    NOMATCH = "nomatch"
    NOMATCH_RESPONSES_DEPLETED = "nomatch_responses_depleted"


class NextStepBehavior(OpenEnum):
    JUMP_TO = "jump_to"


class NextStepSelector(OpenEnum):
    CONDITION = "condition"
    CLIENT = "client"
    USER_INPUT = "user_input"
    BODY = "body"


class ActionType(OpenEnum):
    CLIENT = "client"
    SERVER = "server"


class DialogNodeNextStep(WireModel):
    """The next step to execute following a dialog node."""

    behavior: NextStepBehavior = Field(..., description="How the next_step reference is processed")
    dialog_node: Optional[str] = Field(default=None, description="ID of the dialog node to process next")
    selector: Optional[NextStepSelector] = Field(
        default=None, description="Which part of the dialog node to process next"
    )


class DialogNodeAction(WireModel):
    """An action invoked by a dialog node."""

    name: str = Field(..., description="Name of the action")
    result_variable: str = Field(
        ..., description="Location in the dialog context where the action result is stored"
    )
    action_type: Optional[ActionType] = Field(default=None, alias="type", description="Type of action to invoke")
    parameters: Optional[Dict[str, JsonValue]] = Field(
        default=None, description="Key/value pairs provided to the action"
    )


class _DialogNodeFields(WireModel):
    dialog_node: str = Field(..., description="Dialog node ID")
    description: Optional[str] = Field(default=None, description="Description of the dialog node")
    conditions: Optional[str] = Field(default=None, description="Condition that triggers the dialog node")
    parent: Optional[str] = Field(default=None, description="ID of the parent dialog node")
    previous_sibling: Optional[str] = Field(default=None, description="ID of the previous sibling dialog node")
    output: Optional[Dict[str, JsonValue]] = Field(default=None, description="Output of the dialog node")
    context: Optional[Dict[str, JsonValue]] = Field(default=None, description="Context defined by the dialog node")
    metadata: Optional[Dict[str, JsonValue]] = Field(default=None, description="Metadata of the dialog node")
    next_step: Optional[DialogNodeNextStep] = Field(default=None, description="Next step after this node")
    actions: Optional[List[DialogNodeAction]] = Field(default=None, description="Actions of the dialog node")
    title: Optional[str] = Field(default=None, description="Alias used to identify the dialog node")
    node_type: Optional[NodeType] = Field(default=None, alias="type", description="How the node is processed")
    event_name: Optional[EventName] = Field(
        default=None, description="How an event_handler node is processed"
    )
    variable: Optional[str] = Field(
        default=None, description="Location in the dialog context where output is stored"
    )


class DialogNode(_DialogNodeFields):
    created: Optional[str] = None
    updated: Optional[str] = None


class DialogNodeCollection(WireModel):
    dialog_nodes: List[DialogNode]
    pagination: Pagination


class CreateDialogNode(_DialogNodeFields):
    pass


class UpdateDialogNode(_DialogNodeFields):
    pass
