"""
Message exchange records.

A message call sends user input (plus, optionally, the context, intents,
entities and output of the previous turn) and receives the recognized
intents and entities, the updated context, and the dialog output. The
service owns the meaning of the context: callers thread the ``context`` of
one response into the next request unchanged.

Most records here are extensible: undeclared keys (for example context
variables set by the dialog) are preserved in ``additional_properties``.
"""

from typing import Dict, List, Optional

from pydantic import Field, JsonValue

from conversation.models.base import ExtensibleModel, OpenEnum, WireModel


class LogLevel(OpenEnum):
    INFO = "info"
    ERROR = "error"
    WARN = "warn"


class InputData(ExtensibleModel):
    """An input object that includes the input text."""

    text: str = Field(..., description="The user's input")


class MessageInput(WireModel):
    """The user input echoed back in a response."""

    text: Optional[str] = None


class RuntimeIntent(ExtensibleModel):
    """An intent recognized in the user input."""

    intent: str = Field(..., description="Name of the recognized intent")
    confidence: float = Field(..., description="Decimal percentage confidence in the intent")


class RuntimeEntity(ExtensibleModel):
    """A term from the request that was identified as an entity."""

    entity: str = Field(..., description="The recognized entity")
    location: List[int] = Field(
        ..., description="Zero-based character offsets where the entity value begins and ends"
    )
    value: str = Field(..., description="The term in the input text that was recognized")
    confidence: Optional[float] = Field(default=None, description="Confidence in the entity")
    metadata: Optional[Dict[str, JsonValue]] = Field(default=None, description="Metadata for the entity")


class SystemResponse(ExtensibleModel):
    """Service-internal dialog state; carried opaquely in the extension bag."""

    pass


class Context(ExtensibleModel):
    """State information for the conversation."""

    conversation_id: str = Field(..., description="Unique identifier of the conversation")
    system: SystemResponse = Field(..., description="Service-internal dialog state")


class LogMessage(ExtensibleModel):
    """A message logged with the request."""

    level: LogLevel = Field(..., description="Severity of the message")
    msg: str = Field(..., description="Text of the message")


class OutputData(ExtensibleModel):
    """Dialog output: responses to the user, visited nodes, and log messages."""

    log_messages: List[LogMessage] = Field(..., description="Up to 50 messages logged with the request")
    text: List[str] = Field(..., description="Responses to the user")
    nodes_visited: Optional[List[str]] = Field(
        default=None, description="Nodes that were triggered to create the response"
    )


class MessageRequest(WireModel):
    """Body of a message call."""

    input: Optional[InputData] = None
    alternate_intents: Optional[bool] = None
    context: Optional[Context] = None
    entities: Optional[List[RuntimeEntity]] = None
    intents: Optional[List[RuntimeIntent]] = None
    output: Optional[OutputData] = None


class MessageResponse(ExtensibleModel):
    """A response from the message endpoint."""

    input: Optional[MessageInput] = None
    intents: List[RuntimeIntent]
    entities: List[RuntimeEntity]
    alternate_intents: Optional[bool] = None
    context: Context
    output: OutputData
