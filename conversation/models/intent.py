"""Intent and example records."""

from typing import List, Optional

from conversation.models.base import WireModel
from conversation.models.pagination import Pagination


class Example(WireModel):
    text: str
    created: Optional[str] = None
    updated: Optional[str] = None


class ExampleCollection(WireModel):
    examples: List[Example]
    pagination: Pagination


class CreateExample(WireModel):
    text: str


class UpdateExample(WireModel):
    text: Optional[str] = None


class Intent(WireModel):
    intent: str
    created: Optional[str] = None
    updated: Optional[str] = None
    description: Optional[str] = None


class IntentExport(Intent):
    """Intent including its examples (returned when export=true)."""

    examples: Optional[List[Example]] = None


class IntentCollection(WireModel):
    intents: List[IntentExport]
    pagination: Pagination


class CreateIntent(WireModel):
    intent: str
    description: Optional[str] = None
    examples: Optional[List[CreateExample]] = None


class UpdateIntent(WireModel):
    intent: Optional[str] = None
    description: Optional[str] = None
    examples: Optional[List[CreateExample]] = None
