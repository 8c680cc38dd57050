"""Counterexample records: user input marked as irrelevant."""

from typing import List, Optional

from conversation.models.base import WireModel
from conversation.models.pagination import Pagination


class Counterexample(WireModel):
    text: str
    created: Optional[str] = None
    updated: Optional[str] = None


class CounterexampleCollection(WireModel):
    counterexamples: List[Counterexample]
    pagination: Pagination


class CreateCounterexample(WireModel):
    text: str


class UpdateCounterexample(WireModel):
    text: Optional[str] = None
