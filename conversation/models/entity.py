"""Entity, entity value, and synonym records."""

from typing import Dict, List, Optional

from pydantic import JsonValue

from conversation.models.base import WireModel
from conversation.models.pagination import Pagination


class Synonym(WireModel):
    synonym: str
    created: Optional[str] = None
    updated: Optional[str] = None


class SynonymCollection(WireModel):
    synonyms: List[Synonym]
    pagination: Pagination


class CreateSynonym(WireModel):
    synonym: str


class UpdateSynonym(WireModel):
    synonym: Optional[str] = None


class Value(WireModel):
    value: str
    metadata: Optional[Dict[str, JsonValue]] = None
    created: Optional[str] = None
    updated: Optional[str] = None


class ValueExport(Value):
    """Entity value including its synonyms (returned when export=true)."""

    synonyms: Optional[List[str]] = None


class ValueCollection(WireModel):
    values: List[ValueExport]
    pagination: Pagination


class CreateValue(WireModel):
    value: str
    metadata: Optional[Dict[str, JsonValue]] = None
    synonyms: Optional[List[str]] = None


class UpdateValue(WireModel):
    value: Optional[str] = None
    metadata: Optional[Dict[str, JsonValue]] = None
    synonyms: Optional[List[str]] = None


class Entity(WireModel):
    entity: str
    created: Optional[str] = None
    updated: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, JsonValue]] = None
    fuzzy_match: Optional[bool] = None


class EntityExport(Entity):
    """Entity including its values (returned when export=true)."""

    values: Optional[List[ValueExport]] = None


class EntityCollection(WireModel):
    entities: List[EntityExport]
    pagination: Pagination


class CreateEntity(WireModel):
    entity: str
    description: Optional[str] = None
    metadata: Optional[Dict[str, JsonValue]] = None
    values: Optional[List[CreateValue]] = None
    fuzzy_match: Optional[bool] = None


class UpdateEntity(WireModel):
    entity: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, JsonValue]] = None
    fuzzy_match: Optional[bool] = None
    values: Optional[List[CreateValue]] = None
