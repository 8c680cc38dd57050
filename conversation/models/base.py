"""
Base record types shared by all Conversation service models.

Records are immutable pydantic models keyed by their wire (snake_case) names.
Closed records drop keys they do not declare; extensible records keep them
in an extension bag so that newer service fields survive a decode/encode
round trip.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, JsonValue

UNRECOGNIZED = "UNRECOGNIZED"


class OpenEnum(str, Enum):
    """String enumeration that tolerates values it does not know.

    Unknown wire values become pseudo-members named UNRECOGNIZED that keep
    the raw string as their value.
    """

    @classmethod
    def _missing_(cls, value: Any):
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UNRECOGNIZED
        member._value_ = value
        return member

    @property
    def is_unrecognized(self) -> bool:
        return self._name_ == UNRECOGNIZED


class WireModel(BaseModel):
    """Closed record: keys outside the declared fields are ignored.

    Constructors accept attribute names or wire aliases; the codec decodes by
    wire alias only.
    """

    model_config = ConfigDict(
        frozen=True, validate_by_name=True, validate_by_alias=True, extra="ignore"
    )


class ExtensibleModel(WireModel):
    """Record with an extension bag for undeclared keys.

    Extra keyword arguments (or undeclared keys of a decoded payload) are
    validated as JSON values and exposed through ``additional_properties``.
    """

    model_config = ConfigDict(extra="allow")

    __pydantic_extra__: Dict[str, JsonValue]

    @property
    def additional_properties(self) -> Dict[str, JsonValue]:
        return dict(self.model_extra or {})
