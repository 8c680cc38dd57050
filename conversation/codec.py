"""
JSON codec for Conversation records.

decode() maps a JSON object onto a record type: declared fields are matched by
wire key and validated strictly against their declared types (a string is
never turned into a number or boolean), and every other key lands in
the extension bag of extensible records. encode() is the inverse: one key per
declared field that has a value, followed by the extension bag.

Absent and null optional fields are treated the same way: both decode to
None, and None is never emitted. Null values inside the extension bag or
inside JSON-valued fields are preserved.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, FrozenSet, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from common.exception.exceptions import (
    DecodeError,
    DecodeErrorKind,
    EncodeError,
    EncodeErrorKind,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def wire_keys(model: Type[BaseModel]) -> FrozenSet[str]:
    """Return the wire keys declared by a record type."""
    return frozenset(field.alias or name for name, field in model.model_fields.items())


def decode(payload: Any, model: Type[RecordT]) -> RecordT:
    """Decode a JSON object into a record.

    Args:
        payload: Parsed JSON value (must be an object)
        model: Record type to decode into

    Returns:
        Decoded record

    Raises:
        DecodeError: If the payload is not an object, a required field is
            missing, or a field has the wrong type
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            DecodeErrorKind.MALFORMED_PAYLOAD,
            message=f"Expected a JSON object for {model.__name__}, got {type(payload).__name__}",
        )

    try:
        # JSON-mode strict validation still accepts strings for enum fields
        return model.model_validate_json(
            json.dumps(payload), strict=True, by_alias=True, by_name=False
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        if error["type"] == "missing":
            kind = DecodeErrorKind.MISSING_REQUIRED_FIELD
        else:
            kind = DecodeErrorKind.MISSING_OR_WRONG_TYPE
        logger.debug(f"Failed to decode {model.__name__}: {e}")
        raise DecodeError(kind, field=field, message=f"{model.__name__}: {error['msg']}") from e


def decode_json(content: Union[bytes, str], model: Type[RecordT]) -> RecordT:
    """Parse a JSON document and decode it into a record.

    Raises:
        DecodeError: If the content is not valid JSON or does not decode
    """
    try:
        payload = json.loads(content)
    except ValueError as e:
        raise DecodeError(
            DecodeErrorKind.MALFORMED_PAYLOAD,
            message=f"Body is not valid JSON: {e}",
        ) from e
    return decode(payload, model)


def encode(record: BaseModel) -> Dict[str, Any]:
    """Encode a record into a JSON object.

    Raises:
        EncodeError: If an extension bag key collides with a declared wire key
    """
    model = type(record)
    payload: Dict[str, Any] = {}

    for name, field in model.model_fields.items():
        value = getattr(record, name)
        if value is None:
            continue
        payload[field.alias or name] = _encode_value(value)

    extra = record.model_extra
    if extra:
        known = wire_keys(model)
        for key, value in extra.items():
            if key in known or key in payload:
                raise EncodeError(EncodeErrorKind.DUPLICATE_KEY, key)
            payload[key] = _encode_value(value)

    return payload


def _encode_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return encode(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode_value(item) for key, item in value.items()}
    return value
