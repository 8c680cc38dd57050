"""
Request construction for Conversation API calls.

Everything here runs before any network I/O: a call whose path parameters
cannot be encoded or whose body cannot be serialized fails here and never
reaches the transport.
"""

import json
import logging
import string
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from common.constants import JSON_CONTENT_TYPE, VERSION_PARAM
from common.exception.exceptions import EncodeError, EncodingError, SerializationError
from conversation.codec import encode

logger = logging.getLogger(__name__)

# RFC 3986 pchar minus the unreserved set (which quote() never escapes)
PATH_SEGMENT_SAFE = "!$&'()*+,;=:@"

_formatter = string.Formatter()

RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything the transport needs to send one request."""

    method: str
    url: str
    query_items: List[Tuple[str, str]] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


def encode_path_segment(name: str, value: Any) -> str:
    """Percent-encode a single path parameter.

    Raises:
        EncodingError: If the value is not a non-empty, UTF-8 encodable string
    """
    if not isinstance(value, str):
        raise EncodingError(name, value, f"expected a string, got {type(value).__name__}")
    if value == "":
        raise EncodingError(name, value, "value is empty")
    try:
        return quote(value, safe=PATH_SEGMENT_SAFE, errors="strict")
    except UnicodeEncodeError as e:
        raise EncodingError(name, value, str(e)) from e


def encode_path(template: str, **params: Any) -> str:
    """Substitute and percent-encode the placeholders of a path template.

    Args:
        template: Path with ``{name}`` placeholders, e.g. ``/v1/workspaces/{workspace_id}``
        **params: Values for every placeholder

    Returns:
        Encoded path

    Raises:
        EncodingError: If a placeholder has no value or a value cannot be encoded
    """
    parts = []
    for literal, name, _, _ in _formatter.parse(template):
        parts.append(literal)
        if name is None:
            continue
        if name not in params:
            raise EncodingError(name, None, "no value supplied")
        parts.append(encode_path_segment(name, params[name]))
    return "".join(parts)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(
    version: str, items: Optional[Sequence[Tuple[str, Any]]] = None
) -> List[Tuple[str, str]]:
    """Build the ordered query items of a call.

    The API version always comes first. Optional parameters whose value is
    None are left out.
    """
    query = [(VERSION_PARAM, version)]
    for name, value in items or ():
        if value is None:
            continue
        query.append((name, _query_value(value)))
    return query


def build_body(model: Type[RecordT], **fields: Any) -> RecordT:
    """Construct a request body record from caller-supplied values.

    Raises:
        SerializationError: If a value does not fit the record (for example
            metadata that is not JSON)
    """
    try:
        return model(**fields)
    except ValidationError as e:
        raise SerializationError(f"Invalid {model.__name__} request body: {e}") from e


def serialize_body(record: BaseModel) -> bytes:
    """Encode a record and serialize it to UTF-8 JSON bytes.

    Raises:
        SerializationError: If the record cannot be encoded or serialized
    """
    try:
        return json.dumps(encode(record), allow_nan=False).encode("utf-8")
    except (EncodeError, TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to serialize {type(record).__name__} request body: {e}"
        ) from e


def build_request(
    method: str,
    service_url: str,
    path_template: str,
    version: str,
    path_params: Optional[Mapping[str, Any]] = None,
    query: Optional[Sequence[Tuple[str, Any]]] = None,
    body: Optional[BaseModel] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Build the request descriptor for one call.

    Args:
        method: HTTP method
        service_url: Base URL of the service (no trailing slash needed)
        path_template: Path template with ``{name}`` placeholders
        version: API version date string
        path_params: Values for the path placeholders
        query: Optional query parameters as (name, value) pairs
        body: Request body record
        headers: Extra headers (override the defaults)

    Returns:
        RequestDescriptor ready for the transport

    Raises:
        EncodingError: If a path parameter cannot be encoded
        SerializationError: If the body cannot be serialized
    """
    path = encode_path(path_template, **dict(path_params or {}))

    request_headers = {"Accept": JSON_CONTENT_TYPE}
    payload = None
    if body is not None:
        payload = serialize_body(body)
        request_headers["Content-Type"] = JSON_CONTENT_TYPE
    request_headers.update(headers or {})

    return RequestDescriptor(
        method=method.upper(),
        url=service_url.rstrip("/") + path,
        query_items=build_query(version, query),
        headers=request_headers,
        body=payload,
    )
