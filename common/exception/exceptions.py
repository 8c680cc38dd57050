"""
Exception hierarchy for the Conversation service client.

Every failure a call can produce is a ConversationError subclass:
- DecodeError / EncodeError: mapping between JSON objects and records
- EncodingError / SerializationError: request construction, raised before any I/O
- TransportError: network-level failures from the HTTP transport
- ServiceError: non-2xx responses from the service
"""

from enum import Enum
from typing import Any, Optional


class ConversationError(Exception):
    """Base class for all Conversation client errors."""

    pass


class DecodeErrorKind(str, Enum):
    MISSING_REQUIRED_FIELD = "missing_required_field"
    MISSING_OR_WRONG_TYPE = "missing_or_wrong_type"
    MALFORMED_PAYLOAD = "malformed_payload"


class DecodeError(ConversationError):
    """Raised when a JSON payload cannot be decoded into a record."""

    def __init__(self, kind: DecodeErrorKind, field: Optional[str] = None, message: Optional[str] = None):
        self.kind = kind
        self.field = field
        detail = message or kind.value
        if field:
            detail = f"{detail} (field: {field})"
        super().__init__(detail)


class EncodeErrorKind(str, Enum):
    DUPLICATE_KEY = "duplicate_key"


class EncodeError(ConversationError):
    """Raised when a record cannot be encoded into a JSON object."""

    def __init__(self, kind: EncodeErrorKind, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.value}: {key!r}")


class EncodingError(ConversationError):
    """Raised when a path parameter cannot be percent-encoded."""

    def __init__(self, parameter: str, value: Any, reason: Optional[str] = None):
        self.parameter = parameter
        self.value = value
        message = f"Cannot encode path parameter {parameter!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SerializationError(ConversationError):
    """Raised when a request body cannot be serialized."""

    pass


class TransportError(ConversationError):
    """Raised when the HTTP transport fails (connection error, timeout)."""

    pass


class ServiceError(ConversationError):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, status_code: int, message: Optional[str] = None, body: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.body = body
        if message:
            super().__init__(f"Conversation service error (status {status_code}): {message}")
        else:
            super().__init__(f"Conversation service error (status {status_code})")
