"""
Conversation client exceptions.
"""

from common.exception.exceptions import (
    ConversationError,
    DecodeError,
    DecodeErrorKind,
    EncodeError,
    EncodeErrorKind,
    EncodingError,
    SerializationError,
    ServiceError,
    TransportError,
)

__all__ = [
    "ConversationError",
    "DecodeError",
    "DecodeErrorKind",
    "EncodeError",
    "EncodeErrorKind",
    "EncodingError",
    "SerializationError",
    "ServiceError",
    "TransportError",
]
