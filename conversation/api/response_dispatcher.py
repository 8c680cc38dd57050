"""
Response classification for Conversation API calls.

A response ends in exactly one of three outcomes: a decoded record, an empty
success (returned as None), or a raised ConversationError.
"""

import json
import logging
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel

from common.constants import ERROR_MESSAGE_KEY
from common.exception.exceptions import ServiceError
from conversation.codec import decode_json

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def extract_error_message(content: Optional[Union[bytes, str]]) -> Optional[str]:
    """Best-effort extraction of the service's error message.

    Returns:
        The string under the "error" key, or None if the body is empty,
        not JSON, or carries no such message
    """
    if not content:
        return None
    try:
        payload = json.loads(content)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    message = payload.get(ERROR_MESSAGE_KEY)
    if isinstance(message, str):
        return message
    return None


def _body_text(content: Optional[Union[bytes, str]]) -> Optional[str]:
    if not content:
        return None
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def dispatch_response(
    status_code: int,
    content: Optional[Union[bytes, str]],
    model: Optional[Type[RecordT]] = None,
) -> Optional[RecordT]:
    """Turn a status code and body into a record, an empty success, or an error.

    Args:
        status_code: HTTP status code
        content: Raw response body
        model: Expected record type (None for operations without a result)

    Returns:
        Decoded record, or None for an empty success

    Raises:
        ServiceError: If the status is not 2xx
        DecodeError: If a 2xx body does not decode into the expected record
    """
    if not is_success(status_code):
        message = extract_error_message(content)
        raise ServiceError(status_code, message=message, body=_body_text(content))

    if model is None:
        return None
    if not content or not content.strip():
        return None
    return decode_json(content, model)
