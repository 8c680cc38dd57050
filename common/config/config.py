"""
Configuration for the Conversation service client.

Values are read from the environment (and a local .env file, if present)
once at import time. Explicit constructor arguments on the client always
take precedence over these defaults.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def get_float_env(key: str, default: float) -> float:
    """Get a float environment variable, falling back to the default."""
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise Exception(f"{key} must be a number, got {value!r}")


# Service endpoint
CONVERSATION_URL = os.getenv(
    "CONVERSATION_URL", "https://gateway.watsonplatform.net/conversation/api"
)
CONVERSATION_VERSION = os.getenv("CONVERSATION_VERSION", "2017-05-26")

# Credentials (basic auth or bearer token)
CONVERSATION_USERNAME = os.getenv("CONVERSATION_USERNAME")
CONVERSATION_PASSWORD = os.getenv("CONVERSATION_PASSWORD")
CONVERSATION_BEARER_TOKEN = os.getenv("CONVERSATION_BEARER_TOKEN")

# Timeouts (seconds)
CONVERSATION_REQUEST_TIMEOUT = get_float_env("CONVERSATION_REQUEST_TIMEOUT", 150.0)
CONVERSATION_CONNECT_TIMEOUT = get_float_env("CONVERSATION_CONNECT_TIMEOUT", 60.0)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
APP_LOG_FILE = os.getenv("APP_LOG_FILE")
