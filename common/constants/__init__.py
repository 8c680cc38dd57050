"""Wire-level constants for the Conversation service API."""

# ============================================================================
# Paths
# ============================================================================

# Root of the workspace resource tree
WORKSPACES_PATH = "/v1/workspaces"

# ============================================================================
# Query parameters
# ============================================================================

VERSION_PARAM = "version"
PAGE_LIMIT_PARAM = "page_limit"
INCLUDE_COUNT_PARAM = "include_count"
SORT_PARAM = "sort"
CURSOR_PARAM = "cursor"
FILTER_PARAM = "filter"
EXPORT_PARAM = "export"

# ============================================================================
# Headers
# ============================================================================

JSON_CONTENT_TYPE = "application/json"

# ============================================================================
# Error responses
# ============================================================================

# Key holding the human-readable message in a service error body
ERROR_MESSAGE_KEY = "error"

__all__ = [
    'WORKSPACES_PATH',
    'VERSION_PARAM',
    'PAGE_LIMIT_PARAM',
    'INCLUDE_COUNT_PARAM',
    'SORT_PARAM',
    'CURSOR_PARAM',
    'FILTER_PARAM',
    'EXPORT_PARAM',
    'JSON_CONTENT_TYPE',
    'ERROR_MESSAGE_KEY',
]
