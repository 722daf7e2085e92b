"""Error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Configuration errors (APP_*, INVALID_*)
- Authentication errors (CREDENTIALS_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Configuration errors
    APP_NOT_FOUND = "app_not_found"
    APP_ID_MISSING = "app_id_missing"
    INVALID_SUBDOMAIN = "invalid_subdomain"

    # Authentication errors
    CREDENTIALS_MISSING = "credentials_missing"
