"""Global constants used throughout the library.

This module centralizes defaults, limits, error codes and environment
variable names so they can be changed in one place.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"
ERROR_CODE_INVALID_SORT_EXPRESSION = "INVALID_SORT_EXPRESSION"

# ============================================================================
# Pagination Defaults
# ============================================================================

DEFAULT_SKIP_COUNT = 0
DEFAULT_MAX_RESULT_COUNT = 10

# ============================================================================
# Sort Expressions
# ============================================================================

SORT_EXPRESSION_SEPARATOR = ","
SORT_DIRECTION_ASC = "asc"
SORT_DIRECTION_DESC = "desc"
SORT_DIRECTIONS: Final[frozenset[str]] = frozenset(
    {SORT_DIRECTION_ASC, SORT_DIRECTION_DESC}
)

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_TABLE_NAME = "PAGEKIT_TABLE_NAME"
