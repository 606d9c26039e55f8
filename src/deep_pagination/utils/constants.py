"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_CURRENT_PAGE = "INVALID_CURRENT_PAGE"
ERROR_CODE_INVALID_MAX_PAGES = "INVALID_MAX_PAGES"
ERROR_CODE_CURRENT_EXCEEDS_MAX = "CURRENT_EXCEEDS_MAX"
ERROR_CODE_INVALID_PAD = "INVALID_PAD"
ERROR_CODE_INVALID_JUMP_VALUES = "INVALID_JUMP_VALUES"
ERROR_CODE_INVALID_GAP_SYMBOL = "INVALID_GAP_SYMBOL"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# Error Messages
# ============================================================================

MESSAGE_INVALID_CURRENT_PAGE = "Current page must be a positive integer"
MESSAGE_INVALID_MAX_PAGES = "Max pages must be a positive integer"
MESSAGE_CURRENT_EXCEEDS_MAX = "Current page cannot be greater than max pages"
MESSAGE_INVALID_PAD = "Pad must be a non-negative integer"
MESSAGE_INVALID_GAP_SYMBOL = "Gap symbol must be a string"
MESSAGE_JUMP_VALUES_EMPTY = "Jump values must be a non-empty array"
MESSAGE_JUMP_VALUES_NON_POSITIVE = "All jump values must be positive integers"
MESSAGE_JUMP_VALUES_UNSORTED = "Jump values must be sorted in descending order"

# Jump value rejection reasons
JUMP_VALUES_REASON_EMPTY = "empty"
JUMP_VALUES_REASON_NON_POSITIVE = "non_positive"
JUMP_VALUES_REASON_UNSORTED = "unsorted"


# ============================================================================
# Pagination Defaults
# ============================================================================

DEFAULT_GAP: Final[str] = "…"
DEFAULT_PAD: Final[int] = 2
DEFAULT_JUMP_VALUES: Final[tuple[int, ...]] = (
    50000,
    25000,
    10000,
    5000,
    1000,
    500,
    250,
    100,
    50,
    25,
    10,
    5,
    1,
)

# First, last, current, both gaps and one anchor per side.
COMPLEX_MODE_BASE_PAGES: Final[int] = 7
COMPLEX_MODE_PAGES_PER_PAD: Final[int] = 4

# Position tags for the append rule
POSITION_LEFT: Final[int] = -1
POSITION_CENTER: Final[int] = 0
POSITION_RIGHT: Final[int] = 1


# ============================================================================
# API Constraints
# ============================================================================

MIN_API_PAD = 0
MAX_API_PAD = 50
MAX_API_JUMP_VALUES = 32
JUMP_VALUES_SEPARATOR = ","


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"


# ============================================================================
# Observability
# ============================================================================

SERVICE_NAME = "deep-pagination"
METRICS_NAMESPACE = "DeepPagination"
METRIC_PAGINATION_GENERATED = "PaginationGenerated"


# ============================================================================
# Helper Functions
# ============================================================================


def get_min_pages_for_complex(pad: int) -> int:
    """Smallest page count that switches from listing every page to the gapped layout."""
    return COMPLEX_MODE_BASE_PAGES + pad * COMPLEX_MODE_PAGES_PER_PAD
