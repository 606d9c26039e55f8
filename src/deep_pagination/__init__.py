"""Deep Pagination Package."""

from deep_pagination.models.errors import (
    CurrentExceedsMaxError,
    DeepPaginationError,
    InvalidCurrentPageError,
    InvalidGapSymbolError,
    InvalidJumpValuesError,
    InvalidMaxPagesError,
    InvalidPadError,
    ValidationError,
)
from deep_pagination.models.pagination import PaginationRequest, PaginationResult
from deep_pagination.pagination.generator import generate_pagination
from deep_pagination.utils.constants import DEFAULT_GAP, DEFAULT_JUMP_VALUES, DEFAULT_PAD

__version__ = "1.0.0"
__description__ = (
    "Pagination sequences with multi-level deep anchor pages for very large page counts"
)

__all__ = [
    "DEFAULT_GAP",
    "DEFAULT_JUMP_VALUES",
    "DEFAULT_PAD",
    "CurrentExceedsMaxError",
    "DeepPaginationError",
    "InvalidCurrentPageError",
    "InvalidGapSymbolError",
    "InvalidJumpValuesError",
    "InvalidMaxPagesError",
    "InvalidPadError",
    "PaginationRequest",
    "PaginationResult",
    "ValidationError",
    "generate_pagination",
]
