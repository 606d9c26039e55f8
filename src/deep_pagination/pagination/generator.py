"""
Public entry point for multi-level deep pagination.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from deep_pagination.models.pagination import PaginationRequest, PaginationResult
from deep_pagination.pagination.sequence import build_pagination_array
from deep_pagination.utils.constants import SERVICE_NAME

logger = Logger(service=SERVICE_NAME, UTC=True)


def generate_pagination(
    options: PaginationRequest | Mapping[str, Any],
) -> PaginationResult:
    """
    Generate pagination tokens with multi-level deep anchor pages.

    Args:
        options: A PaginationRequest, or a mapping with `current`, `max`
            and optional `pad`, `gap_symbol` and `jump_values`

    Returns:
        PaginationResult with the page tokens and navigation flags

    Raises:
        InvalidCurrentPageError, InvalidMaxPagesError, CurrentExceedsMaxError,
        InvalidPadError, InvalidJumpValuesError, InvalidGapSymbolError

    Example:
        generate_pagination({"current": 3, "max": 5}).pages
        → (1, 2, 3, 4, 5)
    """
    request = (
        options
        if isinstance(options, PaginationRequest)
        else PaginationRequest.model_validate(dict(options))
    )

    logger.debug(
        "Generating pagination",
        extra={
            "current": request.current,
            "max_pages": request.max_pages,
            "pad": request.pad,
            "complex": request.max_pages >= request.min_pages_for_complex,
        },
    )

    pages = build_pagination_array(
        request.current,
        request.max_pages,
        request.pad,
        request.gap_symbol,
        request.jump_values,
    )

    return PaginationResult.from_pages(
        pages,
        current=request.current,
        max_pages=request.max_pages,
    )
