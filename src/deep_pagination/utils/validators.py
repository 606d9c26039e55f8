"""Input validation utilities.

Domain checks for pagination inputs raise the typed errors from
`deep_pagination.models.errors`. Request payloads coming through API Gateway
are validated with Pydantic and turned into error responses.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from deep_pagination.models.errors import (
    CurrentExceedsMaxError,
    InvalidCurrentPageError,
    InvalidGapSymbolError,
    InvalidJumpValuesError,
    InvalidMaxPagesError,
    InvalidPadError,
)
from deep_pagination.utils.constants import (
    JUMP_VALUES_REASON_EMPTY,
    JUMP_VALUES_REASON_NON_POSITIVE,
    JUMP_VALUES_REASON_UNSORTED,
    MESSAGE_CURRENT_EXCEEDS_MAX,
    MESSAGE_INVALID_CURRENT_PAGE,
    MESSAGE_INVALID_GAP_SYMBOL,
    MESSAGE_INVALID_MAX_PAGES,
    MESSAGE_INVALID_PAD,
    MESSAGE_JUMP_VALUES_EMPTY,
    MESSAGE_JUMP_VALUES_NON_POSITIVE,
    MESSAGE_JUMP_VALUES_UNSORTED,
)
from deep_pagination.utils.response import ResponseBuilder

ModelT = TypeVar("ModelT", bound=BaseModel)


def is_integer(value: Any) -> bool:
    """Return True for real integers. Booleans are rejected."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_input(current: Any, max_pages: Any, pad: Any = None) -> None:
    """Validate page bounds and pad.

    Checks run in order and the first violation raises:
    current, max pages, current <= max pages, then pad (only when supplied).

    Raises:
        InvalidCurrentPageError: current is not a positive integer
        InvalidMaxPagesError: max_pages is not a positive integer
        CurrentExceedsMaxError: current is greater than max_pages
        InvalidPadError: pad is supplied and not a non-negative integer
    """
    if not is_integer(current) or current < 1:
        raise InvalidCurrentPageError(
            message=MESSAGE_INVALID_CURRENT_PAGE,
            details={"current": repr(current)},
        )

    if not is_integer(max_pages) or max_pages < 1:
        raise InvalidMaxPagesError(
            message=MESSAGE_INVALID_MAX_PAGES,
            details={"max": repr(max_pages)},
        )

    if current > max_pages:
        raise CurrentExceedsMaxError(
            message=MESSAGE_CURRENT_EXCEEDS_MAX,
            details={"current": current, "max": max_pages},
        )

    if pad is not None and (not is_integer(pad) or pad < 0):
        raise InvalidPadError(
            message=MESSAGE_INVALID_PAD,
            details={"pad": repr(pad)},
        )


def validate_jump_values(jumps: Any) -> None:
    """Validate a custom jump table.

    The table must be a non-empty sequence of positive integers in strictly
    descending order, e.g. (1000, 100, 10, 1).

    Raises:
        InvalidJumpValuesError: with reason "empty", "non_positive" or "unsorted"
    """
    if not isinstance(jumps, Sequence) or isinstance(jumps, str) or len(jumps) == 0:
        raise InvalidJumpValuesError(
            message=MESSAGE_JUMP_VALUES_EMPTY,
            reason=JUMP_VALUES_REASON_EMPTY,
        )

    if not all(is_integer(jump) and jump > 0 for jump in jumps):
        raise InvalidJumpValuesError(
            message=MESSAGE_JUMP_VALUES_NON_POSITIVE,
            reason=JUMP_VALUES_REASON_NON_POSITIVE,
        )

    for larger, smaller in zip(jumps, jumps[1:]):
        if larger <= smaller:
            raise InvalidJumpValuesError(
                message=MESSAGE_JUMP_VALUES_UNSORTED,
                reason=JUMP_VALUES_REASON_UNSORTED,
                details={"pair": [larger, smaller]},
            )


def validate_gap_symbol(gap_symbol: Any) -> None:
    """Reject gap symbols that are not strings."""
    if not isinstance(gap_symbol, str):
        raise InvalidGapSymbolError(
            message=MESSAGE_INVALID_GAP_SYMBOL,
            details={"gap_symbol": repr(gap_symbol)},
        )


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    - internal exception details
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "query"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        # Friendly rewrites for common cases
        msg_lower = msg.lower()
        if "valid integer" in msg_lower:
            msg = "Must be a whole number"
        elif "field required" in msg_lower:
            msg = "This field is required"
        elif "type" in msg_lower:
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_request(
    model: type[ModelT],
    data: dict[str, Any],
    *,
    request_id: str | None = None,
    cors_origin: str | None = None,
) -> tuple[bool, ModelT | dict[str, Any]]:
    """Validate request data against a Pydantic model.

    Args:
        model: Pydantic model class
        data: Input data to validate
        request_id: Optional request ID for tracing
        cors_origin: Optional CORS origin

    Returns:
        (True, validated_model) on success
        (False, error_response) on validation failure
    """
    try:
        validated = model(**data)
        return True, validated

    except ValidationError as exc:
        sanitized_errors = sanitize_validation_errors(exc.errors())
        return (
            False,
            ResponseBuilder.validation_error(
                message="Invalid request parameters",
                details={"errors": sanitized_errors},
                request_id=request_id,
                cors_origin=cors_origin,
            ),
        )
