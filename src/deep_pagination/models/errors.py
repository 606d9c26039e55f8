"""Custom exception classes for the pagination service."""

from typing import Any

from deep_pagination.utils.constants import (
    ERROR_CODE_CURRENT_EXCEEDS_MAX,
    ERROR_CODE_INVALID_CURRENT_PAGE,
    ERROR_CODE_INVALID_GAP_SYMBOL,
    ERROR_CODE_INVALID_JUMP_VALUES,
    ERROR_CODE_INVALID_MAX_PAGES,
    ERROR_CODE_INVALID_PAD,
    ERROR_CODE_VALIDATION_FAILED,
)


class DeepPaginationError(Exception):
    """
    Base exception for all pagination errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(DeepPaginationError):
    """Raised when pagination input validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidCurrentPageError(ValidationError):
    """Raised when the current page is not a positive integer."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_CURRENT_PAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidMaxPagesError(ValidationError):
    """Raised when the total page count is not a positive integer."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_MAX_PAGES,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class CurrentExceedsMaxError(ValidationError):
    """Raised when the current page lies beyond the last page."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CURRENT_EXCEEDS_MAX,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidPadError(ValidationError):
    """Raised when pad is not a non-negative integer."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_PAD,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidJumpValuesError(ValidationError):
    """Raised when custom jump values are empty, non-positive or unsorted.

    The rejection reason is exposed as `reason` and in `details["reason"]`.
    """

    reason: str

    def __init__(
        self,
        *,
        message: str,
        reason: str,
        error_code: str = ERROR_CODE_INVALID_JUMP_VALUES,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.reason = reason
        super().__init__(
            message=message,
            error_code=error_code,
            details={"reason": reason, **(details or {})},
        )


class InvalidGapSymbolError(ValidationError):
    """Raised when the gap symbol could be mistaken for a page number."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_GAP_SYMBOL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
