"""
Business logic for pagination generation.
"""

from typing import Any

from aws_lambda_powertools import Logger

from deep_pagination.models.errors import DeepPaginationError
from deep_pagination.models.pagination import PaginationResult
from deep_pagination.pagination.generator import generate_pagination

logger = Logger(UTC=True)


class PaginationService:
    """Application service responsible for building pagination controls."""

    def generate(self, options: dict[str, Any]) -> PaginationResult:
        """
        Build the pagination tokens for the given options.

        Raises:
            DeepPaginationError: If the options are rejected
        """
        try:
            result = generate_pagination(options)
        except DeepPaginationError as exc:
            logger.warning(
                "Pagination options rejected",
                extra={"error_code": exc.error_code, "details": exc.details},
            )
            raise

        logger.info(
            "Pagination generated successfully",
            extra={
                "current": result.current_page,
                "total_pages": result.total_pages,
                "token_count": len(result.pages),
            },
        )

        return result
