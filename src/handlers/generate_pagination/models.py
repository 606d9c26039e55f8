"""
Pydantic models for the generate pagination request and response.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from deep_pagination.models.pagination import PageToken
from deep_pagination.utils.constants import (
    JUMP_VALUES_SEPARATOR,
    MAX_API_JUMP_VALUES,
    MAX_API_PAD,
)


class GeneratePaginationRequest(BaseModel):
    """
    Validation model for the generate pagination API.

    Query string values arrive as strings and are coerced here. Range checks
    on the page numbers are left to the pagination validators so the API
    reports the same error codes as the library.
    """

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    current: int = Field(..., description="Current page number (1-based)")
    max_pages: int = Field(..., alias="max", description="Total number of pages")

    pad: int | None = Field(
        None,
        le=MAX_API_PAD,
        description=f"Pages shown on each side of the current page (0-{MAX_API_PAD})",
    )
    gap: str | None = Field(
        None,
        min_length=1,
        max_length=8,
        description="Token emitted where pages are omitted",
    )
    jumps: tuple[int, ...] | None = Field(
        None,
        max_length=MAX_API_JUMP_VALUES,
        description="Comma separated, strictly descending jump values",
    )

    @field_validator("jumps", mode="before")
    @classmethod
    def split_jumps(cls, value: Any) -> Any:
        """Split "1000,100,10" into its parts; blank input means default."""
        if isinstance(value, str):
            if not value.strip():
                return None
            return tuple(part.strip() for part in value.split(JUMP_VALUES_SEPARATOR))
        return value

    def to_options(self) -> dict[str, Any]:
        """Options for `generate_pagination`, omitting unset values."""
        options: dict[str, Any] = {
            "current": self.current,
            "max_pages": self.max_pages,
            "pad": self.pad,
            "gap_symbol": self.gap,
            "jump_values": self.jumps,
        }
        return {key: value for key, value in options.items() if value is not None}


class GeneratePaginationResponse(BaseModel):
    """Response body of the generate pagination API."""

    pages: list[PageToken]
    has_previous: bool
    has_next: bool
    total_pages: int
    current_page: int
