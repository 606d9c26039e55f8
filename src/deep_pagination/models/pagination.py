"""Pagination request and result models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, model_validator

from deep_pagination.utils.constants import (
    DEFAULT_GAP,
    DEFAULT_JUMP_VALUES,
    DEFAULT_PAD,
    get_min_pages_for_complex,
)
from deep_pagination.utils.validators import (
    validate_gap_symbol,
    validate_input,
    validate_jump_values,
)

PageToken = int | str

# Accepted input keys per field, first match wins
_FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "current": ("current",),
    "max_pages": ("max_pages", "max"),
    "pad": ("pad",),
    "gap_symbol": ("gap_symbol", "gapSymbol"),
    "jump_values": ("jump_values", "jumpValues"),
}


def _pick(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


class PaginationRequest(BaseModel):
    """Input for the pagination sequence builder.

    Accepts both snake_case keys and the camelCase / `max` spellings used by
    JavaScript callers. Optional fields left out or set to None fall back to
    the module defaults.
    """

    model_config = ConfigDict(frozen=True)

    current: int = Field(..., description="Current page number (1-based)")
    max_pages: int = Field(..., description="Total number of pages")
    pad: int = Field(
        default=DEFAULT_PAD,
        description="Pages shown on each side of the current page",
    )
    gap_symbol: str = Field(
        default=DEFAULT_GAP,
        description="Token emitted where pages are omitted",
    )
    jump_values: tuple[int, ...] = Field(
        default=DEFAULT_JUMP_VALUES,
        description="Strictly descending anchor magnitudes",
    )

    @model_validator(mode="before")
    @classmethod
    def validate_inputs(cls, data: Any) -> Any:
        """Run the pagination checks eagerly so callers get typed errors.

        Errors from `deep_pagination.models.errors` are not ValueErrors, so
        they propagate unchanged instead of being wrapped by Pydantic.
        """
        if not isinstance(data, dict):
            return data

        values = {field: _pick(data, keys) for field, keys in _FIELD_KEYS.items()}

        validate_input(values["current"], values["max_pages"], values["pad"])

        if values["jump_values"] is not None:
            validate_jump_values(values["jump_values"])

        if values["gap_symbol"] is not None:
            validate_gap_symbol(values["gap_symbol"])

        return {field: value for field, value in values.items() if value is not None}

    @property
    def min_pages_for_complex(self) -> int:
        return get_min_pages_for_complex(self.pad)


class PaginationResult(BaseModel):
    """Ordered page tokens plus navigation metadata."""

    model_config = ConfigDict(frozen=True)

    pages: tuple[PageToken, ...] = Field(
        ...,
        description="Page numbers and gap symbols in display order",
    )
    has_previous: StrictBool = Field(..., description="Whether current > 1")
    has_next: StrictBool = Field(..., description="Whether current < total pages")
    total_pages: StrictInt = Field(..., description="Total number of pages")
    current_page: StrictInt = Field(..., description="Current page number")

    @classmethod
    def from_pages(
        cls,
        pages: list[PageToken],
        *,
        current: int,
        max_pages: int,
    ) -> "PaginationResult":
        return cls(
            pages=tuple(pages),
            has_previous=current > 1,
            has_next=current < max_pages,
            total_pages=max_pages,
            current_page=current,
        )
