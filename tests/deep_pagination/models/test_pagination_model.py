import pytest
from pydantic import ValidationError as PydanticValidationError

from deep_pagination.models.errors import (
    InvalidCurrentPageError,
    InvalidJumpValuesError,
    InvalidPadError,
)
from deep_pagination.models.pagination import PaginationRequest, PaginationResult
from deep_pagination.utils.constants import DEFAULT_GAP, DEFAULT_JUMP_VALUES, DEFAULT_PAD


class TestPaginationRequest:
    def test_defaults(self) -> None:
        request = PaginationRequest(current=1, max_pages=10)

        assert request.pad == DEFAULT_PAD
        assert request.gap_symbol == DEFAULT_GAP
        assert request.jump_values == DEFAULT_JUMP_VALUES

    def test_accepts_max_and_camel_case_keys(self) -> None:
        request = PaginationRequest.model_validate(
            {
                "current": 5,
                "max": 100,
                "gapSymbol": "...",
                "jumpValues": [50, 10, 1],
            }
        )

        assert request.max_pages == 100
        assert request.gap_symbol == "..."
        assert request.jump_values == (50, 10, 1)

    def test_none_values_use_defaults(self) -> None:
        request = PaginationRequest.model_validate(
            {"current": 1, "max_pages": 10, "pad": None, "gap_symbol": None}
        )

        assert request.pad == DEFAULT_PAD
        assert request.gap_symbol == DEFAULT_GAP

    def test_jump_values_list_becomes_tuple(self) -> None:
        request = PaginationRequest(current=1, max_pages=10, jump_values=[100, 10, 1])

        assert request.jump_values == (100, 10, 1)

    def test_is_frozen(self) -> None:
        request = PaginationRequest(current=1, max_pages=10)

        with pytest.raises(PydanticValidationError):
            request.current = 2

    def test_min_pages_for_complex(self) -> None:
        assert PaginationRequest(current=1, max_pages=10).min_pages_for_complex == 15
        assert PaginationRequest(current=1, max_pages=10, pad=0).min_pages_for_complex == 7
        assert PaginationRequest(current=1, max_pages=10, pad=5).min_pages_for_complex == 27

    def test_raises_typed_errors(self) -> None:
        with pytest.raises(InvalidCurrentPageError):
            PaginationRequest(current=0, max_pages=10)

        with pytest.raises(InvalidPadError):
            PaginationRequest(current=1, max_pages=10, pad=-2)

        with pytest.raises(InvalidJumpValuesError):
            PaginationRequest(current=1, max_pages=10, jump_values=[1, 10])


class TestPaginationResult:
    def test_from_pages_sets_navigation_flags(self) -> None:
        result = PaginationResult.from_pages([1, 2, 3], current=2, max_pages=3)

        assert result.pages == (1, 2, 3)
        assert result.has_previous is True
        assert result.has_next is True
        assert result.current_page == 2
        assert result.total_pages == 3

    def test_keeps_gap_tokens(self) -> None:
        result = PaginationResult.from_pages(
            [1, DEFAULT_GAP, 10], current=10, max_pages=10
        )

        assert result.pages == (1, DEFAULT_GAP, 10)
        assert result.has_next is False

    def test_is_frozen(self) -> None:
        result = PaginationResult.from_pages([1], current=1, max_pages=1)

        with pytest.raises(PydanticValidationError):
            result.has_next = True

    def test_flags_must_be_booleans(self) -> None:
        with pytest.raises(PydanticValidationError):
            PaginationResult(
                pages=(1,),
                has_previous="yes",
                has_next=False,
                total_pages=1,
                current_page=1,
            )
