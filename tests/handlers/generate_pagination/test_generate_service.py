import pytest

from deep_pagination.models.errors import InvalidMaxPagesError
from deep_pagination.models.pagination import PaginationResult
from handlers.generate_pagination.service import PaginationService


class TestPaginationService:
    def test_generate_returns_result(self) -> None:
        result = PaginationService().generate({"current": 3, "max_pages": 5})

        assert isinstance(result, PaginationResult)
        assert result.pages == (1, 2, 3, 4, 5)

    def test_generate_reraises_pagination_errors(self) -> None:
        with pytest.raises(InvalidMaxPagesError):
            PaginationService().generate({"current": 1, "max_pages": 0})
