"""
Pytest configuration and shared fixtures for deep pagination tests.
"""

import os
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from deep_pagination.models.pagination import PageToken

os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "deep-pagination")


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def pagination_event() -> Callable[..., dict[str, Any]]:
    """Build an API Gateway GET event with the given query parameters."""

    def _build(**params: str) -> dict[str, Any]:
        return {
            "httpMethod": "GET",
            "path": "/pagination",
            "queryStringParameters": params or None,
            "headers": {"x-api-key": "test-api-key"},
        }

    return _build


@pytest.fixture
def page_numbers() -> Callable[[tuple[PageToken, ...] | list[PageToken]], list[int]]:
    """Extract the numeric tokens from a page sequence."""

    def _numbers(pages: tuple[PageToken, ...] | list[PageToken]) -> list[int]:
        return [page for page in pages if isinstance(page, int)]

    return _numbers
