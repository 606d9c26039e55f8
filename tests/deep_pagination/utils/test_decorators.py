import json
from http import HTTPStatus
from types import SimpleNamespace
from typing import Any, cast

from deep_pagination.models.errors import CurrentExceedsMaxError
from deep_pagination.utils.decorators import api_gateway_handler
from deep_pagination.utils.response import JsonDict, ResponseBuilder


def parse_body(resp: dict[str, Any]) -> dict[str, Any]:
    """Parse JSON body from API Gateway response."""
    body = resp.get("body")
    if not body:
        return {}
    return cast(dict[str, Any], json.loads(body))


def test_api_handler_success() -> None:
    """Successful handler execution returns response unchanged."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        return ResponseBuilder.ok({"pages": [1]}, request_id=context.aws_request_id)

    resp = handler({"httpMethod": "GET"}, SimpleNamespace(aws_request_id="req-ok"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.OK
    assert parsed["pages"] == [1]
    assert parsed["request_id"] == "req-ok"


def test_options_request_short_circuits() -> None:
    """CORS preflight never reaches the wrapped handler."""
    calls: list[Any] = []

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        calls.append(event)
        return ResponseBuilder.ok({})

    resp = handler({"httpMethod": "OPTIONS"}, SimpleNamespace(), cors_origin="https://a.b")

    assert resp["statusCode"] == HTTPStatus.NO_CONTENT
    assert resp["headers"]["Access-Control-Allow-Origin"] == "https://a.b"
    assert calls == []


def test_pagination_error_becomes_bad_request() -> None:
    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise CurrentExceedsMaxError(
            message="Current page cannot be greater than max pages",
            details={"current": 11, "max": 10},
        )

    resp = handler({"httpMethod": "GET"}, SimpleNamespace(aws_request_id="req-400"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.BAD_REQUEST
    assert parsed["error"] == "CURRENT_EXCEEDS_MAX"
    assert parsed["message"] == "Current page cannot be greater than max pages"
    assert parsed["details"] == {"current": 11, "max": 10}
    assert parsed["request_id"] == "req-400"


def test_unexpected_error_becomes_internal_error() -> None:
    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise RuntimeError("boom")

    resp = handler({"httpMethod": "GET"}, SimpleNamespace(aws_request_id="req-500"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.INTERNAL_SERVER_ERROR
    assert "boom" not in parsed["message"]
    assert parsed["request_id"] == "req-500"


def test_missing_request_id_is_tolerated() -> None:
    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise RuntimeError("boom")

    resp = handler({}, object())

    assert resp["statusCode"] == HTTPStatus.INTERNAL_SERVER_ERROR
    assert "request_id" not in parse_body(resp)
