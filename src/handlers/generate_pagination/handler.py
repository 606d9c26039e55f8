"""
Lambda handler responsible for generating pagination sequences.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from deep_pagination.utils.constants import (
    METRIC_PAGINATION_GENERATED,
    METRICS_NAMESPACE,
    SERVICE_NAME,
)
from deep_pagination.utils.decorators import api_gateway_handler
from deep_pagination.utils.response import ResponseBuilder
from deep_pagination.utils.validators import validate_request

from .models import GeneratePaginationRequest, GeneratePaginationResponse
from .service import PaginationService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle pagination requests.

    Query parameters:
        current: Current page (required)
        max: Total number of pages (required)
        pad: Pages around the current page
        gap: Gap symbol
        jumps: Comma separated descending jump values

    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        API Gateway-compatible response dictionary.
    """
    request_id = getattr(context, "aws_request_id", None)
    params = event.get("queryStringParameters") or {}

    logger.info(
        "Received pagination request",
        extra={
            "http_method": event.get("httpMethod"),
            "query_params": params,
            "request_id": request_id,
        },
    )

    is_valid, result = validate_request(
        GeneratePaginationRequest,
        params,
        request_id=request_id,
    )
    if not is_valid:
        return result

    request: GeneratePaginationRequest = result
    pagination = PaginationService().generate(request.to_options())

    metrics.add_metric(name=METRIC_PAGINATION_GENERATED, unit=MetricUnit.Count, value=1)

    response = GeneratePaginationResponse(
        pages=list(pagination.pages),
        has_previous=pagination.has_previous,
        has_next=pagination.has_next,
        total_pages=pagination.total_pages,
        current_page=pagination.current_page,
    )

    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
