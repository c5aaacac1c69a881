"""
Create Product handler - POST /products.

Validates the JSON body, assigns a new ``productID`` and stores the record.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from product_catalog.handlers.utils.config import HandlerConfig, get_handler_config
from product_catalog.handlers.utils.errors import log_unhandled_errors
from product_catalog.handlers.utils.observability import logger, metrics, tracer
from product_catalog.handlers.utils.requests import parse_json_body
from product_catalog.handlers.utils.responses import classify_error, respond
from product_catalog.logic.product_service import ProductService
from product_catalog.models.result import Err


def handle_create_product(event: APIGatewayProxyEvent, config: HandlerConfig) -> Dict[str, Any]:
    logger.info("Create product request received")

    payload = parse_json_body(event)
    if isinstance(payload, Err):
        return classify_error(payload.error, config.headers)

    result = ProductService(config.store).create_product(payload.value)
    return respond(result, 201, config.headers)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@log_unhandled_errors
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda entry point for product creation.

    Args:
        event: API Gateway proxy event with the product fields as JSON body
        context: Lambda context object

    Returns:
        201 with the stored product, or 400 for a malformed or invalid body
    """
    return handle_create_product(event, get_handler_config())
