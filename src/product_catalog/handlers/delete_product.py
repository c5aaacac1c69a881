"""
Delete Product handler - DELETE /products/{id}.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from product_catalog.handlers.utils.config import HandlerConfig, get_handler_config
from product_catalog.handlers.utils.errors import log_unhandled_errors
from product_catalog.handlers.utils.observability import logger, metrics, tracer
from product_catalog.handlers.utils.requests import get_product_id
from product_catalog.handlers.utils.responses import respond
from product_catalog.logic.product_service import ProductService


def handle_delete_product(event: APIGatewayProxyEvent, config: HandlerConfig) -> Dict[str, Any]:
    product_id = get_product_id(event)
    logger.info("Delete product request received", extra={"product_id": product_id})

    result = ProductService(config.store).delete_product(product_id)
    return respond(result, 200, config.headers)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@log_unhandled_errors
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
    """Lambda entry point returning the deleted record, or 404 if it does not exist."""
    return handle_delete_product(event, get_handler_config())
