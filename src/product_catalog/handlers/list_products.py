"""
List Products handler - GET /products.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from product_catalog.handlers.utils.config import HandlerConfig, get_handler_config
from product_catalog.handlers.utils.errors import log_unhandled_errors
from product_catalog.handlers.utils.observability import logger, metrics, tracer
from product_catalog.handlers.utils.responses import create_api_response
from product_catalog.logic.product_service import ProductService


def handle_list_products(event: APIGatewayProxyEvent, config: HandlerConfig) -> Dict[str, Any]:
    logger.info("List products request received")

    products = ProductService(config.store).list_products()
    return create_api_response(200, products.to_response(), config.headers)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@log_unhandled_errors
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
    """Lambda entry point returning every stored product and the count."""
    return handle_list_products(event, get_handler_config())
