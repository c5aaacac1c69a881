"""
Environment variable models for type-safe configuration.

The handlers read their settings once per process through
``aws_lambda_env_modeler``, which validates them with pydantic and caches the
resulting model.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class ProductsHandlerEnvVars(BaseModel):
    """Environment variables for the product handlers."""

    # DynamoDB table holding one item per product, keyed by productID
    TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for product storage',
        min_length=1
    )] = 'ProductsTableServerless'

    # Endpoint override, used with DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='Custom DynamoDB endpoint URL'
    )] = None

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='product-catalog',
        description='Service name for AWS Powertools'
    )] = 'product-catalog'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'


def get_handler_env_vars() -> ProductsHandlerEnvVars:
    """
    Get typed environment variables for the product handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ProductsHandlerEnvVars)
