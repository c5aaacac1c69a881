"""
Pytest configuration and shared fixtures for the product catalog.

Environment variables are set at import time so that the Powertools
utilities and the environment model pick them up before any handler module
is imported.
"""

import os

os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "TABLE_NAME": "test-products-table",
    "POWERTOOLS_SERVICE_NAME": "test-product-catalog",
    "POWERTOOLS_METRICS_NAMESPACE": "TestProductCatalog",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LOG_LEVEL": "DEBUG",
})

import json  # noqa: E402
from typing import Any, Dict, Optional  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import boto3  # noqa: E402
import pytest  # noqa: E402
from moto import mock_aws  # noqa: E402

from product_catalog.handlers.utils.config import get_handler_config  # noqa: E402

TABLE_NAME = "test-products-table"


@pytest.fixture(autouse=True)
def reset_handler_config():
    """Rebuild the process-wide configuration (and its boto3 resource) per test."""
    get_handler_config.cache_clear()
    yield
    get_handler_config.cache_clear()


@pytest.fixture
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture
def dynamodb_table(aws_mock):
    """Create a mock DynamoDB products table keyed by productID."""
    dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
    table = dynamodb.create_table(
        TableName=TABLE_NAME,
        KeySchema=[{"AttributeName": "productID", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "productID", "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    yield table


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    return {
        "name": "Pen",
        "description": "Blue pen",
        "price": 1.5,
        "available": True,
    }


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-product-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-product-function"
    context.memory_limit_in_mb = 128
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-product-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis = lambda: 30000
    return context


@pytest.fixture
def api_gateway_event():
    """Factory for API Gateway REST proxy events."""

    def make_event(
        method: str = "GET",
        path: str = "/products",
        body: Any = None,
        product_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "resource": "/products/{id}" if product_id else "/products",
            "path": f"{path}/{product_id}" if product_id else path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": {"id": product_id} if product_id else None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return make_event


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
