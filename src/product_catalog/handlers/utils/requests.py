"""
Helpers for reading API Gateway proxy events.
"""

import json
from typing import Any, Optional

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from product_catalog.handlers.utils.observability import logger, metrics
from product_catalog.models.errors import MalformedPayload
from product_catalog.models.result import Err, Ok, Result


def parse_json_body(event: APIGatewayProxyEvent) -> Result[Any]:
    """Decode the request body, reporting unparseable bodies as ``MalformedPayload``."""
    if event.get("body") is None:
        return _malformed("request body is empty")

    # JSONDecodeError, UnicodeDecodeError and binascii.Error are all ValueErrors
    try:
        return Ok(json.loads(event.decoded_body))
    except ValueError as e:
        return _malformed(str(e))


def get_product_id(event: APIGatewayProxyEvent) -> Optional[str]:
    """Return the ``id`` path parameter, if present."""
    return (event.path_parameters or {}).get('id')


def _malformed(detail: str) -> Err:
    logger.info("Request body could not be parsed", extra={"detail": detail})
    metrics.add_metric(name="MalformedPayload", unit=MetricUnit.Count, value=1)
    return Err(MalformedPayload(detail=detail))
