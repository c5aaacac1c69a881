"""
API Gateway response building and error classification.

``classify_error`` is a pure mapping from an error value to a response; it is
the only place where failures acquire an HTTP status code.
"""

import json
from typing import Any, Dict, Mapping, Optional

from product_catalog.models.errors import DomainError, MalformedPayload, ServiceError, ValidationError
from product_catalog.models.result import Err, Result

JSON_HEADERS = {"content-type": "application/json"}


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Create an API Gateway proxy response with a JSON-encoded body."""
    return {
        "statusCode": status_code,
        "headers": dict(headers if headers is not None else JSON_HEADERS),
        "body": json.dumps(body),
    }


def classify_error(error: ServiceError, headers: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Map an error value to its HTTP response.

    Args:
        error: Validation, malformed-payload or domain error value
        headers: Response headers, defaults to the JSON content type

    Returns:
        API Gateway response dictionary

    Raises:
        TypeError: If ``error`` is not a classifiable error value
    """
    if isinstance(error, ValidationError):
        return create_api_response(400, {"errors": list(error.errors)}, headers)

    if isinstance(error, MalformedPayload):
        return create_api_response(400, {"error": f"Invalid request body format: {error.detail}"}, headers)

    if isinstance(error, DomainError):
        return create_api_response(error.status_code, error.body, headers)

    raise TypeError(f"Unclassifiable error value: {error!r}")


def respond(result: Result[Any], status_code: int, headers: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Turn a pipeline result into a response: ``status_code`` on success, classified otherwise."""
    if isinstance(result, Err):
        return classify_error(result.error, headers)
    return create_api_response(status_code, result.value.to_response(), headers)
