"""
Error values for the product catalog.

Classifiable failures are never raised; they travel back to the handler inside
an ``Err`` result and are turned into an HTTP response by the error
classifier. Anything that is not one of these values is an unclassified error
and propagates as a normal exception.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

NOT_FOUND_BODY = {'error': 'not found'}


class ValidationError(BaseModel):
    """Field-level validation failures, aggregated over the whole payload."""

    model_config = ConfigDict(frozen=True)

    errors: List[str] = Field(description='One message per invalid or missing field')


class MalformedPayload(BaseModel):
    """The request body could not be decoded as JSON."""

    model_config = ConfigDict(frozen=True)

    detail: str


class DomainError(BaseModel):
    """An error that carries its own HTTP status code and response body."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: Dict[str, Any]

    @classmethod
    def not_found(cls) -> 'DomainError':
        return cls(status_code=404, body=dict(NOT_FOUND_BODY))


ServiceError = Union[ValidationError, MalformedPayload, DomainError]
