"""
Tagged success/failure values threaded through the request pipelines.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from product_catalog.models.errors import ServiceError

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome holding the produced value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome holding a classifiable error value."""

    error: ServiceError


Result = Union[Ok[T], Err]
