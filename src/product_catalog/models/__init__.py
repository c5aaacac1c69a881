"""
Models Package

Pydantic models for the product record, the caller-supplied input fields and
the error values, plus the tagged result type used by the pipelines.
"""

from .errors import DomainError, MalformedPayload, ServiceError, ValidationError
from .output import DeleteProductOutput, ProductList
from .product import Product, ProductInput
from .result import Err, Ok, Result

__all__ = [
    # Domain models
    "Product",
    "ProductInput",

    # Output models
    "ProductList",
    "DeleteProductOutput",

    # Error values
    "DomainError",
    "MalformedPayload",
    "ServiceError",
    "ValidationError",

    # Results
    "Ok",
    "Err",
    "Result",
]
