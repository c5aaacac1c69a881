"""
Product domain model.

``ProductInput`` describes the fields a caller may send on create and update;
it is strict so that a string price or a numeric ``available`` flag is
rejected rather than coerced. ``Product`` is the stored record, which adds the
server-generated ``productID``.
"""

from typing import Annotated, Any, Dict
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

# DynamoDB number range: magnitudes above 9.9999...E+125 or below 1E-130 are rejected
MAX_PRICE_MAGNITUDE = 9.99e125
MIN_PRICE_MAGNITUDE = 1e-130


class ProductInput(BaseModel):
    """Request model for the caller-supplied product fields."""

    model_config = ConfigDict(strict=True, extra='ignore')

    name: Annotated[str, Field(
        min_length=1,
        description='Product name',
        examples=['Pen']
    )]

    description: Annotated[str, Field(
        min_length=1,
        description='Product description',
        examples=['Blue pen']
    )]

    price: Annotated[float, Field(
        allow_inf_nan=False,
        description='Unit price',
        examples=[1.5]
    )]

    available: Annotated[bool, Field(
        description='Whether the product can currently be ordered',
        examples=[True]
    )]

    @field_validator('price')
    @classmethod
    def validate_price_range(cls, v: float) -> float:
        """Reject prices DynamoDB cannot store as a number."""
        if v != 0 and not MIN_PRICE_MAGNITUDE <= abs(v) <= MAX_PRICE_MAGNITUDE:
            raise PydanticCustomError('number_range', 'price is outside the storable number range')
        return v


class Product(BaseModel):
    """Core Product domain model, as persisted in the catalog table."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_id: Annotated[str, Field(
        alias='productID',
        min_length=1,
        description='Unique identifier for the product',
        examples=['0b8e2a8c-6b59-4c0b-9a83-7d2f0a3e5c11']
    )]

    name: Annotated[str, Field(min_length=1)]
    description: Annotated[str, Field(min_length=1)]
    price: float
    available: bool

    @classmethod
    def create(cls, fields: ProductInput) -> 'Product':
        """Build a new product with a freshly generated ``productID``."""
        return cls.with_id(str(uuid4()), fields)

    @classmethod
    def with_id(cls, product_id: str, fields: ProductInput) -> 'Product':
        """Build the full record for ``product_id`` from validated input fields."""
        return cls(product_id=product_id, **fields.model_dump())

    def to_response(self) -> Dict[str, Any]:
        """Serialize using the public field names (``productID``)."""
        return self.model_dump(by_alias=True)
