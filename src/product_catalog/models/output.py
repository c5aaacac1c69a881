"""
Output models for API responses.
"""

from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, Field

from product_catalog.models.product import Product


class ProductList(BaseModel):
    """Every product currently stored, in no particular order."""

    items: Annotated[List[Product], Field(
        default_factory=list,
        description='Stored products'
    )]

    count: Annotated[int, Field(
        ge=0,
        description='Number of products returned'
    )]

    def to_response(self) -> Dict[str, Any]:
        return {
            'items': [product.to_response() for product in self.items],
            'count': self.count,
        }


class DeleteProductOutput(BaseModel):
    """Confirmation returned after a product is removed."""

    result: str = 'delete completed'
    product: Product

    def to_response(self) -> Dict[str, Any]:
        return {'result': self.result, 'product': self.product.to_response()}
