"""
Data Access Layer (DAL) for the product catalog.

This module defines the store gateway interface used by the logic layer and a
factory returning the DynamoDB implementation.
"""

from typing import Optional, Protocol, runtime_checkable

from product_catalog.models.output import ProductList
from product_catalog.models.product import Product
from product_catalog.models.result import Result


@runtime_checkable
class ProductStore(Protocol):
    """Protocol defining the store gateway for one product table."""

    def get(self, product_id: str) -> Result[Product]:
        """Fetch a product, or a not-found error value if absent."""
        ...

    def put(self, product: Product) -> Product:
        """Insert or fully overwrite a product."""
        ...

    def delete(self, product_id: str) -> None:
        """Remove a product; absent ids are ignored."""
        ...

    def scan(self) -> ProductList:
        """Return every stored product with the item count."""
        ...


def get_dal_handler(table_name: str, endpoint_url: Optional[str] = None) -> ProductStore:
    """
    Factory function to get the store gateway for ``table_name``.

    Args:
        table_name: Name of the DynamoDB table
        endpoint_url: Optional endpoint override (DynamoDB Local)

    Returns:
        Store gateway instance
    """
    # Import here to avoid circular imports
    from product_catalog.dal.dynamodb_handler import DynamoDBProductHandler

    return DynamoDBProductHandler(table_name=table_name, endpoint_url=endpoint_url)


__all__ = [
    'ProductStore',
    'get_dal_handler',
]
