"""
Business logic layer for the product catalog.

Each public method is one linear pipeline: validate, talk to the store gateway
at most twice, and hand back a result. Classifiable failures come back as
``Err`` values; anything the store raises is left to propagate.
"""

from typing import Any, Optional

from aws_lambda_powertools.metrics import MetricUnit

from product_catalog.dal import ProductStore
from product_catalog.handlers.utils.observability import logger, metrics, tracer
from product_catalog.logic.validation import validate_product_payload
from product_catalog.models.errors import DomainError
from product_catalog.models.output import DeleteProductOutput, ProductList
from product_catalog.models.product import Product
from product_catalog.models.result import Err, Ok, Result


class ProductService:
    """Create, read, replace, delete and list products."""

    def __init__(self, store: ProductStore):
        self.store = store

    @tracer.capture_method
    def create_product(self, payload: Any) -> Result[Product]:
        """
        Validate ``payload`` and persist it as a new product.

        Args:
            payload: Decoded request body

        Returns:
            ``Ok`` with the stored product including its generated ``productID``
        """
        validated = validate_product_payload(payload)
        if isinstance(validated, Err):
            metrics.add_metric(name="ValidationFailed", unit=MetricUnit.Count, value=1)
            return validated

        product = self.store.put(Product.create(validated.value))

        metrics.add_metric(name="ProductCreated", unit=MetricUnit.Count, value=1)
        logger.info("Product created", extra={"product_id": product.product_id})
        return Ok(product)

    @tracer.capture_method
    def get_product(self, product_id: Optional[str]) -> Result[Product]:
        """Fetch one product by id."""
        if not product_id:
            return Err(DomainError.not_found())
        return self.store.get(product_id)

    @tracer.capture_method
    def update_product(self, product_id: Optional[str], payload: Any) -> Result[Product]:
        """
        Replace an existing product with the fields in ``payload``.

        The stored ``productID`` is kept; any id inside the payload is ignored.
        Nothing is written when validation fails or the product does not exist.

        Args:
            product_id: Identifier from the request path
            payload: Decoded request body

        Returns:
            ``Ok`` with the replacement record
        """
        validated = validate_product_payload(payload)
        if isinstance(validated, Err):
            metrics.add_metric(name="ValidationFailed", unit=MetricUnit.Count, value=1)
            return validated

        existing = self.get_product(product_id)
        if isinstance(existing, Err):
            return existing

        replacement = Product.with_id(existing.value.product_id, validated.value)
        self.store.put(replacement)

        metrics.add_metric(name="ProductUpdated", unit=MetricUnit.Count, value=1)
        logger.info("Product replaced", extra={"product_id": replacement.product_id})
        return Ok(replacement)

    @tracer.capture_method
    def delete_product(self, product_id: Optional[str]) -> Result[DeleteProductOutput]:
        """Remove an existing product, echoing the deleted record."""
        existing = self.get_product(product_id)
        if isinstance(existing, Err):
            return existing

        self.store.delete(existing.value.product_id)

        metrics.add_metric(name="ProductDeleted", unit=MetricUnit.Count, value=1)
        return Ok(DeleteProductOutput(product=existing.value))

    @tracer.capture_method
    def list_products(self) -> ProductList:
        """Return every stored product."""
        products = self.store.scan()
        logger.info("Products listed", extra={"count": products.count})
        return products
