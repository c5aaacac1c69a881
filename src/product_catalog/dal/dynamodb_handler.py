"""
DynamoDB implementation of the product store gateway.

One table, one item per product, keyed by the ``productID`` string attribute.
A missing item is reported as a not-found error value; every other failure
from botocore is logged and re-raised untouched.
"""

from decimal import Decimal
from typing import Any, Dict, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from product_catalog.handlers.utils.observability import logger, metrics, tracer
from product_catalog.models.errors import DomainError
from product_catalog.models.output import ProductList
from product_catalog.models.product import Product
from product_catalog.models.result import Err, Ok, Result

KEY_ATTRIBUTE = 'productID'


class DynamoDBProductHandler:
    """Store gateway for the product table."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        self.table_name = table_name

        resource_config = {}
        if region_name:
            resource_config['region_name'] = region_name
        if endpoint_url:
            resource_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **resource_config)
        self.table = self.dynamodb.Table(table_name)

        logger.debug("DynamoDB handler initialized", extra={
            "table_name": table_name,
            "endpoint_url": endpoint_url,
        })

    @tracer.capture_method
    def get(self, product_id: str) -> Result[Product]:
        """
        Retrieve a product by its ID.

        Args:
            product_id: Unique identifier of the product

        Returns:
            ``Ok`` with the product, or ``Err`` with a 404 domain error
        """
        try:
            response = self.table.get_item(Key={KEY_ATTRIBUTE: product_id})
        except (ClientError, BotoCoreError) as e:
            self._log_failure('GetItem', e, product_id=product_id)
            raise

        item = response.get('Item')
        if not item:
            logger.info("Product not found", extra={"product_id": product_id})
            metrics.add_metric(name="ProductNotFound", unit=MetricUnit.Count, value=1)
            return Err(DomainError.not_found())

        tracer.put_annotation('product_id', product_id)
        return Ok(self._item_to_product(item))

    @tracer.capture_method
    def put(self, product: Product) -> Product:
        """
        Insert or fully overwrite a product.

        Args:
            product: Complete product record

        Returns:
            The stored product
        """
        try:
            self.table.put_item(Item=self._product_to_item(product))
        except (ClientError, BotoCoreError) as e:
            self._log_failure('PutItem', e, product_id=product.product_id)
            raise

        logger.info("Product stored", extra={"product_id": product.product_id})
        return product

    @tracer.capture_method
    def delete(self, product_id: str) -> None:
        """
        Delete a product by its ID. Deleting an absent id is not an error.

        Args:
            product_id: Unique identifier of the product
        """
        try:
            self.table.delete_item(Key={KEY_ATTRIBUTE: product_id})
        except (ClientError, BotoCoreError) as e:
            self._log_failure('DeleteItem', e, product_id=product_id)
            raise

        logger.info("Product deleted", extra={"product_id": product_id})

    @tracer.capture_method
    def scan(self) -> ProductList:
        """
        Return every product in the table, following LastEvaluatedKey across pages.

        Returns:
            All products received plus their count
        """
        items = []
        scan_kwargs: Dict[str, Any] = {}
        pages = 0

        while True:
            try:
                response = self.table.scan(**scan_kwargs)
            except (ClientError, BotoCoreError) as e:
                self._log_failure('Scan', e, pages=pages)
                raise

            pages += 1
            items.extend(self._item_to_product(item) for item in response.get('Items', []))

            if 'LastEvaluatedKey' not in response:
                break
            scan_kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']

        logger.debug("Scan completed", extra={"table_name": self.table_name, "pages": pages, "count": len(items)})
        tracer.put_annotation('products_listed', len(items))
        return ProductList(items=items, count=len(items))

    def _log_failure(self, operation: str, error: Exception, **extra: Any) -> None:
        error_code = error.response['Error']['Code'] if isinstance(error, ClientError) else type(error).__name__
        logger.error(f"DynamoDB {operation} failed", extra={
            "error_code": error_code,
            "error": str(error),
            "table_name": self.table_name,
            **extra,
        })

    @staticmethod
    def _product_to_item(product: Product) -> Dict[str, Any]:
        item = product.to_response()
        # boto3 rejects float; str() keeps the shortest decimal form
        item['price'] = Decimal(str(product.price))
        return item

    @staticmethod
    def _item_to_product(item: Dict[str, Any]) -> Product:
        return Product.model_validate(item)
