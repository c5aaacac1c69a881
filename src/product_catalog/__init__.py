"""
Product Catalog Service.

A CRUD API for a product catalog, deployed as independent AWS Lambda handlers
behind API Gateway and backed by a single DynamoDB table:

- handlers: Lambda entry points and request/response helpers
- logic: payload validation and the request pipelines
- dal: DynamoDB store gateway
- models: product record, error values and result types
"""

__version__ = "1.0.0"
