"""
Lambda handlers for the product catalog API.

Each module is deployed as its own function behind API Gateway:

- create_product: POST /products
- get_product: GET /products/{id}
- update_product: PUT /products/{id}
- delete_product: DELETE /products/{id}
- list_products: GET /products

Every entry point follows the same pipeline: parse the event, run one
``ProductService`` operation against the store gateway, and map the result or
error value to an API Gateway response.
"""
