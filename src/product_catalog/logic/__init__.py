"""
Business Logic Layer Module.

Validation of product payloads and the create/read/update/delete/list
pipelines that sit between the handlers and the store gateway.
"""
