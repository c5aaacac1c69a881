"""
Unit tests for the error classifier and response helpers.
"""

import json

import pytest

from product_catalog.handlers.utils.responses import JSON_HEADERS, classify_error, create_api_response, respond
from product_catalog.models.errors import DomainError, MalformedPayload, ValidationError
from product_catalog.models.product import Product
from product_catalog.models.result import Err, Ok


class TestClassifyError:
    """Test cases for classify_error."""

    def test_validation_error_is_400_with_all_messages(self):
        error = ValidationError(errors=["name is a required field", "price must be a number"])

        response = classify_error(error)

        assert response["statusCode"] == 400
        assert response["headers"] == JSON_HEADERS
        assert json.loads(response["body"]) == {
            "errors": ["name is a required field", "price must be a number"],
        }

    def test_malformed_payload_is_400(self):
        response = classify_error(MalformedPayload(detail="Expecting value: line 1 column 1 (char 0)"))

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {
            "error": "Invalid request body format: Expecting value: line 1 column 1 (char 0)",
        }

    def test_not_found_domain_error(self):
        response = classify_error(DomainError.not_found())

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {"error": "not found"}

    def test_domain_error_keeps_its_own_status_and_body(self):
        response = classify_error(DomainError(status_code=409, body={"error": "conflict", "id": "p-1"}))

        assert response["statusCode"] == 409
        assert json.loads(response["body"]) == {"error": "conflict", "id": "p-1"}

    def test_unrecognized_error_is_not_classified(self):
        with pytest.raises(TypeError):
            classify_error(RuntimeError("boom"))

    def test_custom_headers(self):
        response = classify_error(DomainError.not_found(), headers={"content-type": "application/json", "x-a": "b"})

        assert response["headers"] == {"content-type": "application/json", "x-a": "b"}


class TestRespond:
    """Test cases for respond and create_api_response."""

    def test_success_uses_given_status(self):
        product = Product(product_id="p-1", name="Pen", description="Blue pen", price=1.5, available=True)

        response = respond(Ok(product), 201)

        assert response["statusCode"] == 201
        assert json.loads(response["body"])["productID"] == "p-1"

    def test_failure_is_classified(self):
        response = respond(Err(DomainError.not_found()), 200)

        assert response["statusCode"] == 404

    def test_create_api_response_encodes_json(self):
        response = create_api_response(200, {"items": [], "count": 0})

        assert response == {
            "statusCode": 200,
            "headers": {"content-type": "application/json"},
            "body": '{"items": [], "count": 0}',
        }
