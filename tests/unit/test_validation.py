"""
Unit tests for product payload validation.
"""

from product_catalog.logic.validation import NOT_AN_OBJECT_MESSAGE, validate_product_payload
from product_catalog.models.errors import ValidationError
from product_catalog.models.product import ProductInput
from product_catalog.models.result import Err, Ok


class TestValidateProductPayload:
    """Test cases for validate_product_payload."""

    def test_valid_payload(self, sample_payload):
        result = validate_product_payload(sample_payload)

        assert isinstance(result, Ok)
        assert isinstance(result.value, ProductInput)
        assert result.value.name == "Pen"
        assert result.value.description == "Blue pen"
        assert result.value.price == 1.5
        assert result.value.available is True

    def test_integer_price_is_a_number(self, sample_payload):
        sample_payload["price"] = 3

        result = validate_product_payload(sample_payload)

        assert isinstance(result, Ok)
        assert result.value.price == 3

    def test_unknown_keys_are_dropped(self, sample_payload):
        sample_payload["productID"] = "client-supplied"
        sample_payload["colour"] = "blue"

        result = validate_product_payload(sample_payload)

        assert isinstance(result, Ok)
        assert set(result.value.model_dump()) == {"name", "description", "price", "available"}

    def test_empty_payload_reports_every_field(self):
        result = validate_product_payload({})

        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert sorted(result.error.errors) == sorted([
            "name is a required field",
            "description is a required field",
            "price is a required field",
            "available is a required field",
        ])

    def test_one_message_per_missing_field(self, sample_payload):
        del sample_payload["description"]
        del sample_payload["available"]

        result = validate_product_payload(sample_payload)

        assert isinstance(result, Err)
        assert len(result.error.errors) == 2
        assert "description is a required field" in result.error.errors
        assert "available is a required field" in result.error.errors

    def test_wrong_types_are_not_coerced(self):
        payload = {
            "name": 42,
            "description": "Blue pen",
            "price": "1.5",
            "available": "yes",
        }

        result = validate_product_payload(payload)

        assert isinstance(result, Err)
        assert sorted(result.error.errors) == sorted([
            "name must be a string",
            "price must be a number",
            "available must be a boolean",
        ])

    def test_empty_strings_rejected(self, sample_payload):
        sample_payload["name"] = ""

        result = validate_product_payload(sample_payload)

        assert isinstance(result, Err)
        assert result.error.errors == ["name must not be empty"]

    def test_non_finite_price_rejected(self, sample_payload):
        sample_payload["price"] = float("nan")

        result = validate_product_payload(sample_payload)

        assert isinstance(result, Err)
        assert len(result.error.errors) == 1
        assert result.error.errors[0].startswith("price")

    def test_payload_must_be_an_object(self):
        for payload in ([], "Pen", None, 3):
            result = validate_product_payload(payload)

            assert isinstance(result, Err)
            assert result.error.errors == [NOT_AN_OBJECT_MESSAGE]

    def test_price_above_storable_range_rejected(self, sample_payload):
        sample_payload["price"] = 1e200

        result = validate_product_payload(sample_payload)

        assert isinstance(result, Err)
        assert result.error.errors == ["price is out of range"]

    def test_price_below_storable_magnitude_rejected(self, sample_payload):
        sample_payload["price"] = -1e-200

        result = validate_product_payload(sample_payload)

        assert isinstance(result, Err)
        assert result.error.errors == ["price is out of range"]

    def test_zero_and_boundary_prices_accepted(self, sample_payload):
        for price in (0, 0.0, 9.99e125, -9.99e125, 1e-130):
            sample_payload["price"] = price

            assert isinstance(validate_product_payload(sample_payload), Ok)
