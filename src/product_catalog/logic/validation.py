"""
Schema validation for caller-supplied product payloads.

Validation never stops at the first problem: every field is checked and one
message is reported per missing or mistyped field.
"""

from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from product_catalog.handlers.utils.observability import logger
from product_catalog.models.errors import ValidationError
from product_catalog.models.product import ProductInput
from product_catalog.models.result import Err, Ok, Result

NOT_AN_OBJECT_MESSAGE = 'request body must be a JSON object'

# pydantic error type -> message template
_MESSAGES = {
    'missing': '{field} is a required field',
    'string_type': '{field} must be a string',
    'string_too_short': '{field} must not be empty',
    'float_type': '{field} must be a number',
    'float_parsing': '{field} must be a number',
    'finite_number': '{field} must be a finite number',
    'number_range': '{field} is out of range',
    'bool_type': '{field} must be a boolean',
    'bool_parsing': '{field} must be a boolean',
}


def _field_message(error: Dict[str, Any]) -> str:
    if not error['loc']:
        return NOT_AN_OBJECT_MESSAGE
    field = str(error['loc'][0])
    template = _MESSAGES.get(error['type'])
    if template is None:
        return f"{field}: {error['msg']}"
    return template.format(field=field)


def collect_field_errors(exc: PydanticValidationError) -> List[str]:
    """Translate a pydantic error into one message per offending field."""
    messages: Dict[str, str] = {}
    for error in exc.errors():
        key = str(error['loc'][0]) if error['loc'] else ''
        messages.setdefault(key, _field_message(error))
    return list(messages.values())


def validate_product_payload(payload: Any) -> Result[ProductInput]:
    """
    Validate a decoded request payload against the product shape.

    Args:
        payload: Decoded JSON body, of any type

    Returns:
        ``Ok`` with the validated fields, or ``Err`` wrapping a
        ``ValidationError`` that lists every invalid field
    """
    if not isinstance(payload, dict):
        return Err(ValidationError(errors=[NOT_AN_OBJECT_MESSAGE]))

    try:
        fields = ProductInput.model_validate(payload)
    except PydanticValidationError as e:
        errors = collect_field_errors(e)
        logger.info("Product payload failed validation", extra={"validation_errors": errors})
        return Err(ValidationError(errors=errors))

    return Ok(fields)
