# storefront/validation.py
"""Field rules for incoming product records.

Pydantic does the checking; this module turns its errors into the short,
per-field messages returned to API callers.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from .errors import ProductValidationError
from .schemas import FieldError, ProductCreate

REQUIRED_MESSAGES: Dict[str, str] = {
    "name": "Please add a product name",
    "price": "Please add a price",
}

MESSAGES: Dict[Tuple[str, str], str] = {
    ("price", "greater_than_equal"): "Price must be greater than or equal to 0",
    ("price", "float_parsing"): "Price must be a number",
    ("price", "float_type"): "Price must be a number",
    ("price", "finite_number"): "Price must be a finite number",
}


def _field_error(error: Dict[str, Any]) -> FieldError:
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "body"
    kind = error.get("type", "")

    if field in REQUIRED_MESSAGES and (kind == "missing" or error.get("input") is None):
        return FieldError(field=field, message=REQUIRED_MESSAGES[field])
    if field == "category" and kind == "enum":
        return FieldError(field=field, message=f"'{error.get('input')}' is not a valid category")
    return FieldError(field=field, message=MESSAGES.get((field, kind), error["msg"]))


def validate_product(candidate: Any) -> ProductCreate:
    """
    Check a raw product payload against the product rules.

    Returns:
        ProductCreate: The accepted record, name trimmed, unknown keys dropped.

    Raises:
        ProductValidationError: With one FieldError per broken rule.
    """
    if not isinstance(candidate, Mapping):
        raise ProductValidationError(
            [FieldError(field="body", message="Product must be a JSON object")]
        )

    try:
        return ProductCreate.model_validate(dict(candidate))
    except ValidationError as exc:
        errors: List[FieldError] = []
        seen = set()
        for err in exc.errors():
            field_error = _field_error(err)
            # one message per field is enough for the caller
            if field_error.field in seen:
                continue
            seen.add(field_error.field)
            errors.append(field_error)
        raise ProductValidationError(errors) from exc
