"""
Domain entities for the products bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from products_api.domain.products.errors import ProductValidationError

MUTABLE_FIELDS = ("name", "description", "price")
REQUIRED_FIELDS = ("name", "price")


@dataclass(frozen=True)
class NewProduct:
    """A product that has not been persisted yet (no id assigned)."""

    name: str
    price: float
    description: Optional[str] = None


@dataclass(frozen=True)
class Product:
    """A stored product record.

    The id is assigned by storage on creation and never changes.
    """

    id: str
    name: str
    price: float
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def validate_fields(fields: dict[str, Any], partial: bool = False) -> dict[str, Any]:
    """Check product fields against the entity invariants.

    Args:
        fields: Field values keyed by name. Unknown keys are dropped.
        partial: When True, required fields may be absent (update),
            but a present required field must still be valid.

    Returns:
        The subset of recognised fields, with ``name`` stripped.

    Raises:
        ProductValidationError: If a required field is missing or invalid.
    """
    cleaned = {key: value for key, value in fields.items() if key in MUTABLE_FIELDS}

    if not partial:
        for key in REQUIRED_FIELDS:
            if cleaned.get(key) is None:
                raise ProductValidationError(key, "is required")

    if "name" in cleaned:
        name = cleaned["name"]
        if not isinstance(name, str) or not name.strip():
            raise ProductValidationError("name", "must be a non-empty string")
        cleaned["name"] = name.strip()

    if "price" in cleaned:
        price = cleaned["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ProductValidationError("price", "must be a number")
        if not math.isfinite(price):
            raise ProductValidationError("price", "must be a finite number")
        if price < 0:
            raise ProductValidationError("price", "must be greater than or equal to 0")

    if cleaned.get("description") is not None and not isinstance(
        cleaned["description"], str
    ):
        raise ProductValidationError("description", "must be a string")

    return cleaned
