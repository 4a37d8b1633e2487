"""
Data Transfer Objects for the products application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from products_api.domain.products.entities import Product


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for creating a product.

    Attributes:
        name: Product name. Required by the entity invariants.
        price: Product price. Required, non-negative.
        description: Optional free text.
    """

    name: Optional[str]
    price: Optional[float]
    description: Optional[str] = None


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input DTO for a partial or full product update.

    Attributes:
        product_id: Id of the product to update.
        changes: Only the fields the client sent.
    """

    product_id: str
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProductResult:
    """Output DTO for a single product."""

    id: str
    name: str
    price: float
    description: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResult":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
