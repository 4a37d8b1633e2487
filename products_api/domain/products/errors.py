"""
Domain-specific errors for the products bounded context.

All errors raised from the domain layer must be defined here.
Each error carries a kind, an optional HTTP status and a message;
they are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classification of a failure for the error translation chain."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNCLASSIFIED = "unclassified"


class ProductsDomainError(Exception):
    """Base error for all products domain errors."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED
    status: Optional[int] = None

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ProductValidationError(ProductsDomainError):
    """Raised when a product payload breaks an entity invariant."""

    kind = ErrorKind.VALIDATION
    status = 400

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class InvalidProductIdError(ProductValidationError):
    """Raised when an identifier is not a well-formed product id."""

    def __init__(self, product_id: str) -> None:
        super().__init__("id", f"'{product_id}' is not a valid product id")
        self.product_id = product_id


class ProductNotFoundError(ProductsDomainError):
    """Raised when a well-formed product id matches no stored product."""

    kind = ErrorKind.NOT_FOUND
    status = 404

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with id {product_id} not found!")
        self.product_id = product_id


class StorageUnavailableError(ProductsDomainError):
    """Raised when the document store cannot be reached."""

    status = 503

    def __init__(self, reason: str) -> None:
        super().__init__(f"Storage unavailable: {reason}")
        self.reason = reason
