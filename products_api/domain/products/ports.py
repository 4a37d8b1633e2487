"""
Port interfaces (ABCs) for the products bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from products_api.domain.products.entities import NewProduct, Product


class ProductRepository(ABC):
    """Port for persisting and retrieving products.

    Identifiers are opaque strings assigned by the adapter. Adapters raise
    InvalidProductIdError for identifiers they cannot parse, and return
    None/False (never raise) for well-formed identifiers with no match.
    """

    @abstractmethod
    def create(self, draft: NewProduct) -> Product:
        """Persist a new product and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every stored product, oldest first."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Return a product by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def update_by_id(
        self, product_id: str, changes: dict[str, Any]
    ) -> Optional[Product]:
        """Merge changes into a stored product.

        Args:
            product_id: Id of the product to update.
            changes: Validated field values to set.

        Returns:
            The product after the update, or None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, product_id: str) -> bool:
        """Delete a product. Returns False if nothing matched."""
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every product and return how many were removed."""
        raise NotImplementedError
