"""
Use case: Create a product.

Input: CreateProductCommand (name, price, description)
Output: ProductResult
Side effects: Inserts one document.
Failure cases: ProductValidationError.
"""

import logging

from products_api.application.products.dtos import CreateProductCommand, ProductResult
from products_api.domain.products.entities import NewProduct, validate_fields
from products_api.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Validates a new product and hands it to storage."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, command: CreateProductCommand) -> ProductResult:
        """Run the create use case.

        Args:
            command: The product fields sent by the client.

        Returns:
            The stored product, including its assigned id.

        Raises:
            ProductValidationError: If name or price is missing or invalid.
        """
        fields = validate_fields(
            {
                "name": command.name,
                "price": command.price,
                "description": command.description,
            }
        )
        product = self._repository.create(NewProduct(**fields))
        logger.info("Created product id=%s", product.id)
        return ProductResult.from_entity(product)
