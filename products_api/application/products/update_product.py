"""
Use case: Update a product in place.

Input: UpdateProductCommand (product_id, changes)
Output: ProductResult
Side effects: Modifies one document.
Failure cases: ProductValidationError, InvalidProductIdError, ProductNotFoundError.
"""

import logging

from products_api.application.products.dtos import ProductResult, UpdateProductCommand
from products_api.domain.products.entities import validate_fields
from products_api.domain.products.errors import ProductNotFoundError
from products_api.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Applies a partial or full update to an existing product.

    Only the fields present in the command change. A required field that
    is present must still satisfy the entity invariants.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, command: UpdateProductCommand) -> ProductResult:
        """Run the update use case.

        Args:
            command: Target id and the fields to change.

        Returns:
            The product as stored after the update.

        Raises:
            ProductValidationError: If a changed field is invalid.
            ProductNotFoundError: If no product has this id.
        """
        changes = validate_fields(command.changes, partial=True)
        product = self._repository.update_by_id(command.product_id, changes)
        if product is None:
            raise ProductNotFoundError(command.product_id)

        logger.info(
            "Updated product id=%s fields=%s",
            product.id,
            ",".join(sorted(changes)) or "-",
        )
        return ProductResult.from_entity(product)
