"""
Use case: Delete a product.

Input: product id
Output: None
Side effects: Removes one document.
Failure cases: InvalidProductIdError, ProductNotFoundError.
"""

import logging

from products_api.domain.products.errors import ProductNotFoundError
from products_api.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Hard-deletes a product by id."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, product_id: str) -> None:
        if not self._repository.delete_by_id(product_id):
            raise ProductNotFoundError(product_id)
        logger.info("Deleted product id=%s", product_id)
