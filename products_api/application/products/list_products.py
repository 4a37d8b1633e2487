"""
Use case: List all products.

Input: None
Output: list[ProductResult]
Side effects: None.
"""

import logging

from products_api.application.products.dtos import ProductResult
from products_api.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsUseCase:
    """Returns the whole products collection."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self) -> list[ProductResult]:
        products = self._repository.find_all()
        logger.debug("Listed %d products", len(products))
        return [ProductResult.from_entity(p) for p in products]
