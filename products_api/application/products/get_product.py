"""
Use case: Read a single product.

Input: product id
Output: ProductResult
Side effects: None.
Failure cases: InvalidProductIdError, ProductNotFoundError.
"""

import logging

from products_api.application.products.dtos import ProductResult
from products_api.domain.products.errors import ProductNotFoundError
from products_api.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class GetProductUseCase:
    """Looks a product up by id."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, product_id: str) -> ProductResult:
        """Run the read use case.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = self._repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductResult.from_entity(product)
