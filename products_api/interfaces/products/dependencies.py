"""
Dependency injection for the products bounded context.

Provides FastAPI dependency functions that wire the repository adapter
into use cases via constructor injection. Tests replace
get_product_repository through app.dependency_overrides.
"""

from fastapi import Depends, Request

from products_api.application.products.create_product import CreateProductUseCase
from products_api.application.products.delete_product import DeleteProductUseCase
from products_api.application.products.get_product import GetProductUseCase
from products_api.application.products.list_products import ListProductsUseCase
from products_api.application.products.update_product import UpdateProductUseCase
from products_api.domain.products.errors import StorageUnavailableError
from products_api.domain.products.ports import ProductRepository


def get_product_repository(request: Request) -> ProductRepository:
    """Return the repository opened by the application lifespan."""
    repository = getattr(request.app.state, "product_repository", None)
    if repository is None:
        raise StorageUnavailableError("database connection is not open")
    return repository


def get_create_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> CreateProductUseCase:
    return CreateProductUseCase(repository=repository)


def get_list_products_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> ListProductsUseCase:
    return ListProductsUseCase(repository=repository)


def get_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> GetProductUseCase:
    return GetProductUseCase(repository=repository)


def get_update_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> UpdateProductUseCase:
    return UpdateProductUseCase(repository=repository)


def get_delete_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> DeleteProductUseCase:
    return DeleteProductUseCase(repository=repository)
