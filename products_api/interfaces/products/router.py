"""
FastAPI router for the products bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by the centralized error handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from products_api.application.products.create_product import CreateProductUseCase
from products_api.application.products.delete_product import DeleteProductUseCase
from products_api.application.products.dtos import (
    CreateProductCommand,
    ProductResult,
    UpdateProductCommand,
)
from products_api.application.products.get_product import GetProductUseCase
from products_api.application.products.list_products import ListProductsUseCase
from products_api.application.products.update_product import UpdateProductUseCase
from products_api.interfaces.products.dependencies import (
    get_create_product_use_case,
    get_delete_product_use_case,
    get_list_products_use_case,
    get_product_use_case,
    get_update_product_use_case,
)
from products_api.interfaces.products.schemas import (
    ErrorResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)

router = APIRouter(prefix="/products", tags=["products"])

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


def _to_response(result: ProductResult) -> ProductResponse:
    return ProductResponse(
        id=result.id,
        name=result.name,
        description=result.description,
        price=result.price,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductResponse,
    responses=BAD_REQUEST,
    summary="Create a product",
)
def create_product(
    request: ProductCreateRequest,
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
) -> ProductResponse:
    """Create a product and return it with its assigned id."""
    command = CreateProductCommand(
        name=request.name,
        price=request.price,
        description=request.description,
    )
    return _to_response(use_case.execute(command))


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
)
def list_products(
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> list[ProductResponse]:
    """Return every product."""
    return [_to_response(r) for r in use_case.execute()]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a product",
)
def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(get_product_use_case),
) -> ProductResponse:
    """Return a single product by id."""
    return _to_response(use_case.execute(product_id))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a product",
    description="Partial or full update; only the fields sent are changed.",
)
def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
) -> ProductResponse:
    """Update a product in place and return the stored result."""
    command = UpdateProductCommand(
        product_id=product_id,
        changes=request.model_dump(exclude_unset=True),
    )
    return _to_response(use_case.execute(command))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a product",
)
def delete_product(
    product_id: str,
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
) -> Response:
    """Delete a product. Answers 204 with an empty body."""
    use_case.execute(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
