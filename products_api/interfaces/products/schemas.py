"""
Pydantic schemas for products API request/response validation.

These schemas enforce the request shape and define the API contract.
Shape errors surface as RequestValidationError and are answered with 400.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_DESCRIPTION = "Product name"
PRICE_DESCRIPTION = "Product price, zero or more"


class ProductCreateRequest(BaseModel):
    """Request schema for creating a product.

    Attributes:
        name: Required, non-empty.
        description: Optional free text.
        price: Required, finite and non-negative.
    """

    name: str = Field(..., min_length=1, description=NAME_DESCRIPTION)
    description: Optional[str] = Field(default=None, description="Free text")
    price: float = Field(..., ge=0, allow_inf_nan=False, description=PRICE_DESCRIPTION)


class ProductUpdateRequest(BaseModel):
    """Request schema for a partial or full update.

    Every field is optional; only the fields sent are changed.
    Required product fields may be omitted but not set to null.
    """

    name: Optional[str] = Field(default=None, min_length=1, description=NAME_DESCRIPTION)
    description: Optional[str] = Field(default=None, description="Free text")
    price: Optional[float] = Field(
        default=None, ge=0, allow_inf_nan=False, description=PRICE_DESCRIPTION
    )

    @field_validator("name", "price", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ProductResponse(BaseModel):
    """A product as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    description: Optional[str] = None
    price: float
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class HealthResponse(BaseModel):
    """Response schema for the health check endpoints."""

    status: str
    version: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response returned by the error handlers."""

    message: str
