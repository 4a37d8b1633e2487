"""
Health check router.

Provides liveness and database readiness endpoints.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter, Request

from products_api.domain.products.errors import StorageUnavailableError
from products_api.interfaces.products.schemas import ErrorResponse, HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=request.app.state.settings.version)


@router.get(
    "/db",
    response_model=HealthResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Database readiness",
    description="Answers 503 when the document database does not reply to a ping.",
)
def database_health(request: Request) -> HealthResponse:
    """Ping the database through the connection opened at startup."""
    connection = getattr(request.app.state, "mongo", None)
    if connection is None or not connection.ping():
        raise StorageUnavailableError("database did not answer ping")
    return HealthResponse(status="ok")
