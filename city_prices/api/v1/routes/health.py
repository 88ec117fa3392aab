"""Health check endpoints."""
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status

from city_prices.api.v1.schemas.city_schemas import HealthSchema
from city_prices.core.dependencies import get_document_repository
from city_prices.domain.repositories.document_repository import DocumentRepository
from city_prices.services.health_service import HealthCheckService, HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthSchema, summary="Verifica la disponibilidad de la API")
def simple_health_check() -> Dict[str, Any]:
    """
    Simple health check - no dependency checks.

    Returns HTTP 200 OK if the application is running.
    """
    return {"status": "ok", "timestamp": datetime.now(timezone.utc)}


@router.get("/health/detailed")
def detailed_health_check(
    response: Response,
    repository: DocumentRepository = Depends(get_document_repository),
) -> Dict[str, Any]:
    """
    Detailed health check including the cities document.

    Returns HTTP 200 if the document is readable, HTTP 503 otherwise.
    """
    health_data = HealthCheckService(repository).get_overall_health()

    if health_data["status"] == HealthStatus.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        response.status_code = status.HTTP_200_OK

    return health_data
