"""Health check service for monitoring system components."""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from city_prices.constants import DOCUMENT_COLLECTION_KEY
from city_prices.core.exceptions import StorageError
from city_prices.domain.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class HealthStatus(str, Enum):
    """Health status values."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class HealthCheckService:
    """Service for checking health of system components."""

    def __init__(self, repository: DocumentRepository):
        self._repository = repository

    def check_storage(self) -> Dict[str, Any]:
        """Check that the cities document can be loaded.

        Returns:
            Dictionary with status and details
        """
        try:
            document = self._repository.load()
        except StorageError as e:
            logger.error(f"Storage health check failed: {e}")
            return {
                "status": HealthStatus.UNHEALTHY,
                "message": str(e),
                "details": {"location": self._repository.describe()},
            }

        return {
            "status": HealthStatus.HEALTHY,
            "message": "Cities document readable",
            "details": {
                "location": self._repository.describe(),
                "cities": len(document[DOCUMENT_COLLECTION_KEY]),
            },
        }

    def get_overall_health(self) -> Dict[str, Any]:
        """Aggregate component checks into one report."""
        components = {"storage": self.check_storage()}
        unhealthy = any(c["status"] == HealthStatus.UNHEALTHY for c in components.values())

        return {
            "status": HealthStatus.UNHEALTHY if unhealthy else HealthStatus.HEALTHY,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "components": components,
        }
