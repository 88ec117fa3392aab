"""Dependency injection for FastAPI routes.
Routes depend on the store, the store depends on the repository abstraction."""
from functools import lru_cache

from city_prices.application.services.city_store import CityStore
from city_prices.config import settings
from city_prices.domain.repositories.document_repository import DocumentRepository
from city_prices.infrastructure.persistence.repositories.in_memory_document_repository import (
    InMemoryDocumentRepository,
)
from city_prices.infrastructure.persistence.repositories.json_file_document_repository import (
    JsonFileDocumentRepository,
)


@lru_cache()
def get_document_repository() -> DocumentRepository:
    """Get document repository instance.

    - Default: JSON file at CITIES_DATA_FILE
    - If CITIES_STORAGE_BACKEND=memory: in-memory document (lost on restart)
    """
    if settings.CITIES_STORAGE_BACKEND.lower() == "memory":
        return InMemoryDocumentRepository()
    return JsonFileDocumentRepository(
        data_file_path=settings.CITIES_DATA_FILE,
        backup_dir_path=settings.CITIES_BACKUP_DIR,
        max_backups=settings.CITIES_MAX_BACKUPS,
    )


@lru_cache()
def get_city_store() -> CityStore:
    """Get the shared city store. One instance per process so its lock is shared."""
    return CityStore(get_document_repository())
