"""Repository interfaces."""
from city_prices.domain.repositories.document_repository import DocumentRepository

__all__ = [
    "DocumentRepository",
]
