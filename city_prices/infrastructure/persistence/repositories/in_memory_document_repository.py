"""In-memory implementation of DocumentRepository for testing.
Can replace any DocumentRepository."""
import copy
import threading
from typing import Any, Dict, Optional

from city_prices.constants import DOCUMENT_COLLECTION_KEY
from city_prices.domain.repositories.document_repository import DocumentRepository


class InMemoryDocumentRepository(DocumentRepository):
    """In-memory implementation for tests and ephemeral deployments.

    Documents are deep-copied on the way in and out, so callers never share
    a reference with the stored copy.
    """

    def __init__(self, document: Optional[Dict[str, Any]] = None):
        self._lock = threading.Lock()
        self._document = copy.deepcopy(document) if document else {DOCUMENT_COLLECTION_KEY: []}
        self.save_count = 0

    def load(self) -> Dict[str, Any]:
        """Return a copy of the stored document."""
        with self._lock:
            return copy.deepcopy(self._document)

    def save(self, document: Dict[str, Any]) -> None:
        """Replace the stored document."""
        snapshot = copy.deepcopy(document)
        with self._lock:
            self._document = snapshot
            self.save_count += 1

    def describe(self) -> str:
        return "memory"
