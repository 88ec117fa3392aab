"""Document repository interface - abstraction for durable storage."""
from abc import ABC, abstractmethod
from typing import Any, Dict


class DocumentRepository(ABC):
    """Repository interface for the cities document.

    The whole collection is read and written as one unit. ``save`` must
    either replace the stored document completely or raise; a partially
    written document is never observable.
    """

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """Load the complete document."""
        pass

    @abstractmethod
    def save(self, document: Dict[str, Any]) -> None:
        """Replace the stored document with ``document``."""
        pass

    def describe(self) -> str:
        """Human-readable location of the document, used in logs and health checks."""
        return self.__class__.__name__
