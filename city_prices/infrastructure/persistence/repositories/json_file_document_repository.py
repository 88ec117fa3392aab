"""JSON file implementation of DocumentRepository with backup support."""
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from city_prices.constants import BACKUP_TIMESTAMP_FORMAT, DOCUMENT_COLLECTION_KEY
from city_prices.core.exceptions import StorageError
from city_prices.domain.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class JsonFileDocumentRepository(DocumentRepository):
    """Persists the cities document to a single JSON file.

    This repository handles:
    - Loading the document, treating a missing file as an empty catalog
    - Replacing the file atomically (temp file + rename)
    - Creating timestamped backups of the previous document
    - Pruning old backups beyond ``max_backups``
    """

    def __init__(
        self,
        data_file_path: str,
        backup_dir_path: Optional[str] = None,
        max_backups: int = 20,
    ):
        """Initialize the repository.

        Args:
            data_file_path: Path to the cities JSON document.
            backup_dir_path: Directory for backups. If None, no backups are made.
            max_backups: Number of most recent backups to keep.
        """
        self.data_file_path = str(data_file_path)
        self.backup_dir_path = str(backup_dir_path) if backup_dir_path else None
        self.max_backups = max_backups

    def describe(self) -> str:
        return self.data_file_path

    def load(self) -> Dict[str, Any]:
        """Load the cities document from disk.

        Returns:
            The parsed document. Returns an empty catalog if the file doesn't exist.

        Raises:
            StorageError: If the file cannot be read, is corrupted, or has no
                ``cities`` list of objects.
        """
        data_path = Path(self.data_file_path)

        if not data_path.exists():
            logger.warning(f"Cities document not found at {data_path}, starting empty")
            return {DOCUMENT_COLLECTION_KEY: []}

        try:
            with open(data_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Cities JSON file is corrupted: {e}") from e
        except UnicodeDecodeError as e:
            raise StorageError(f"Cities JSON file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read cities file: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get(DOCUMENT_COLLECTION_KEY), list):
            raise StorageError(f"Cities document has no '{DOCUMENT_COLLECTION_KEY}' list")

        for position, city in enumerate(document[DOCUMENT_COLLECTION_KEY]):
            if not isinstance(city, dict):
                raise StorageError(f"Cities document entry #{position} is not an object")

        return document

    def save(self, document: Dict[str, Any]) -> None:
        """Replace the cities document on disk.

        Creates a backup of the existing file (when enabled) before writing.
        The new content is written to a temporary file in the same directory
        and renamed over the target, so readers see either the old or the new
        document.

        Raises:
            StorageError: If the document cannot be serialized or written.
        """
        data_path = Path(self.data_file_path)

        try:
            content = json.dumps(document, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cities document is not serializable: {e}") from e

        try:
            data_path.parent.mkdir(parents=True, exist_ok=True)

            if self.backup_dir_path and data_path.exists():
                self.create_backup()

            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{data_path.name}.", suffix=".tmp", dir=str(data_path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, data_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write cities file: {e}") from e

        logger.debug(f"Saved {len(document.get(DOCUMENT_COLLECTION_KEY, []))} cities to {data_path}")

    def create_backup(self) -> str:
        """Create a timestamped backup of the current document.

        Returns:
            Path to the created backup file

        Raises:
            OSError: If the backup cannot be written
        """
        data_path = Path(self.data_file_path)
        backup_dir = Path(self.backup_dir_path)
        backup_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now(timezone.utc).strftime(BACKUP_TIMESTAMP_FORMAT)
        backup_path = backup_dir / f"{data_path.stem}_{timestamp}{data_path.suffix}"

        backup_path.write_bytes(data_path.read_bytes())
        self._prune_backups()

        return str(backup_path)

    def list_backups(self) -> List[Path]:
        """Return existing backups, oldest first."""
        if not self.backup_dir_path or not Path(self.backup_dir_path).exists():
            return []
        stem = Path(self.data_file_path).stem
        return sorted(Path(self.backup_dir_path).glob(f"{stem}_*"))

    def _prune_backups(self) -> None:
        backups = self.list_backups()
        excess = len(backups) - self.max_backups
        for old in backups[:max(excess, 0)]:
            old.unlink()
            logger.debug(f"Removed old backup {old}")
