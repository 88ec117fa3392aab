"""City store - CRUD operations over the persisted cities document.

Every operation re-reads the document from the repository; every mutation
writes the whole document back before returning. No copy of the collection
survives between calls.
"""
import logging
import threading
from typing import Any, Dict, List, Optional

from city_prices.constants import (
    DOCUMENT_COLLECTION_KEY,
    FIELD_CITY_NAME,
    FIELD_ID,
    FIELD_LAST_UPDATE,
    MSG_CITY_EXISTS,
    MSG_CITY_NAME_TAKEN,
)
from city_prices.core.exceptions import ConflictError
from city_prices.domain.entities.city import update_stamp, validate_city_changes, validate_new_city
from city_prices.domain.identity import id_taken, matches, resolve, resolve_index, slugify
from city_prices.domain.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class CityStore:
    """Record store for city pricing data.

    Mutations are serialized with a lock so two requests served by the same
    process cannot interleave their read-modify-write cycles. Writers in other
    processes are not coordinated; the last write wins.
    """

    def __init__(self, repository: DocumentRepository):
        self._repository = repository
        self._lock = threading.RLock()

    def _load_cities(self) -> Dict[str, Any]:
        return self._repository.load()

    def list_cities(self) -> List[Dict[str, Any]]:
        """Return every city in insertion order."""
        return self._load_cities()[DOCUMENT_COLLECTION_KEY]

    def get_city(self, token: str) -> Optional[Dict[str, Any]]:
        """Return the city addressed by id or display name, or None."""
        return resolve(token, self.list_cities())

    def create_city(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a city from ``payload``.

        Args:
            payload: City fields. ``ciudad``, ``moneda`` and a
                ``servicios_informales`` list are required.

        Returns:
            The stored record, including its derived ``id`` and update stamp.

        Raises:
            ValidationError: If a required field is missing or malformed.
            ConflictError: If a city with the same id already exists.
            StorageError: If the document cannot be read or written.
        """
        validate_new_city(payload)

        with self._lock:
            document = self._load_cities()
            cities = document[DOCUMENT_COLLECTION_KEY]
            city_id = slugify(payload[FIELD_CITY_NAME])

            if id_taken(city_id, cities):
                logger.info(f"Rejected duplicate city '{city_id}'")
                raise ConflictError(MSG_CITY_EXISTS)

            stamp = update_stamp(payload)
            city = {FIELD_ID: city_id, FIELD_LAST_UPDATE: stamp, **payload}
            city[FIELD_ID] = city_id
            city[FIELD_LAST_UPDATE] = stamp

            cities.append(city)
            self._repository.save(document)

        logger.info(f"Created city '{city_id}'")
        return city

    def update_city(self, token: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Merge ``payload`` into the city addressed by ``token``.

        The merge is shallow: each top-level key in ``payload`` replaces the
        stored value wholesale, so a partial ``temporadas`` object drops the
        season it does not mention. Changing ``ciudad`` moves the record to
        the new slug. The update stamp is refreshed on every call, even when
        nothing else changes.

        Returns:
            The merged record, or None if no city matches ``token``.

        Raises:
            ValidationError: If the payload is malformed.
            ConflictError: If the new name collides with another city.
            StorageError: If the document cannot be read or written.
        """
        with self._lock:
            document = self._load_cities()
            cities = document[DOCUMENT_COLLECTION_KEY]
            index = resolve_index(token, cities)

            if index is None:
                return None

            validate_city_changes(payload)

            current = cities[index]
            changes = {key: value for key, value in payload.items() if key != FIELD_ID}
            merged = {**current, **changes}

            new_id = slugify(changes.get(FIELD_CITY_NAME))
            if new_id and new_id != current.get(FIELD_ID):
                others = cities[:index] + cities[index + 1:]
                if id_taken(new_id, others):
                    logger.info(f"Rejected rename of '{current.get(FIELD_ID)}' to '{new_id}'")
                    raise ConflictError(MSG_CITY_NAME_TAKEN)
                logger.info(f"Renamed city '{current.get(FIELD_ID)}' to '{new_id}'")
                merged[FIELD_ID] = new_id

            merged[FIELD_LAST_UPDATE] = update_stamp(payload)

            cities[index] = merged
            self._repository.save(document)

        logger.info(f"Updated city '{merged[FIELD_ID]}'")
        return merged

    def delete_city(self, token: str) -> bool:
        """Remove every city addressed by ``token``.

        Returns:
            True if at least one city was removed, False if nothing matched.
            Nothing is written when nothing matched.
        """
        with self._lock:
            document = self._load_cities()
            cities = document[DOCUMENT_COLLECTION_KEY]
            token_slug = slugify(token)
            remaining = [city for city in cities if not matches(city, token_slug)]

            if len(remaining) == len(cities):
                return False

            document[DOCUMENT_COLLECTION_KEY] = remaining
            self._repository.save(document)

        logger.info(f"Deleted {len(cities) - len(remaining)} city record(s) matching '{token_slug}'")
        return True
