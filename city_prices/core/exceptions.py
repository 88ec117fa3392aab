"""Error kinds raised by the city store.

Each error carries the HTTP status the API layer answers with. The store
raises exactly one of these per failing call and never retries.
"""
from city_prices.constants import MSG_CITY_NOT_FOUND, MSG_INTERNAL_ERROR


class CityStoreError(Exception):
    """Base class for store failures."""

    status_code: int = 500

    def __init__(self, message: str = MSG_INTERNAL_ERROR):
        super().__init__(message)
        self.message = message


class ValidationError(CityStoreError):
    """Malformed or missing required fields. Caller's fault, do not retry."""

    status_code = 400


class ConflictError(CityStoreError):
    """Another record already owns the derived id."""

    status_code = 409


class NotFoundError(CityStoreError):
    """No record matches the lookup token."""

    status_code = 404

    def __init__(self, message: str = MSG_CITY_NOT_FOUND):
        super().__init__(message)


class StorageError(CityStoreError):
    """The persisted document could not be read or written."""

    status_code = 500
