"""City record business rules.

Records travel as plain dictionaries so that every caller-supplied field is
stored verbatim. This module holds the checks and stamps applied to them.

Record shape::

    {
        "id": "cartagena",
        "ciudad": "Cartagena",
        "pais": "Colombia",
        "moneda": "COP",
        "temporadas": {"alta": {...}, "baja": {...}},
        "servicios_informales": [{...}],
        "ultima_actualizacion_aproximada": "2024-12",
        "nota_importante": "...",
    }
"""
from datetime import datetime, timezone
from typing import Any, Optional

from city_prices.constants import (
    FIELD_CITY_NAME,
    FIELD_CURRENCY,
    FIELD_LAST_UPDATE,
    FIELD_SERVICES,
    MSG_CITY_REQUIRED,
    MSG_CITY_WITHOUT_SLUG,
    MSG_CURRENCY_REQUIRED,
    MSG_INVALID_PAYLOAD,
    MSG_SERVICES_NOT_LIST,
    YEAR_MONTH_FORMAT,
)
from city_prices.core.exceptions import ValidationError
from city_prices.domain.identity import slugify


def current_year_month(now: Optional[datetime] = None) -> str:
    """Return the ``YYYY-MM`` stamp for ``now`` (UTC by default)."""
    now = now or datetime.now(timezone.utc)
    return now.strftime(YEAR_MONTH_FORMAT)


def update_stamp(payload: dict) -> str:
    """Caller-supplied update stamp if present, else the current year-month."""
    return payload.get(FIELD_LAST_UPDATE) or current_year_month()


def _is_filled_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def validate_new_city(payload: Any) -> None:
    """Validate a creation payload.

    Checks run in a fixed order and the first failure wins: payload shape,
    ``ciudad``, ``moneda``, ``servicios_informales``, then the derived id.

    Raises:
        ValidationError: If any check fails.
    """
    if not isinstance(payload, dict):
        raise ValidationError(MSG_INVALID_PAYLOAD)

    if not _is_filled_text(payload.get(FIELD_CITY_NAME)):
        raise ValidationError(MSG_CITY_REQUIRED)

    if not _is_filled_text(payload.get(FIELD_CURRENCY)):
        raise ValidationError(MSG_CURRENCY_REQUIRED)

    if not isinstance(payload.get(FIELD_SERVICES), list):
        raise ValidationError(MSG_SERVICES_NOT_LIST)

    if not slugify(payload[FIELD_CITY_NAME]):
        raise ValidationError(MSG_CITY_WITHOUT_SLUG)


def validate_city_changes(payload: Any) -> None:
    """Validate a partial update payload.

    Raises:
        ValidationError: If the payload is not an object or carries a
            non-list ``servicios_informales``.
    """
    if not isinstance(payload, dict):
        raise ValidationError(MSG_INVALID_PAYLOAD)

    if FIELD_SERVICES in payload and not isinstance(payload[FIELD_SERVICES], list):
        raise ValidationError(MSG_SERVICES_NOT_LIST)
