"""Identity resolution for city records.

A record is addressed by its canonical slug. Lookup tokens may be either the
stored id or the display name; both are normalized with ``slugify`` before
comparison, so "Cartagena", "cartagena" and "Cartagéna " reach the same record.
"""
import re
import unicodedata
from typing import Any, Dict, Iterable, List, Optional

from city_prices.constants import FIELD_CITY_NAME, FIELD_ID, SLUG_SEPARATOR

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_ALPHANUMERIC_RUN = re.compile(r"[^a-z0-9]+")


def slugify(value: Optional[str]) -> str:
    """Derive a URL-safe, lower-case identifier from free text.

    Args:
        value: Display name or lookup token. ``None`` and blank strings
            produce an empty slug.

    Returns:
        The canonical slug, e.g. ``"Bogotá D.C."`` -> ``"bogota-d-c"``.
    """
    if not value:
        return ""

    text = unicodedata.normalize("NFD", str(value))
    text = _COMBINING_MARKS.sub("", text)
    text = text.lower().strip()
    text = _NON_ALPHANUMERIC_RUN.sub(SLUG_SEPARATOR, text)
    return text.strip(SLUG_SEPARATOR)


def matches(record: Dict[str, Any], token_slug: str) -> bool:
    """Check whether a normalized token addresses ``record``.

    The display-name slug is computed on demand instead of being stored, so
    a record stays reachable by its current name even if its id diverged.
    """
    if not token_slug:
        return False
    if record.get(FIELD_ID) == token_slug:
        return True
    return slugify(record.get(FIELD_CITY_NAME)) == token_slug


def resolve_index(token: Optional[str], collection: List[Dict[str, Any]]) -> Optional[int]:
    """Return the position of the first record addressed by ``token``."""
    token_slug = slugify(token)
    for index, record in enumerate(collection):
        if matches(record, token_slug):
            return index
    return None


def resolve(token: Optional[str], collection: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return the first record addressed by ``token``, or ``None``."""
    index = resolve_index(token, collection)
    if index is None:
        return None
    return collection[index]


def id_taken(city_id: str, collection: Iterable[Dict[str, Any]]) -> bool:
    """Check whether any record in ``collection`` already owns ``city_id``."""
    return any(record.get(FIELD_ID) == city_id for record in collection)
