#!/usr/bin/env python3
"""Check the cities document for duplicate ids and stale slugs."""
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from city_prices.constants import DOCUMENT_COLLECTION_KEY, FIELD_CITY_NAME, FIELD_ID
from city_prices.core.dependencies import get_document_repository
from city_prices.domain.identity import slugify
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def find_problems(cities: List[Dict[str, Any]]) -> List[str]:
    """Return a description of every integrity problem found in ``cities``."""
    problems = []

    counts = Counter(city.get(FIELD_ID) for city in cities)
    for city_id, count in counts.items():
        if count > 1:
            problems.append(f"id '{city_id}' is used by {count} records")

    for position, city in enumerate(cities):
        city_id = city.get(FIELD_ID)
        if not city_id:
            problems.append(f"record #{position} has no id")
            continue
        name_slug = slugify(city.get(FIELD_CITY_NAME))
        if name_slug != city_id:
            problems.append(f"record '{city_id}' has name slug '{name_slug}'")

    return problems


def main() -> int:
    """Load the configured document and report problems."""
    repository = get_document_repository()
    cities = repository.load()[DOCUMENT_COLLECTION_KEY]

    logger.info(f"Checking {len(cities)} cities in {repository.describe()}...")

    problems = find_problems(cities)
    for problem in problems:
        logger.warning(f"✗ {problem}")

    logger.info(f"{'='*80}")
    logger.info(f"Found {len(problems)} problem(s)")
    logger.info(f"{'='*80}")
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
