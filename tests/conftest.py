"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- In-memory and JSON file document repositories
- A city store wired to an in-memory repository
- FastAPI test client with overridden dependencies
- Test data factories
"""

import copy
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from city_prices.application.services.city_store import CityStore
from city_prices.core.dependencies import get_city_store, get_document_repository
from city_prices.infrastructure.persistence.repositories.in_memory_document_repository import (
    InMemoryDocumentRepository,
)
from city_prices.infrastructure.persistence.repositories.json_file_document_repository import (
    JsonFileDocumentRepository,
)
from city_prices.main import app


FROZEN_MONTH = "2030-01"


# ==============================================================================
# STORAGE FIXTURES
# ==============================================================================

@pytest.fixture
def memory_repository() -> InMemoryDocumentRepository:
    """Empty in-memory document repository."""
    return InMemoryDocumentRepository()


@pytest.fixture
def json_repository(tmp_path) -> JsonFileDocumentRepository:
    """JSON file repository inside a temporary directory, backups enabled."""
    return JsonFileDocumentRepository(
        data_file_path=str(tmp_path / "data" / "cities.json"),
        backup_dir_path=str(tmp_path / "backups"),
        max_backups=2,
    )


@pytest.fixture
def store(memory_repository) -> CityStore:
    """City store backed by the in-memory repository."""
    return CityStore(memory_repository)


@pytest.fixture
def frozen_month(monkeypatch) -> str:
    """Pin the automatic update stamp to a known year-month."""
    monkeypatch.setattr(
        "city_prices.domain.entities.city.current_year_month",
        lambda now=None: FROZEN_MONTH,
    )
    return FROZEN_MONTH


# ==============================================================================
# API FIXTURES
# ==============================================================================

@pytest.fixture
def client(memory_repository) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client with an in-memory cities document."""
    test_store = CityStore(memory_repository)

    app.dependency_overrides[get_document_repository] = lambda: memory_repository
    app.dependency_overrides[get_city_store] = lambda: test_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

BOGOTA_PAYLOAD = {
    "ciudad": "Bogotá",
    "moneda": "COP",
    "servicios_informales": [
        {
            "categoria": "Transporte",
            "servicio": "Taxi",
            "unidad": "Trayecto",
            "temporada_baja": {"precio_min": 10000, "precio_max": 20000},
            "temporada_alta": {"precio_min": 15000, "precio_max": 25000},
        }
    ],
}


@pytest.fixture
def bogota_payload() -> dict:
    """Valid creation payload for Bogotá."""
    return copy.deepcopy(BOGOTA_PAYLOAD)


@pytest.fixture
def city_payload_factory():
    """Build valid creation payloads for arbitrary city names."""
    def _factory(name: str, **extra) -> dict:
        payload = copy.deepcopy(BOGOTA_PAYLOAD)
        payload["ciudad"] = name
        payload.update(extra)
        return payload

    return _factory


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
