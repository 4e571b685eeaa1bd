"""Shared test fixtures and configuration."""
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from food_details.main import app
from food_details.core.dependencies import get_backend
from food_details.services.backend.http_client import HttpBackendClient
from food_details.services.backend.in_memory import InMemoryBackend
from food_details.services.ordering.draft import OrderDraft
from food_details.services.ordering.models import Food


@pytest.fixture
def test_seed_path():
    """Return path to test backend YAML file."""
    return Path(__file__).parent / "fixtures" / "test_db.yaml"


@pytest.fixture
def backend(test_seed_path):
    """Create in-memory backend with test data."""
    return InMemoryBackend(seed_file=str(test_seed_path))


@pytest.fixture
def burger():
    """Food with a single extra, as in the cheese burger scenario."""
    return Food.model_validate(
        {
            "id": 1,
            "name": "Cheeseburger",
            "description": "Classic burger",
            "price": "10.00",
            "category": 1,
            "image_url": "https://example.com/burger.png",
            "extras": [{"id": 1, "name": "Cheese", "value": "2.00"}],
        }
    )


@pytest.fixture
def burger_draft(burger):
    """Fresh draft for the burger."""
    return OrderDraft(burger)


@pytest.fixture
def override_get_backend(backend):
    """Point the fake API at the test backend."""
    app.dependency_overrides[get_backend] = lambda: backend
    yield backend
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(override_get_backend):
    """Create FastAPI test client over the test backend."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
async def http_backend(override_get_backend):
    """HttpBackendClient talking to the fake API in-process."""
    client = httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    )
    http_backend = HttpBackendClient(base_url="http://testserver", client=client)
    yield http_backend
    await http_backend.close()
