"""
Wits Campus Map - Test Configuration and Fixtures
"""
import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault('ENVIRONMENT', 'testing')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

from app.main import app
from app.api.deps import get_campus_map
from app.data.campus import BUILTIN_CAMPUS
from app.models.campus_models import CampusMap, Pathway, Venue


@pytest.fixture
def campus() -> CampusMap:
    """The built-in Wits campus registry"""
    return BUILTIN_CAMPUS


@pytest.fixture
def horizontal_pathway() -> Pathway:
    return Pathway(name="Horizontal", coordinates=[(0.0, 0.0), (10.0, 0.0)])


@pytest.fixture
def vertical_pathway() -> Pathway:
    """Crosses the horizontal pathway at (5, 0)"""
    return Pathway(name="Vertical", coordinates=[(5.0, -5.0), (5.0, 5.0)])


@pytest.fixture
def far_pathway() -> Pathway:
    """Never crosses the horizontal pathway"""
    return Pathway(name="Far", coordinates=[(20.0, 5.0), (20.0, 6.0)])


@pytest.fixture
def venue_a() -> Venue:
    return Venue(id="a", name="Venue A", coordinates=(28.0300, -26.1920))


@pytest.fixture
def venue_b() -> Venue:
    return Venue(id="b", name="Venue B", coordinates=(28.0310, -26.1920))


@pytest.fixture
def client():
    """HTTP client against the app with the built-in campus data"""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def client_for():
    """Factory: HTTP client backed by a custom campus registry"""
    clients = []

    def _make(campus_map: CampusMap) -> TestClient:
        app.dependency_overrides[get_campus_map] = lambda: campus_map
        test_client = TestClient(app)
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        test_client.close()
    app.dependency_overrides.clear()
