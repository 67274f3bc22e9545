import pytest
from fastapi.testclient import TestClient

from internship_portal.core.config import Settings, get_settings
from internship_portal.main import create_app
from tests.support import FakeDatabase


@pytest.fixture
def settings():
    return Settings(jwt_secret_key="test-secret", db_init_schema=False)


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def app(settings, fake_db):
    application = create_app(settings)
    application.dependency_overrides[get_settings] = lambda: settings
    # Lifespan is not entered, so the connector is injected directly
    application.state.db = fake_db
    return application


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
