"""Test configuration and fixtures for the Product Store API."""

import pytest
from fastapi.testclient import TestClient

from product_store_api.app.core.db import ProductStore
from product_store_api.app.main import create_app


@pytest.fixture(name="db_path")
def db_path_fixture(tmp_path):
    """Path to a fresh database file inside the test's temp directory."""
    return str(tmp_path / "products.db")


@pytest.fixture(name="store")
def store_fixture(db_path):
    """An initialized store backed by a temporary file."""
    store = ProductStore(db_path)
    store.initialize()
    yield store
    store.close()


@pytest.fixture(name="client")
def client_fixture(db_path):
    """Create a test client; entering the context runs app startup."""
    app = create_app(database_path=db_path)
    with TestClient(app) as client:
        yield client
