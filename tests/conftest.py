# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Provides an in-memory repository and a service built on it
# - Provides a TestClient running the real app against a temporary SQLite file
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import get_customer_service
from app.main import create_app
from core.services.customer_service import CustomerService
from tests.fakes import InMemoryCustomerRepository


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_customer_data():
    """Valid body for POST /customers."""
    return {
        "name": "Ada",
        "email": "ada@x.com",
        "document": "123",
    }


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryCustomerRepository()


@pytest.fixture
def service(repository):
    """CustomerService over the in-memory repository."""
    return CustomerService(repository)


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a fresh SQLite file."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'customers.db'}",
        DATABASE_CREATE_TABLES=True,
        ENVIRONMENT="development",
    )


@pytest.fixture
def client(test_settings):
    """TestClient for the real app, with the lifespan running."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_client(test_settings):
    """
    Factory for a TestClient whose CustomerService uses the given repository.

    Server errors are returned as responses rather than re-raised, so
    tests can assert on the 500 body.
    """
    clients = []

    def _make(repository) -> TestClient:
        app = create_app(test_settings)
        app.dependency_overrides[get_customer_service] = lambda: CustomerService(repository)
        test_client = TestClient(app, raise_server_exceptions=False)
        test_client.__enter__()
        clients.append(test_client)
        return test_client

    yield _make

    for test_client in clients:
        test_client.__exit__(None, None, None)
