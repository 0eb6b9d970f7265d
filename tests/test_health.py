# =============================================================================
# tests/test_health.py - Health Endpoint Tests
# =============================================================================

from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.version import VERSION


class TestHealthEndpoints:
    """Tests for /health, /health/ready and /health/live."""

    def test_health(self, client):
        """Basic health reports healthy with environment and version."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == VERSION
        assert "timestamp" in body

    def test_health_reports_app_environment(self, tmp_path):
        """The environment comes from the settings the app was built with."""
        app_settings = Settings(
            DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'health.db'}",
            ENVIRONMENT="staging",
        )

        with TestClient(create_app(app_settings)) as client:
            response = client.get("/health")

        assert response.json()["environment"] == "staging"

    def test_ready_with_database(self, client):
        """Readiness pings the database."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
        assert response.json()["checks"] == {"database": "healthy"}

    def test_live(self, client):
        """Liveness always answers alive."""
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_root(self, client):
        """Root endpoint describes the API."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Customer API"
        assert response.json()["health"] == "/health"
