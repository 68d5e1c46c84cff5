"""
Integration tests for health endpoints and request middleware.
"""
import pytest
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestHealth:
    """Tests for health and readiness endpoints."""

    def test_health(self, client):
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_database(self, client):
        response = client.get(reverse("health-db"))

        assert response.json() == {"status": "healthy", "database": "connected"}

    def test_cache(self, client):
        response = client.get(reverse("health-cache"))

        assert response.json() == {"status": "healthy", "cache": "connected"}

    def test_ready(self, client):
        response = client.get(reverse("ready"))

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True, "cache": True}


@pytest.mark.django_db
@pytest.mark.integration
class TestObservabilityMiddleware:
    """Tests for the correlation headers added to every response."""

    def test_generates_correlation_id(self, client):
        response = client.get(reverse("health"))

        assert response["X-Correlation-ID"]
        assert float(response["X-Request-Duration"]) >= 0

    def test_keeps_incoming_correlation_id(self, client):
        response = client.get(reverse("health"), HTTP_X_CORRELATION_ID="abc-123")

        assert response["X-Correlation-ID"] == "abc-123"
