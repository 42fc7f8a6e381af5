"""Unit tests for health check endpoints and request context middleware."""

from unittest.mock import patch

from fastapi import status

from tests.consts import API_BASE


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health_check(self, unauthenticated_client):
        """Test health check needs no hacker and reports the configured service."""
        response = unauthenticated_client.get(f"{API_BASE}/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "Hackathon API Test"
        assert data["version"] == "v1"
        assert "timestamp" in data
        assert data["tables"] == ["projects", "registrations", "team_members", "judgings", "hackathons", "hackers"]


class TestRequestContextMiddleware:
    """Tests for RequestContextMiddleware."""

    def test_request_id_is_generated(self, unauthenticated_client):
        """Test every response carries a request id."""
        response = unauthenticated_client.get(f"{API_BASE}/health")

        assert response.headers["X-Request-ID"]

    def test_request_id_is_propagated(self, unauthenticated_client):
        """Test a caller supplied request id is echoed back."""
        response = unauthenticated_client.get(f"{API_BASE}/health", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"

    def test_error_responses_carry_request_id(self, unauthenticated_client):
        """Test handled errors still pass through the middleware."""
        response = unauthenticated_client.get(f"{API_BASE}/projects/missing", headers={"X-Request-ID": "trace-404"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.headers["X-Request-ID"] == "trace-404"

    @patch("hackathon_api.monitoring.request_context.logger")
    def test_context_is_bound_to_logs(self, mock_logger, client, hackers):
        """Test the request id, acting hacker and path are bound for the whole request."""
        client.get(f"{API_BASE}/health", headers={"X-Request-ID": "trace-ctx"})

        mock_logger.contextualize.assert_called_once_with(
            request_id="trace-ctx",
            hacker_id=hackers["olive"].id,
            request_path="GET /api/health",
        )
