"""
Tests for the health, readiness and root endpoints.

- /health: Liveness probe
- /ready: Readiness probe with a database check
- /: Root endpoint with service info
"""
from core import dependencies as deps
from conftest import UnreachableDatabase


# =============================================================================
# ROOT ENDPOINT TESTS
# =============================================================================

def test_root_endpoint(client):
    """Test the root endpoint returns service info."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "Hospital Records Service"
    assert data["version"] == "1.0.0"
    assert data["patients"] == "/api/v1/patients"
    assert data["doctors"] == "/api/v1/doctors"


# =============================================================================
# HEALTH ENDPOINT TESTS (LIVENESS)
# =============================================================================

def test_health_endpoint(client):
    """Test the /health liveness endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"
    assert data["timestamp"].endswith("Z")


# =============================================================================
# READINESS ENDPOINT TESTS
# =============================================================================

def test_ready_endpoint(client):
    """A reachable database makes the service ready."""
    response = client.get("/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert [dep["name"] for dep in data["dependencies"]] == ["database"]
    assert data["dependencies"][0]["status"] == "ok"


def test_ready_endpoint_database_down(test_app, client):
    """An unreachable database answers 503 instead of raising."""
    test_app.dependency_overrides[deps.get_database] = lambda: UnreachableDatabase()

    response = client.get("/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert data["dependencies"][0]["status"] == "unavailable"
    assert "OperationalError" in data["dependencies"][0]["message"]
