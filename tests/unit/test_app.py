"""Tests for application wiring: health, 503 without a database, request state."""

from fastapi import Depends, Request
from fastapi.testclient import TestClient

import helpers
from thingful.api.deps import require_basic_auth
from thingful.api.main import create_app


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_data_routes_503_without_database():
    """No overrides and no lifespan: app.state.db is unset."""
    client = TestClient(create_app())
    response = client.get("/api/things")
    assert response.status_code == 503
    assert response.json() == {"error": "Database not enabled"}


def test_unknown_route_is_404(client):
    assert client.get("/api/nothing-here").status_code == 404


def test_auth_gate_attaches_user_to_request(app, client, store):
    users = helpers.make_users_array()
    store.seed_users(users)
    seen = {}

    @app.get("/api/state-test")
    async def state_test(request: Request, user=Depends(require_basic_auth)):
        seen["user"] = request.state.user
        return {"user_name": user.user_name}

    response = client.get("/api/state-test", headers={"Authorization": helpers.make_auth_header(users[2])})
    assert response.json() == {"user_name": "test-user-3"}
    assert seen["user"].id == 3
