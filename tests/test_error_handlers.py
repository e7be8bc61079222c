import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def lenient_client(client):
    """A client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_unexpected_errors_become_generic_500(lenient_client, auth_headers, mocker):
    mocker.patch("app.users.service.UserRepository.list_active", side_effect=RuntimeError("connection reset"))

    response = lenient_client.get("/api/v1/users", headers=auth_headers)

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "connection reset" not in response.text


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/nowhere")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_404"


def test_request_id_header(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["X-Request-ID"]
    assert response.json()["status"] == "ok"


def test_login_rate_limit(client, test_user):
    from app.core.rate_limiter import limiter

    limiter.enabled = True
    limiter.reset()
    try:
        statuses = [
            client.post("/api/v1/users/login", json={"email": test_user.email, "password": "wrong"}).status_code
            for _ in range(11)
        ]
    finally:
        limiter.enabled = False
        limiter.reset()

    assert statuses[:10] == [400] * 10
    assert statuses[10] == 429
