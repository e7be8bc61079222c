from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.database.models import UserStatus

from factories import make_user, login, bearer, TEST_PASSWORD


class TestLogin:

    def test_login_returns_user_and_token(self, client, test_user):
        response = login(client, test_user.email)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["user"]["id"] == test_user.id
        assert "password" not in data["user"]

        payload = jwt.decode(data["token"], "test-secret", algorithms=["HS256"])
        assert payload["id"] == test_user.id

    def test_token_expires_in_thirty_days(self, client, test_user):
        token = login(client, test_user.email).json()["data"]["token"]

        payload = jwt.decode(token, "test-secret", algorithms=["HS256"])
        expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        remaining = expires_at - datetime.now(timezone.utc)
        assert timedelta(days=29, hours=23) < remaining <= timedelta(days=30)

    @pytest.mark.parametrize("case", ["wrong_password", "unknown_email", "malformed_email", "disabled_user"])
    def test_failed_logins_are_indistinguishable(self, client, db_session, test_user, case):
        make_user(db_session, username="carl", email="carl@x.com", status=UserStatus.DISABLED)
        attempts = {
            "wrong_password": ("ana@x.com", "not-the-password"),
            "unknown_email": ("nobody@x.com", TEST_PASSWORD),
            "malformed_email": ("nobody", TEST_PASSWORD),
            "disabled_user": ("carl@x.com", TEST_PASSWORD),
        }
        email, password = attempts[case]

        response = login(client, email, password)

        assert response.status_code == 400
        assert response.json() == {
            "status": "fail",
            "error": {"code": "INVALID_CREDENTIALS", "message": "Wrong credentials", "context": {}},
        }


class TestSessionGuard:

    def test_missing_token(self, client):
        response = client.get("/api/v1/users/me")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "NOT_AUTHENTICATED"

    def test_garbage_token(self, client):
        response = client.get("/api/v1/users/me", headers=bearer("not.a.jwt"))

        assert response.status_code == 401

    def test_token_signed_with_another_secret(self, client, test_user):
        token = jwt.encode({"id": test_user.id}, "someone-elses-secret", algorithm="HS256")

        response = client.get("/api/v1/users/me", headers=bearer(token))

        assert response.status_code == 401

    def test_expired_token(self, client, test_user):
        expired = datetime.now(timezone.utc) - timedelta(minutes=1)
        token = jwt.encode({"id": test_user.id, "exp": expired}, "test-secret", algorithm="HS256")

        response = client.get("/api/v1/users/me", headers=bearer(token))

        assert response.status_code == 401

    def test_token_for_unknown_user(self, client):
        token = jwt.encode({"id": 4242}, "test-secret", algorithm="HS256")

        response = client.get("/api/v1/users/me", headers=bearer(token))

        assert response.status_code == 401

    def test_valid_token(self, client, auth_headers):
        response = client.get("/api/v1/users/me", headers=auth_headers)

        assert response.status_code == 200
