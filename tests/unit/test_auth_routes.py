"""Tests des routes d'authentification (/api/v1/auth)."""

import pytest

from app.core.rate_limit import RateLimiter

API = "/api/v1"
EMAIL = "marie.tremblay@berthcare.ca"
PASSWORD = "SoinsADomicile2026"
DEVICE_ID = "5f1d2c3b-4a59-4e68-9d7c-8b6a5f4e3d2c"
OTHER_DEVICE_ID = "7a2b3c4d-5e6f-4a8b-9c0d-1e2f3a4b5c6d"


@pytest.fixture
def caregiver(client) -> dict:
    response = client.post(
        f"{API}/caregivers/",
        json={
            "email": EMAIL,
            "name": "Marie Tremblay",
            "phone": "+16045550101",
            "organization_id": "org-vancouver",
            "password": PASSWORD,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def login(client, device_id: str = DEVICE_ID, password: str = PASSWORD):
    return client.post(
        f"{API}/auth/login",
        json={"email": EMAIL, "password": password, "device_id": device_id},
    )


def refresh(client, refresh_token: str, **extra):
    return client.post(f"{API}/auth/refresh", json={"refresh_token": refresh_token, **extra})


class TestLogin:
    def test_login_issues_tokens(self, client, caregiver):
        response = login(client)

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["user_id"] == caregiver["id"]
        assert body["device_id"] == DEVICE_ID
        assert body["access_token"] and body["refresh_token"]
        assert body["refresh_expires_at"] > body["access_expires_at"]

    def test_password_never_returned(self, client, caregiver):
        assert "password" not in caregiver
        assert "password_hash" not in caregiver

    def test_email_is_case_insensitive(self, client, caregiver):
        response = client.post(
            f"{API}/auth/login",
            json={
                "email": "Marie.Tremblay@BerthCare.ca",
                "password": PASSWORD,
                "device_id": DEVICE_ID,
            },
        )

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "email, password",
        [(EMAIL, "wrong-password"), ("inconnu@berthcare.ca", PASSWORD)],
    )
    def test_invalid_credentials(self, client, caregiver, email, password):
        response = client.post(
            f"{API}/auth/login",
            json={"email": email, "password": password, "device_id": DEVICE_ID},
        )

        assert response.status_code == 401
        assert response.headers["content-type"] == "application/problem+json"
        assert response.json()["detail"] == "Invalid credentials"

    def test_deactivated_caregiver_rejected(self, client, caregiver):
        client.delete(f"{API}/caregivers/{caregiver['id']}")

        assert login(client).status_code == 401

    def test_device_id_must_be_uuid(self, client, caregiver):
        assert login(client, device_id="phone-1").status_code == 422

    def test_rate_limited(self, client, caregiver):
        client.app.state.rate_limiter = RateLimiter(2, 60)

        assert login(client, password="wrong-password").status_code == 401
        assert login(client, password="wrong-password").status_code == 401
        response = login(client)

        assert response.status_code == 429
        assert response.json()["detail"] == "Too many requests"
        # Autre appareil: autre compteur
        assert login(client, device_id=OTHER_DEVICE_ID).status_code == 200


class TestRefresh:
    def test_refresh_keeps_refresh_token(self, client, caregiver):
        tokens = login(client).json()

        response = client.post(
            f"{API}/auth/refresh",
            json={"refresh_token": tokens["refresh_token"], "device_id": DEVICE_ID},
        )

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["access_token"]
        assert body["jti"] == tokens["jti"]
        assert "refresh_token" not in body

    def test_rotation_invalidates_previous_token(self, client, caregiver):
        tokens = login(client).json()

        response = client.post(
            f"{API}/auth/refresh", json={"refresh_token": tokens["refresh_token"], "rotate": True}
        )
        assert response.status_code == 200
        rotated = response.json()
        assert rotated["refresh_token"] != tokens["refresh_token"]
        assert rotated["jti"] != tokens["jti"]

        stale = refresh(client, tokens["refresh_token"])
        assert stale.status_code == 401
        assert stale.json()["reason"] == "not_found"

        fresh = refresh(client, rotated["refresh_token"])
        assert fresh.status_code == 200

    def test_device_mismatch_forbidden(self, client, caregiver):
        tokens = login(client).json()

        response = client.post(
            f"{API}/auth/refresh",
            json={"refresh_token": tokens["refresh_token"], "device_id": OTHER_DEVICE_ID},
        )

        assert response.status_code == 403
        assert response.json()["reason"] == "device_mismatch"

    def test_revoked_token_forbidden(self, client, caregiver):
        tokens = login(client).json()
        assert (
            client.post(
                f"{API}/auth/logout", json={"refresh_token": tokens["refresh_token"]}
            ).status_code
            == 204
        )

        response = refresh(client, tokens["refresh_token"])

        assert response.status_code == 403
        assert response.json()["reason"] == "revoked"

    def test_malformed_token(self, client):
        response = client.post(f"{API}/auth/refresh", json={"refresh_token": "not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["reason"] == "invalid"

    def test_access_token_is_not_a_refresh_token(self, client, caregiver):
        tokens = login(client).json()

        response = refresh(client, tokens["access_token"])

        assert response.status_code == 401

    def test_new_login_replaces_device_token(self, client, caregiver):
        first = login(client).json()
        second = login(client).json()

        response = refresh(client, first["refresh_token"])

        assert response.status_code == 401
        assert client.post(
            f"{API}/auth/refresh", json={"refresh_token": second["refresh_token"]}
        ).status_code == 200


class TestCurrentCaregiver:
    def test_me(self, client, caregiver):
        tokens = login(client).json()

        response = client.get(
            f"{API}/auth/me", headers={"Authorization": f"Bearer {tokens['access_token']}"}
        )

        assert response.status_code == 200
        assert response.json()["id"] == caregiver["id"]

    def test_me_without_token(self, client):
        response = client.get(f"{API}/auth/me")

        assert response.status_code == 401
        assert response.json()["detail"] == "Missing bearer token"

    def test_me_with_refresh_token(self, client, caregiver):
        tokens = login(client).json()

        response = client.get(
            f"{API}/auth/me", headers={"Authorization": f"Bearer {tokens['refresh_token']}"}
        )

        assert response.status_code == 401
