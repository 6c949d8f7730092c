"""
End-to-end account flows through the HTTP API.
"""

import pytest

from app.shared.core.security import INVALID_TOKEN_MESSAGE

REGISTRATION = {"name": "Ada Lovelace", "email": "ada@example.com", "password": "secret123"}


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def register_and_activate(client, mailer, payload=REGISTRATION):
    response = await client.post("/api/v1/register", json=payload)
    assert response.status_code == 201

    code = mailer.sent[-1].template_data["activation_code"]
    response = await client.post("/api/v1/activate", json={
        "activation_token": response.json()["activationToken"],
        "activation_code": code,
    })
    assert response.status_code == 201
    return response


class TestRegistration:

    async def test_register_sends_activation_mail(self, client, mailer, user_repo):
        response = await client.post("/api/v1/register", json=REGISTRATION)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Please check your email: ada@example.com to activate your account!"
        assert body["activationToken"]

        assert len(mailer.sent) == 1
        message = mailer.sent[0]
        assert message.recipient == "ada@example.com"
        assert message.template_name == "activation-mail"
        assert message.template_data["user"]["name"] == "Ada Lovelace"
        assert len(message.template_data["activation_code"]) == 4

        # Nothing is persisted before activation
        assert user_repo.users == {}

    async def test_activation_creates_verified_user(self, client, mailer, user_repo, hasher):
        response = await register_and_activate(client, mailer)

        assert response.json() == {"success": True}
        user = await user_repo.get_by_email("ada@example.com", include_password=True)
        assert user is not None
        assert user.is_verified
        assert user.role == "User"
        assert user.password != "secret123"
        assert hasher.verify("secret123", user.password)

    async def test_wrong_activation_code(self, client, mailer, user_repo):
        response = await client.post("/api/v1/register", json=REGISTRATION)
        code = mailer.sent[-1].template_data["activation_code"]
        wrong = "1000" if code != "1000" else "1001"

        response = await client.post("/api/v1/activate", json={
            "activation_token": response.json()["activationToken"],
            "activation_code": wrong,
        })

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid activation code"}
        assert user_repo.users == {}

    async def test_register_existing_email(self, client, make_user, mailer):
        await make_user(email="ada@example.com")

        response = await client.post("/api/v1/register", json=REGISTRATION)

        assert response.status_code == 400
        assert response.json()["message"] == "Email already exists"
        assert mailer.sent == []

    async def test_activation_token_reused_after_account_exists(self, client, mailer):
        response = await client.post("/api/v1/register", json=REGISTRATION)
        token = response.json()["activationToken"]
        code = mailer.sent[-1].template_data["activation_code"]
        payload = {"activation_token": token, "activation_code": code}

        assert (await client.post("/api/v1/activate", json=payload)).status_code == 201
        second = await client.post("/api/v1/activate", json=payload)

        assert second.status_code == 400
        assert second.json()["message"] == "Email already exists"

    async def test_email_failure_is_a_client_error(self, client, mailer):
        mailer.fail = True

        response = await client.post("/api/v1/register", json=REGISTRATION)

        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.parametrize("payload", [
        {"name": "Ada", "email": "not-an-email", "password": "secret123"},
        {"name": "Ada", "email": "ada@example.com", "password": "123"},
        {"name": "   ", "email": "ada@example.com", "password": "secret123"},
    ])
    async def test_invalid_registration_payload(self, client, payload):
        response = await client.post("/api/v1/register", json=payload)

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestLogin:

    async def test_login_sets_cookies_and_session(self, client, make_user, session_store):
        user = await make_user(email="ada@example.com", password="secret123")

        response = await client.post("/api/v1/login", json={"email": "ada@example.com", "password": "secret123"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["accessToken"]
        assert body["user"]["_id"] == user.id
        assert "password" not in body["user"]

        cookies = " ".join(response.headers.get_list("set-cookie"))
        assert "access_token=" in cookies
        assert "refresh_token=" in cookies
        assert "httponly" in cookies.lower()

        session = await session_store.get_session(user.id)
        assert session["email"] == "ada@example.com"
        assert "password" not in session

    async def test_login_wrong_password(self, client, make_user):
        await make_user(email="ada@example.com", password="secret123")

        response = await client.post("/api/v1/login", json={"email": "ada@example.com", "password": "nope"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid email or password"}

    async def test_login_unknown_email(self, client):
        response = await client.post("/api/v1/login", json={"email": "ghost@example.com", "password": "x"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email or password"

    async def test_login_missing_fields(self, client):
        response = await client.post("/api/v1/login", json={"email": "", "password": ""})

        assert response.status_code == 400
        assert response.json()["message"] == "Please enter email and password"

    async def test_full_account_flow(self, client, mailer):
        await register_and_activate(client, mailer)

        login = await client.post("/api/v1/login", json={"email": "ada@example.com", "password": "secret123"})
        me = await client.get("/api/v1/me", headers=bearer(login.json()["accessToken"]))

        assert me.status_code == 200
        assert me.json()["user"]["name"] == "Ada Lovelace"
        assert me.json()["user"]["is_verified"] is True


class TestSessionLifecycle:

    async def test_me_requires_authentication(self, client):
        response = await client.get("/api/v1/me")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Please login to access this resource"}

    async def test_me_with_invalid_token(self, client):
        response = await client.get("/api/v1/me", headers=bearer("garbage"))

        assert response.status_code == 400
        assert response.json()["message"] == INVALID_TOKEN_MESSAGE

    async def test_logout_destroys_session(self, client, make_user, session_store):
        user = await make_user(email="ada@example.com", password="secret123")
        login = await client.post("/api/v1/login", json={"email": "ada@example.com", "password": "secret123"})
        access_token = login.json()["accessToken"]

        response = await client.get("/api/v1/logout", headers=bearer(access_token))

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert await session_store.get_session(user.id) is None

        # The token is still cryptographically valid but the session is gone
        after = await client.get("/api/v1/me", headers=bearer(access_token))
        assert after.status_code == 400
        assert after.json()["message"] == "Please login to access this resource"

    async def test_refresh_rotates_tokens(self, client, make_user):
        await make_user(email="ada@example.com", password="secret123")
        login = await client.post("/api/v1/login", json={"email": "ada@example.com", "password": "secret123"})
        old_access = login.json()["accessToken"]
        refresh_token = login.cookies["refresh_token"]

        response = await client.get("/api/v1/refresh", headers=bearer(refresh_token))

        assert response.status_code == 200
        new_access = response.json()["accessToken"]
        assert new_access != old_access
        cookies = " ".join(response.headers.get_list("set-cookie"))
        assert "access_token=" in cookies
        assert "refresh_token=" in cookies

        me = await client.get("/api/v1/me", headers=bearer(new_access))
        assert me.status_code == 200

    async def test_refresh_without_session(self, client, make_user, token_service):
        user = await make_user()

        response = await client.get("/api/v1/refresh", headers=bearer(token_service.issue_refresh_token(user.id)))

        assert response.status_code == 400
        assert response.json()["message"] == "Please login for access this resources!"

    async def test_refresh_with_access_token_is_rejected(self, client, make_user, login_as, token_service):
        user = await make_user()
        await login_as(user)

        response = await client.get("/api/v1/refresh", headers=bearer(token_service.issue_access_token(user.id)))

        assert response.status_code == 400
        assert response.json()["message"] == "Could not refresh token"

    async def test_refresh_without_token(self, client):
        response = await client.get("/api/v1/refresh")

        assert response.status_code == 400
        assert response.json()["message"] == "Could not refresh token"


class TestSocialAuth:

    async def test_creates_user_without_password(self, client, user_repo, session_store):
        response = await client.post("/api/v1/social-auth", json={
            "email": "grace@example.com",
            "name": "Grace Hopper",
            "avatar": "https://avatars.test/grace.png",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["avatar"]["url"] == "https://avatars.test/grace.png"

        user = await user_repo.get_by_email("grace@example.com", include_password=True)
        assert user.password is None
        assert user.is_verified
        assert await session_store.get_session(user.id) is not None

    async def test_existing_user_is_logged_in(self, client, make_user, user_repo):
        user = await make_user(email="grace@example.com")

        response = await client.post("/api/v1/social-auth", json={"email": "grace@example.com", "name": "Grace"})

        assert response.status_code == 200
        assert response.json()["user"]["_id"] == user.id
        assert len(user_repo.users) == 1

    async def test_social_user_cannot_login_with_password(self, client):
        await client.post("/api/v1/social-auth", json={"email": "grace@example.com", "name": "Grace"})

        response = await client.post("/api/v1/login", json={"email": "grace@example.com", "password": "anything"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email or password"
