import pytest

from app.modules.user_management.domain.services.user_service import UserService
from app.shared.core.exceptions import ConflictError, ValidationError
from app.shared.infrastructure.storage.image_storage import StoredImage


@pytest.fixture
def user_service(user_repo, hasher, session_store, image_storage):
    return UserService(user_repo, hasher, session_store, image_storage)


class TestUpdateInfo:

    async def test_updates_name_and_email_and_session(self, user_service, session_store, make_user, context_for):
        user = await make_user()

        updated = await user_service.update_user_info(context_for(user), name="Ada", email="ADA@example.com")

        assert updated.name == "Ada"
        assert updated.email == "ada@example.com"
        session = await session_store.get_session(user.id)
        assert session["name"] == "Ada"
        assert session["email"] == "ada@example.com"

    async def test_taken_email_is_rejected(self, user_service, make_user, context_for):
        await make_user(email="taken@example.com")
        user = await make_user(email="mine@example.com")

        with pytest.raises(ConflictError):
            await user_service.update_user_info(context_for(user), email="taken@example.com")

    async def test_same_email_is_not_a_conflict(self, user_service, make_user, context_for):
        user = await make_user(email="mine@example.com")

        updated = await user_service.update_user_info(context_for(user), email="mine@example.com", name="Me")

        assert updated.name == "Me"

    async def test_own_email_in_other_case_is_not_a_conflict(self, user_service, make_user, context_for):
        user = await make_user(email="mine@example.com")

        updated = await user_service.update_user_info(context_for(user), email=" Mine@Example.com ")

        assert updated.email == "mine@example.com"

    async def test_taken_email_in_other_case_is_rejected(self, user_service, make_user, context_for):
        await make_user(email="taken@example.com")
        user = await make_user(email="mine@example.com")

        with pytest.raises(ConflictError):
            await user_service.update_user_info(context_for(user), email="TAKEN@Example.com")


class TestUpdatePassword:

    async def test_changes_password(self, user_service, user_repo, hasher, make_user, context_for):
        user = await make_user(password="secret123")

        updated = await user_service.update_password(context_for(user), "secret123", "better-secret")

        assert updated.password is None
        stored = await user_repo.get_by_id(user.id, include_password=True)
        assert hasher.verify("better-secret", stored.password)
        assert not hasher.verify("secret123", stored.password)

    async def test_wrong_old_password(self, user_service, make_user, context_for):
        user = await make_user(password="secret123")

        with pytest.raises(ValidationError) as exc_info:
            await user_service.update_password(context_for(user), "nope", "better-secret")

        assert exc_info.value.message == "Invalid old password"

    async def test_social_account_has_no_password(self, user_service, make_user, context_for):
        user = await make_user(password=None)

        with pytest.raises(ValidationError) as exc_info:
            await user_service.update_password(context_for(user), "anything", "better-secret")

        assert exc_info.value.message == "Invalid user"

    async def test_missing_input(self, user_service, make_user, context_for):
        user = await make_user()

        with pytest.raises(ValidationError) as exc_info:
            await user_service.update_password(context_for(user), "", "better-secret")

        assert exc_info.value.message == "Please enter old and new password"


class TestUpdateAvatar:

    async def test_replaces_previous_avatar(self, user_service, user_repo, image_storage, make_user, context_for):
        user = await make_user()
        user.avatar = StoredImage(public_id="avatars/old.jpg", url="https://cdn.test/avatars/old.jpg")
        await user_repo.update(user)

        updated = await user_service.update_avatar(context_for(user), "data:image/png;base64,AAAA")

        assert image_storage.destroyed == ["avatars/old.jpg"]
        assert image_storage.uploads == [("avatars", 150)]
        assert updated.avatar.url.startswith("https://cdn.test/avatars/")

    async def test_provider_avatar_is_not_destroyed(self, user_service, user_repo, image_storage, make_user, context_for):
        user = await make_user()
        user.avatar = StoredImage(public_id="", url="https://avatars.test/me.png")
        await user_repo.update(user)

        await user_service.update_avatar(context_for(user), "data:image/png;base64,AAAA")

        assert image_storage.destroyed == []

    async def test_empty_avatar(self, user_service, make_user, context_for):
        user = await make_user()

        with pytest.raises(ValidationError):
            await user_service.update_avatar(context_for(user), "")


class TestUsersApi:

    async def test_update_password_over_http(self, client, make_user, login_as):
        user = await make_user(password="secret123")

        response = await client.put(
            "/api/v1/update-password",
            json={"oldPassword": "secret123", "newPassword": "better-secret"},
            headers=await login_as(user),
        )

        assert response.status_code == 200
        assert "password" not in response.json()["user"]

        login = await client.post("/api/v1/login", json={"email": user.email, "password": "better-secret"})
        assert login.status_code == 200

    async def test_update_info_over_http(self, client, make_user, login_as, session_store):
        user = await make_user()

        response = await client.put("/api/v1/update-info", json={"name": "Renamed"}, headers=await login_as(user))

        assert response.status_code == 200
        assert response.json()["user"]["name"] == "Renamed"
        assert (await session_store.get_session(user.id))["name"] == "Renamed"
