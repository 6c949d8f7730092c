# 📄 File: app/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the business logic for a logged-in user managing their own account -
# seeing their details, changing name/email, changing password and uploading a new avatar.
# 🧪 Purpose (Technical Summary):
# Domain service implementing self-service user operations. Every mutation is persisted
# through the repository and then mirrored into the session cache so later requests see it.
# 🔗 Dependencies:
# User domain model, UserRepository, PasswordHasher, SessionStore, ImageStorage
# 🔄 Connected Modules / Calls From:
# API user endpoints (/me, /update-info, /update-password, /update-avatar)

import logging
from typing import Optional

from ..models.user import User
from ..repositories.user_repository import UserRepository
from app.shared.core.auth_context import AuthContext
from app.shared.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.shared.core.security import PasswordHasher
from app.shared.infrastructure.cache.session_store import SessionStore
from app.shared.infrastructure.storage.image_storage import ImageStorage

logger = logging.getLogger(__name__)

AVATAR_FOLDER = "avatars"
AVATAR_WIDTH = 150


class UserService:
    """
    Domain service for user self-management.

    Business rules:
    - A user may only read and change their own account
    - Email changes must keep emails unique
    - Password changes require the current password, and are not possible
      for accounts created by social login
    - The session cache is rewritten after every successful change
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        session_store: SessionStore,
        image_storage: Optional[ImageStorage] = None,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.session_store = session_store
        self.image_storage = image_storage

    async def _load(self, user_id: str, include_password: bool = False) -> User:
        user = await self.user_repository.get_by_id(user_id, include_password=include_password)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        return user

    async def _refresh_session(self, user: User) -> None:
        await self.session_store.create_session(user.id, user.public_record())

    async def get_user_info(self, context: AuthContext) -> User:
        """
        Return the current user's stored record.

        Raises:
            NotFoundError: If the account no longer exists
        """
        return await self._load(context.user_id)

    async def update_user_info(
        self,
        context: AuthContext,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """
        Update name and/or email.

        Args:
            context: Authenticated identity
            name: New display name
            email: New email address

        Returns:
            User: Updated user

        Raises:
            ConflictError: If the email is already used by another account
        """
        email = email.strip().lower() if email else None
        user = await self._load(context.user_id)

        if email and email != user.email:
            if await self.user_repository.exists_by_email(email):
                raise ConflictError("Email already exists", field="email", value=email)
            user.email = email

        if name:
            user.name = name

        user = await self.user_repository.update(user)
        await self._refresh_session(user)
        logger.info(f"User info updated: {user.id}")
        return user

    async def update_password(
        self,
        context: AuthContext,
        old_password: str,
        new_password: str,
    ) -> User:
        """
        Change the password after checking the current one.

        Raises:
            ValidationError: If a password is missing, the account has no
                password (social login) or the old password does not match
        """
        if not old_password or not new_password:
            raise ValidationError("Please enter old and new password")

        user = await self._load(context.user_id, include_password=True)

        if not user.password:
            raise ValidationError("Invalid user")

        if not self.password_hasher.verify(old_password, user.password):
            logger.warning(f"Password change rejected - wrong old password: {user.id}")
            raise ValidationError("Invalid old password")

        user.password = self.password_hasher.hash(new_password)
        user = await self.user_repository.update(user)
        user.password = None

        await self._refresh_session(user)
        logger.info(f"Password updated: {user.id}")
        return user

    async def update_avatar(self, context: AuthContext, avatar: str) -> User:
        """
        Replace the profile picture.

        Args:
            context: Authenticated identity
            avatar: Base64 image or data URL

        Raises:
            ValidationError: If no image was supplied
            ImageStorageError: If the image host rejects the change
        """
        if not avatar:
            raise ValidationError("Please provide an avatar", field="avatar")

        user = await self._load(context.user_id)

        if user.avatar and user.avatar.public_id:
            await self.image_storage.destroy(user.avatar.public_id)

        user.avatar = await self.image_storage.upload(avatar, folder=AVATAR_FOLDER, width=AVATAR_WIDTH)
        user = await self.user_repository.update(user)

        await self._refresh_session(user)
        logger.info(f"Avatar updated: {user.id}")
        return user
