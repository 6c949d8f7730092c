# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# This file assembles the pieces the account endpoints need - the user database access,
# the login/sign-up logic and the profile logic - for every incoming request.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies building UserRepositoryImpl, AuthService and UserService
# from the shared clients held on app.state. Tests override these to inject in-memory doubles.
# 🔗 Dependencies:
# FastAPI, app.shared.core.dependencies, user management domain and infrastructure
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.*, course_management (user lookup)

import logging

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase

from app.shared.core.dependencies import (
    get_db,
    get_hasher,
    get_image_storage,
    get_notifications,
    get_session_store,
    get_tokens,
)
from app.shared.core.security import PasswordHasher, TokenService
from app.shared.infrastructure.cache.session_store import SessionStore
from app.shared.infrastructure.email.notifications import NotificationDispatcher
from app.shared.infrastructure.storage.image_storage import ImageStorage

from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.domain.services.auth_service import AuthService
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl

logger = logging.getLogger(__name__)


def get_user_repository(db: AsyncDatabase = Depends(get_db)) -> UserRepository:
    return UserRepositoryImpl(db)


def get_auth_service(
    user_repository: UserRepository = Depends(get_user_repository),
    token_service: TokenService = Depends(get_tokens),
    password_hasher: PasswordHasher = Depends(get_hasher),
    session_store: SessionStore = Depends(get_session_store),
    notifications: NotificationDispatcher = Depends(get_notifications),
) -> AuthService:
    return AuthService(
        user_repository=user_repository,
        token_service=token_service,
        password_hasher=password_hasher,
        session_store=session_store,
        notifications=notifications,
    )


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_hasher),
    session_store: SessionStore = Depends(get_session_store),
    image_storage: ImageStorage = Depends(get_image_storage),
) -> UserService:
    return UserService(
        user_repository=user_repository,
        password_hasher=password_hasher,
        session_store=session_store,
        image_storage=image_storage,
    )
