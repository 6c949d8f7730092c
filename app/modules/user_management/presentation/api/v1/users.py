# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints a logged-in learner uses to see and change their own
# account - name, email, password and profile picture.
#
# 🧪 Purpose (Technical Summary):
# FastAPI self-service user endpoints delegating to UserService. All routes require an
# authenticated AuthContext.
#
# 🔗 Dependencies:
# - FastAPI router
# - app.modules.user_management.presentation.dependencies (service injection)
# - app.api.middleware.authentication (auth context)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.__init__ (router inclusion)

import logging

from fastapi import APIRouter, Depends

from app.api.middleware.authentication import get_auth_context
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    UpdateAvatarRequest,
    UpdatePasswordRequest,
    UpdateUserInfoRequest,
    UserResponse,
)
from app.modules.user_management.presentation.dependencies import get_user_service
from app.shared.core.auth_context import AuthContext

logger = logging.getLogger(__name__)

users_router = APIRouter()


@users_router.get("/me", response_model=UserResponse, summary="Get current user")
async def get_user_info(
    context: AuthContext = Depends(get_auth_context),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.get_user_info(context)
    return {"success": True, "user": user.public_record()}


@users_router.put("/update-info", response_model=UserResponse, summary="Update name or email")
async def update_user_info(
    update_data: UpdateUserInfoRequest,
    context: AuthContext = Depends(get_auth_context),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.update_user_info(
        context,
        name=update_data.name,
        email=update_data.email,
    )
    return {"success": True, "user": user.public_record()}


@users_router.put("/update-password", response_model=UserResponse, summary="Change password")
async def update_password(
    password_data: UpdatePasswordRequest,
    context: AuthContext = Depends(get_auth_context),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.update_password(
        context,
        old_password=password_data.old_password,
        new_password=password_data.new_password,
    )
    return {"success": True, "user": user.public_record()}


@users_router.put("/update-avatar", response_model=UserResponse, summary="Replace profile picture")
async def update_avatar(
    avatar_data: UpdateAvatarRequest,
    context: AuthContext = Depends(get_auth_context),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.update_avatar(context, avatar_data.avatar)
    return {"success": True, "user": user.public_record()}
