# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the data validation schemas for the user management API, making sure
# incoming requests and outgoing responses have the correct format.
#
# 🧪 Purpose (Technical Summary):
# API schemas package initialization exposing the Pydantic request/response models.
#
# 🔗 Dependencies:
# - pydantic models for request/response validation
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1 (API endpoints use schemas)

from .auth_schemas import (
    ActivationRequest,
    LoginRequest,
    LoginResponse,
    RegistrationRequest,
    RegistrationResponse,
    SocialAuthRequest,
    TokenRefreshResponse,
)
from .user_schemas import (
    UpdateAvatarRequest,
    UpdatePasswordRequest,
    UpdateUserInfoRequest,
    UserResponse,
)

__all__ = [
    "ActivationRequest",
    "LoginRequest",
    "LoginResponse",
    "RegistrationRequest",
    "RegistrationResponse",
    "SocialAuthRequest",
    "TokenRefreshResponse",
    "UpdateAvatarRequest",
    "UpdatePasswordRequest",
    "UpdateUserInfoRequest",
    "UserResponse",
]
