# 📄 File: app/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data formats for signing up, confirming the emailed code, logging in
# and social login, so bad input is rejected before it reaches the business logic.
#
# 🧪 Purpose (Technical Summary):
# Pydantic v2 request/response schemas for the authentication endpoints.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - email-validator (EmailStr)
# - app.shared.config.settings (password policy)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.auth (authentication endpoints)
# - FastAPI automatic request validation and OpenAPI documentation

"""
Authentication API Schemas

Request Schemas:
- RegistrationRequest: Name, email and password for a pending registration
- ActivationRequest: Activation token plus the emailed 4-digit code
- LoginRequest: Email/password credentials
- SocialAuthRequest: Identity supplied by an external provider

Response Schemas:
- RegistrationResponse: Activation token for the client to send back
- LoginResponse: Public user record and access token
- TokenRefreshResponse: New access token
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.shared.config.settings import get_settings
from app.shared.utils.validators import validate_password_length


class RegistrationRequest(BaseModel):
    """Start a registration."""

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="Password")

    @field_validator('name')
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Please enter your name')
        return v

    @field_validator('password')
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password_length(v, get_settings().PASSWORD_MIN_LENGTH)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "analytical-engine",
            }
        }
    )


class ActivationRequest(BaseModel):
    """Confirm a registration with the emailed code."""

    model_config = ConfigDict(populate_by_name=True)

    activation_token: str = Field(..., min_length=1)
    activation_code: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Email/password login. Empty values are rejected by the service."""

    email: str = ""
    password: str = ""


class SocialAuthRequest(BaseModel):
    """Login or sign-up with an identity verified by an external provider."""

    email: EmailStr
    name: str = Field(..., min_length=1)
    avatar: Optional[str] = Field(None, description="Avatar URL from the provider")


class RegistrationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    activation_token: str = Field(..., alias="activationToken")


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    user: Dict[str, Any]
    access_token: str = Field(..., alias="accessToken")


class TokenRefreshResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    access_token: str = Field(..., alias="accessToken")
