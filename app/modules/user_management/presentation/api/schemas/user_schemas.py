"""
User API Schemas

Request bodies for the self-service account endpoints and the common
user response wrapper.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.shared.config.settings import get_settings
from app.shared.utils.validators import validate_password_length


class UpdateUserInfoRequest(BaseModel):
    """Name and/or email change. Omitted fields are left untouched."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None


class UpdatePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field("", alias="oldPassword")
    new_password: str = Field("", alias="newPassword")

    @field_validator('new_password')
    @classmethod
    def check_new_password(cls, v: str) -> str:
        if not v:
            return v
        return validate_password_length(v, get_settings().PASSWORD_MIN_LENGTH)


class UpdateAvatarRequest(BaseModel):
    avatar: str = Field(..., min_length=1, description="Base64 image or data URL")


class UserResponse(BaseModel):
    success: bool = True
    user: Dict[str, Any]
