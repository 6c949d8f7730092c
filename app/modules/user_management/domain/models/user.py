# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation): 
# Defines what a "user" is in our e-learning app - their name, email, password, avatar,
# role and the courses they are enrolled in.
# 🧪 Purpose (Technical Summary): 
# Domain model for the User aggregate with role handling, enrollment lookup and the
# public (password-free) record that is cached as the session value.
# 🔗 Dependencies: 
# pydantic, datetime, typing, app.shared.utils.validators
# 🔄 Connected Modules / Calls From: 
# auth_service.py, user_service.py, user_repository.py, authentication middleware

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.infrastructure.storage.image_storage import StoredImage
from app.shared.utils.validators import is_valid_email, new_object_id


class UserRole(str, Enum):
    """User role enumeration"""
    USER = "User"
    ADMIN = "admin"


class EnrolledCourse(BaseModel):
    """Reference to a course the user has access to."""
    course_id: str


class User(BaseModel):
    """
    User domain model.
    
    - id: Unique identifier (ObjectId hex string, serialized as `_id`)
    - name / email: Identity; email is unique and validated
    - password: bcrypt hash, absent for social-login accounts and never
      included in the public record
    - avatar: Image host reference
    - role: "User" by default, "admin" for course managers
    - is_verified: Set once the email address is confirmed
    - courses: Enrolled course references
    """
    
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)
    
    id: str = Field(default_factory=new_object_id, alias="_id")
    name: str
    email: str
    password: Optional[str] = None
    avatar: Optional[StoredImage] = None
    role: str = UserRole.USER.value
    is_verified: bool = False
    courses: List[EnrolledCourse] = Field(default_factory=list)
    
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    
    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate the email format"""
        email = v.strip().lower()
        if not is_valid_email(email):
            raise ValueError('Please enter a valid email')
        return email
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Please enter your name')
        return v.strip()
    
    # Business Logic Methods
    
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
    
    def is_enrolled(self, course_id: str) -> bool:
        """Check whether the user has access to a course."""
        return any(course.course_id == course_id for course in self.courses)
    
    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
    
    def public_record(self) -> Dict[str, Any]:
        """
        JSON-ready representation without the password hash.
        
        This is the value stored in the session cache and returned by the API.
        """
        return self.model_dump(mode="json", by_alias=True, exclude={"password"})
    