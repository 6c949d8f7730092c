"""
User management domain models.
"""

from .user import EnrolledCourse, User, UserRole

__all__ = ["EnrolledCourse", "User", "UserRole"]
