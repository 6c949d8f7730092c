# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation): 
# The heart of the account system - what a user is and the rules for signing up and logging in
# 🧪 Purpose (Technical Summary): 
# Domain layer package: models, repository interfaces and domain services
# 🔗 Dependencies: 
# pydantic, app.shared.core
# 🔄 Connected Modules / Calls From: 
# Infrastructure and presentation layers

from .models.user import EnrolledCourse, User, UserRole
from .repositories.user_repository import UserRepository
from .services.auth_service import AuthService
from .services.user_service import UserService

__all__ = [
    "EnrolledCourse",
    "User",
    "UserRole",
    "UserRepository",
    "AuthService",
    "UserService",
]
