# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Organizes the business logic services for signing up, logging in and managing your own account
# 🧪 Purpose (Technical Summary): 
# Package initialization for user management domain services
# 🔗 Dependencies: 
# Domain services, domain models, repositories
# 🔄 Connected Modules / Calls From: 
# Presentation dependencies, API endpoints

"""
User Management Domain Services

- AuthService: Registration, activation, login/logout and token rotation
- UserService: Self-service profile, password and avatar updates
"""

from .auth_service import AuthService, LoginResult, RefreshResult, TokenPair
from .user_service import UserService

__all__ = [
    "AuthService",
    "LoginResult",
    "RefreshResult",
    "TokenPair",
    "UserService",
]
