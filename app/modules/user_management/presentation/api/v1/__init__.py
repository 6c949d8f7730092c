# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes version 1 of the account endpoints - signing up, logging in and managing
# your own profile.
#
# 🧪 Purpose (Technical Summary):
# API version 1 initialization exposing the user management routers.
#
# 🔗 Dependencies:
# - FastAPI APIRouter for endpoint organization
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.__init__ (router inclusion)

"""
User Management API Version 1

- Authentication API: register, activate, login, logout, refresh, social-auth
- Users API: me, update-info, update-password, update-avatar
"""

from .auth import auth_router
from .users import users_router

__all__ = [
    "auth_router",
    "users_router",
]
