# 📄 File: app/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file gathers all the account-related web endpoints into one bundle the main app can plug in.
#
# 🧪 Purpose (Technical Summary):
# API package initialization combining the versioned user management routers.
#
# 🔗 Dependencies:
# - FastAPI APIRouter
# - app.modules.user_management.presentation.api.v1 (versioned API endpoints)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

from fastapi import APIRouter

__all__ = [
    "create_user_management_router",
]


def create_user_management_router() -> APIRouter:
    """
    Create the main user management API router.
    
    Returns:
        APIRouter: Combined router for all user management endpoints
    """
    from app.modules.user_management.presentation.api.v1.auth import auth_router
    from app.modules.user_management.presentation.api.v1.users import users_router
    
    main_router = APIRouter()
    main_router.include_router(auth_router, tags=["Authentication"])
    main_router.include_router(users_router, tags=["Users"])
    
    return main_router
