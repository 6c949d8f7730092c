# 📄 File: app/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for signing up (with an emailed code), logging in,
# logging out, social login and renewing an expired login.
#
# 🧪 Purpose (Technical Summary):
# FastAPI authentication endpoints delegating to AuthService and managing the access/refresh
# token cookies. Errors propagate to the central exception handlers.
#
# 🔗 Dependencies:
# - FastAPI router, Response, status codes
# - app.modules.user_management.presentation.dependencies (service injection)
# - app.api.middleware.authentication (auth context, cookie helpers)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.__init__ (router inclusion)
# - Frontend applications

"""
Authentication API Endpoints

Endpoints:
- POST /register: Start a registration and email an activation code
- POST /activate: Confirm the code and create the account
- POST /login: Email/password authentication
- GET /logout: Session termination
- GET /refresh: Access/refresh token rotation
- POST /social-auth: Login or sign-up through an external provider
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from app.api.middleware.authentication import (
    REFRESH_TOKEN_COOKIE,
    clear_token_cookies,
    extract_token,
    get_auth_context,
    set_token_cookies,
)
from app.modules.user_management.domain.services.auth_service import AuthService
from app.modules.user_management.presentation.api.schemas.auth_schemas import (
    ActivationRequest,
    LoginRequest,
    LoginResponse,
    RegistrationRequest,
    RegistrationResponse,
    SocialAuthRequest,
    TokenRefreshResponse,
)
from app.modules.user_management.presentation.dependencies import get_auth_service
from app.shared.core.auth_context import AuthContext
from app.shared.utils.logging import user_id_var

logger = logging.getLogger(__name__)

auth_router = APIRouter()


@auth_router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account",
    responses={
        400: {"description": "Email already exists or email could not be sent"},
    },
)
async def register(
    registration_data: RegistrationRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Start a registration.

    Nothing is stored yet: the pending account travels inside the returned
    activation token and is created by /activate once the code is confirmed.
    """
    ticket = await auth_service.register(
        name=registration_data.name,
        email=registration_data.email,
        password=registration_data.password,
    )
    return {
        "success": True,
        "message": f"Please check your email: {registration_data.email} to activate your account!",
        "activationToken": ticket.token,
    }


@auth_router.post(
    "/activate",
    status_code=status.HTTP_201_CREATED,
    summary="Activate a pending registration",
)
async def activate(
    activation_data: ActivationRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    await auth_service.activate(activation_data.activation_token, activation_data.activation_code)
    return {"success": True}


@auth_router.post("/login", response_model=LoginResponse, summary="User authentication")
async def login(
    login_data: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    result = await auth_service.login(login_data.email, login_data.password)
    set_token_cookies(response, result.tokens.access_token, result.tokens.refresh_token)
    return {
        "success": True,
        "user": result.user.public_record(),
        "accessToken": result.tokens.access_token,
    }


@auth_router.get("/logout", summary="Logout current user")
async def logout(
    response: Response,
    context: AuthContext = Depends(get_auth_context),
    auth_service: AuthService = Depends(get_auth_service),
):
    await auth_service.logout(context)
    clear_token_cookies(response)
    return {"success": True, "message": "Logged out successfully"}


@auth_router.get("/refresh", response_model=TokenRefreshResponse, summary="Rotate session tokens")
async def refresh_tokens(
    request: Request,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange the refresh token cookie for a fresh token pair.

    Both cookies are replaced on success.
    """
    result = await auth_service.update_access_token(extract_token(request, REFRESH_TOKEN_COOKIE))
    user_id_var.set(result.context.user_id)
    request.state.user_id = result.context.user_id

    set_token_cookies(response, result.tokens.access_token, result.tokens.refresh_token)
    return {"success": True, "accessToken": result.tokens.access_token}


@auth_router.post("/social-auth", response_model=LoginResponse, summary="Social login")
async def social_auth(
    social_data: SocialAuthRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    result = await auth_service.social_auth(social_data.email, social_data.name, social_data.avatar)
    set_token_cookies(response, result.tokens.access_token, result.tokens.refresh_token)
    return {
        "success": True,
        "user": result.user.public_record(),
        "accessToken": result.tokens.access_token,
    }
