# 📄 File: app/api/middleware/authentication.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a security guard that checks a learner's pass (access token) before letting them
# into protected parts of the platform, and checks their role for admin-only areas like course editing.
# 🧪 Purpose (Technical Summary):
# Request authentication: extracts the access token from the cookie (or Bearer header), verifies it,
# resolves the cached session into an immutable AuthContext, enforces roles, and manages token cookies.
# 🔗 Dependencies:
# FastAPI, app.shared.core.security, app.shared.core.auth_context, session store
# 🔄 Connected Modules / Calls From:
# All protected API endpoints, user management and course management routers

import logging
from typing import Callable, Optional

from fastapi import Depends, Request, Response

from app.shared.config.settings import get_settings
from app.shared.core.auth_context import AuthContext
from app.shared.core.dependencies import get_session_store, get_tokens
from app.shared.core.exceptions import ForbiddenError, SessionExpiredError, UnauthenticatedError
from app.shared.core.security import TokenService
from app.shared.infrastructure.cache.session_store import SessionStore
from app.shared.utils.logging import user_id_var

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "access_token"
REFRESH_TOKEN_COOKIE = "refresh_token"


def extract_token(request: Request, cookie_name: str = ACCESS_TOKEN_COOKIE) -> Optional[str]:
    """
    Read a token from its cookie, falling back to an Authorization header.

    Args:
        request: Incoming request
        cookie_name: Cookie holding the token

    Returns:
        Optional[str]: Raw token or None
    """
    token = request.cookies.get(cookie_name)
    if token:
        return token

    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[len("Bearer "):].strip() or None

    return None


async def authenticate_request(
    access_token: Optional[str],
    token_service: TokenService,
    session_store: SessionStore,
) -> AuthContext:
    """
    Resolve an access token into the authenticated identity.

    Args:
        access_token: Raw access token (may be None)
        token_service: Token verifier
        session_store: Session cache

    Returns:
        AuthContext: Identity built from the cached session record

    Raises:
        UnauthenticatedError: No token supplied
        InvalidTokenError: Signature or expiry check failed
        SessionExpiredError: Token is valid but no session exists
    """
    if not access_token:
        raise UnauthenticatedError()

    payload = token_service.verify_access_token(access_token)
    user_id = payload.get("id")
    if not user_id:
        raise UnauthenticatedError()

    record = await session_store.get_session(user_id)
    if record is None:
        logger.info(f"No session for user: {user_id}")
        raise SessionExpiredError()

    return AuthContext.from_record(record)


async def get_auth_context(
    request: Request,
    token_service: TokenService = Depends(get_tokens),
    session_store: SessionStore = Depends(get_session_store),
) -> AuthContext:
    """FastAPI dependency returning the authenticated identity."""
    context = await authenticate_request(extract_token(request), token_service, session_store)
    user_id_var.set(context.user_id)
    request.state.user_id = context.user_id
    return context


def authorize_roles(*roles: str) -> Callable:
    """
    Build a dependency that only lets the given roles through.

    Usage:
        @router.post("/courses")
        async def create(context: AuthContext = Depends(authorize_roles("admin"))):
            ...
    """

    async def role_checker(context: AuthContext = Depends(get_auth_context)) -> AuthContext:
        if not context.has_role(*roles):
            logger.warning(f"Role {context.role} denied for user: {context.user_id}")
            raise ForbiddenError(
                f"Role {context.role} is not allowed to access this resource",
                role=context.role,
                user_id=context.user_id,
            )
        return context

    return role_checker


# =========================================================================
# COOKIES
# =========================================================================

def set_token_cookies(response: Response, access_token: str, refresh_token: str) -> None:
    """Attach both tokens as http-only cookies."""
    settings = get_settings()
    common = {
        "httponly": True,
        "samesite": "lax",
        "secure": settings.is_production,
    }
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        access_token,
        max_age=settings.access_token_expire_seconds,
        **common,
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        refresh_token,
        max_age=settings.refresh_token_expire_seconds,
        **common,
    )


def clear_token_cookies(response: Response) -> None:
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    response.delete_cookie(REFRESH_TOKEN_COOKIE)
