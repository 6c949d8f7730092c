# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation): 
# This file organizes the helpers that wrap every request to our API - checking who is calling,
# keeping a log of what happened, and turning errors into clear messages.
# 🧪 Purpose (Technical Summary): 
# Package initialization for API middleware and request-level dependencies: authentication,
# role authorization, request logging and centralized error translation.
# 🔗 Dependencies: 
# FastAPI, starlette, app.shared.core
# 🔄 Connected Modules / Calls From: 
# app.main.py, module routers

"""
E-Learning API Middleware Package

Components:
    - get_auth_context / authorize_roles: Authentication and role dependencies
    - RequestLoggingMiddleware: HTTP request and response logging
    - ErrorHandlingMiddleware: Catch-all for unexpected errors
    - register_exception_handlers: Translation of known errors

Middleware Stack Order (applied in reverse order):
    1. ErrorHandlingMiddleware (outermost - catches all errors)
    2. RequestLoggingMiddleware (logs all requests/responses)
    3. CORSMiddleware
    4. Application Routes (innermost)
"""

from .authentication import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    authenticate_request,
    authorize_roles,
    clear_token_cookies,
    extract_token,
    get_auth_context,
    set_token_cookies,
)
from .error_handling import ErrorHandlingMiddleware, register_exception_handlers, translate_exception
from .logging import RequestLoggingMiddleware

__all__ = [
    "ACCESS_TOKEN_COOKIE",
    "REFRESH_TOKEN_COOKIE",
    "authenticate_request",
    "authorize_roles",
    "clear_token_cookies",
    "extract_token",
    "get_auth_context",
    "set_token_cookies",
    "ErrorHandlingMiddleware",
    "register_exception_handlers",
    "translate_exception",
    "RequestLoggingMiddleware",
]
