"""
Core utilities package for the E-Learning application.
Provides security, identity and the exception hierarchy.
"""

from .auth_context import AuthContext

from .security import (
    ActivationTicket,
    PasswordHasher,
    TokenService,
    get_password_hasher,
    get_token_service,
)

from .exceptions import (
    ELearningException,
    AuthenticationError,
    UnauthenticatedError,
    InvalidTokenError,
    InvalidRefreshTokenError,
    SessionExpiredError,
    CodeMismatchError,
    InvalidCredentialsError,
    ForbiddenError,
    ValidationError,
    InvalidIdError,
    NotFoundError,
    ConflictError,
    UpstreamError,
    EmailDeliveryError,
    ImageStorageError,
)

__all__ = [
    # Identity
    "AuthContext",
    
    # Security
    "ActivationTicket",
    "PasswordHasher",
    "TokenService",
    "get_password_hasher",
    "get_token_service",
    
    # Exceptions
    "ELearningException",
    "AuthenticationError",
    "UnauthenticatedError",
    "InvalidTokenError",
    "InvalidRefreshTokenError",
    "SessionExpiredError",
    "CodeMismatchError",
    "InvalidCredentialsError",
    "ForbiddenError",
    "ValidationError",
    "InvalidIdError",
    "NotFoundError",
    "ConflictError",
    "UpstreamError",
    "EmailDeliveryError",
    "ImageStorageError",
]
