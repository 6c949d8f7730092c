# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation): 
# This file defines all the special error types our e-learning app uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary): 
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization into the {success: false, message} response shape.
# 🔗 Dependencies: 
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From: 
# All modules for error handling, error handling middleware, API endpoints, domain services

from typing import Any, Dict, Optional
from fastapi import status


class ELearningException(Exception):
    """
    Base exception class for the E-Learning application.
    All custom exceptions should inherit from this class.
    """
    
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the API error body."""
        return {
            "success": False,
            "message": self.message,
        }


# =============================================================================
# VALIDATION EXCEPTIONS
# =============================================================================

class ValidationError(ELearningException):
    """
    Exception raised for data validation failures.
    Used for malformed or missing fields.
    """
    
    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if field:
            details["field"] = field
        
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class InvalidIdError(ValidationError):
    """
    Raised when an embedded document identifier is malformed or does not
    match any entry in the owning aggregate.
    """
    
    def __init__(self, field: str):
        super().__init__(message=f"Invalid {field}", field=field)
        self.error_code = "INVALID_ID"


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(ELearningException):
    """
    Exception raised for authentication failures.
    Used when tokens, sessions or credentials are missing or invalid.
    """
    
    default_message = "Authentication failed"
    default_code = "AUTHENTICATION_ERROR"
    
    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None
    ):
        if not details:
            details = {}
        if user_id:
            details["user_id"] = user_id
            
        super().__init__(
            message=message or self.default_message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code=self.default_code
        )


class UnauthenticatedError(AuthenticationError):
    """No access token was supplied with the request."""
    default_message = "Please login to access this resource"
    default_code = "UNAUTHENTICATED"


class InvalidTokenError(AuthenticationError):
    """Token signature or expiry check failed."""
    default_message = "Invalid access token"
    default_code = "INVALID_TOKEN"


class InvalidRefreshTokenError(AuthenticationError):
    default_message = "Could not refresh token"
    default_code = "INVALID_REFRESH_TOKEN"


class SessionExpiredError(AuthenticationError):
    """Token is valid but the session cache holds no entry for its user."""
    default_message = "Please login to access this resource"
    default_code = "SESSION_EXPIRED"


class CodeMismatchError(AuthenticationError):
    default_message = "Invalid activation code"
    default_code = "CODE_MISMATCH"


class InvalidCredentialsError(AuthenticationError):
    default_message = "Invalid email or password"
    default_code = "INVALID_CREDENTIALS"


class ForbiddenError(ELearningException):
    """
    Exception raised for authorization failures.
    Used when the authenticated user lacks the role or enrollment required.
    """
    
    def __init__(
        self,
        message: str = "Access denied",
        role: Optional[str] = None,
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if role:
            details["role"] = role
        if user_id:
            details["user_id"] = user_id
        
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="FORBIDDEN"
        )


# =============================================================================
# RESOURCE EXCEPTIONS
# =============================================================================

class NotFoundError(ELearningException):
    """
    Exception raised when requested resource is not found.
    """
    
    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        status_code: int = status.HTTP_404_NOT_FOUND,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id
        
        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code="NOT_FOUND"
        )


class ConflictError(ELearningException):
    """
    Exception raised when attempting to create duplicate resources.
    Used for duplicate emails and unique key violations.
    """
    
    def __init__(
        self,
        message: str = "Resource already exists",
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        
        if field:
            details["field"] = field
        if value:
            details["value"] = value
        
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="CONFLICT"
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class UpstreamError(ELearningException):
    """
    Exception raised when an external collaborator (email, image host) fails.
    """
    
    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if service:
            details["service"] = service
        
        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code="UPSTREAM_ERROR"
        )


class EmailDeliveryError(UpstreamError):
    """Raised when a transactional email cannot be rendered or sent."""
    
    def __init__(self, message: str = "Email delivery failed", status_code: int = 500):
        super().__init__(message=message, service="email", status_code=status_code)


class ImageStorageError(UpstreamError):
    """Raised when the image host rejects an upload or delete."""
    
    def __init__(self, message: str = "Image storage failed", status_code: int = 500):
        super().__init__(message=message, service="image_storage", status_code=status_code)
