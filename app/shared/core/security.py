"""
Security utilities for JWT issuance/validation and password hashing.
Provides the token service used by registration, login and the auth middleware.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional
from uuid import uuid4

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from ..config.settings import Settings, get_settings
from .exceptions import CodeMismatchError, InvalidTokenError

logger = logging.getLogger(__name__)

EXPIRED_TOKEN_MESSAGE = "Json Web Token is expired, try again"
INVALID_TOKEN_MESSAGE = "Json Web Token is invalid, try again"


@dataclass(frozen=True)
class ActivationTicket:
    """Signed activation token and the one-time code embedded in it."""
    token: str
    activation_code: str


class TokenService:
    """
    Issues and verifies the three kinds of signed tokens used by the API.
    
    - Activation tokens carry a pending registration plus a 4-digit code.
    - Access tokens carry {"id": user_id} and live for minutes.
    - Refresh tokens carry {"id": user_id} and live for days.
    
    Each kind is signed with its own secret, so a token of one kind can never
    be accepted where another is expected.
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.algorithm = self.settings.JWT_ALGORITHM
        self.activation_secret = self.settings.ACTIVATION_SECRET
        self.access_secret = self.settings.ACCESS_TOKEN_SECRET
        self.refresh_secret = self.settings.REFRESH_TOKEN_SECRET
        self.activation_expire = timedelta(minutes=self.settings.ACTIVATION_TOKEN_EXPIRE_MINUTES)
        self.access_expire = timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self.refresh_expire = timedelta(days=self.settings.REFRESH_TOKEN_EXPIRE_DAYS)
    
    def _sign(self, data: Dict[str, Any], secret: str, expires_delta: timedelta) -> str:
        now = datetime.now(timezone.utc)
        to_encode = data.copy()
        to_encode.update({
            "iat": now,
            "exp": now + expires_delta,
            "jti": uuid4().hex,
        })
        return jwt.encode(to_encode, secret, algorithm=self.algorithm)
    
    # =========================================================================
    # ACTIVATION TOKENS
    # =========================================================================
    
    @staticmethod
    def generate_activation_code() -> str:
        """Random 4-digit code in the range 1000-9999."""
        return str(1000 + secrets.randbelow(9000))
    
    def issue_activation_token(self, candidate_user: Dict[str, Any]) -> ActivationTicket:
        """
        Sign a pending registration together with a fresh activation code.
        
        Args:
            candidate_user: Registration payload (name, email, password)
            
        Returns:
            ActivationTicket: Signed token and the plain activation code
        """
        activation_code = self.generate_activation_code()
        token = self._sign(
            {"user": candidate_user, "activation_code": activation_code},
            self.activation_secret,
            self.activation_expire,
        )
        logger.debug(f"Activation token issued for: {candidate_user.get('email')}")
        return ActivationTicket(token=token, activation_code=activation_code)
    
    def verify_activation_token(self, token: str, supplied_code: str) -> Dict[str, Any]:
        """
        Verify an activation token and its code.
        
        Args:
            token: Activation token returned at registration
            supplied_code: Code the user received by email
            
        Returns:
            dict: The candidate user embedded in the token
            
        Raises:
            InvalidTokenError: If signature or expiry check fails
            CodeMismatchError: If the code differs from the embedded one
        """
        payload = self.verify_token(token, self.activation_secret)
        
        if payload.get("activation_code") != supplied_code:
            logger.warning("Activation code mismatch")
            raise CodeMismatchError()
        
        return payload["user"]
    
    # =========================================================================
    # SESSION TOKENS
    # =========================================================================
    
    def issue_access_token(self, user_id: str) -> str:
        """Create a short-lived access token for the user."""
        return self._sign({"id": user_id}, self.access_secret, self.access_expire)
    
    def issue_refresh_token(self, user_id: str) -> str:
        """Create a long-lived refresh token for the user."""
        return self._sign({"id": user_id}, self.refresh_secret, self.refresh_expire)
    
    def verify_token(self, token: str, secret: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT.
        
        Args:
            token: JWT token to verify
            secret: Secret the token is expected to be signed with
            
        Returns:
            dict: Decoded token payload
            
        Raises:
            InvalidTokenError: If the signature is bad or the token expired
        """
        try:
            return jwt.decode(token, secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            logger.info(f"JWT expired: {e}")
            raise InvalidTokenError(EXPIRED_TOKEN_MESSAGE) from e
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise InvalidTokenError(INVALID_TOKEN_MESSAGE) from e
    
    def verify_access_token(self, token: str) -> Dict[str, Any]:
        return self.verify_token(token, self.access_secret)
    
    def verify_refresh_token(self, token: str) -> Dict[str, Any]:
        return self.verify_token(token, self.refresh_secret)


class PasswordHasher:
    """bcrypt password hashing via passlib."""
    
    def __init__(self, rounds: Optional[int] = None):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds or get_settings().BCRYPT_ROUNDS,
        )
    
    def hash(self, password: str) -> str:
        """
        Hash password using bcrypt.
        
        Args:
            password: Plain text password
            
        Returns:
            str: Hashed password
        """
        return self._context.hash(password)
    
    def verify(self, plain_password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify password against hash.
        
        Args:
            plain_password: Plain text password
            hashed_password: Stored hashed password
            
        Returns:
            bool: True if password matches
        """
        if not hashed_password:
            return False
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError as e:
            logger.error(f"Password verification error: {e}")
            return False


@lru_cache()
def get_token_service() -> TokenService:
    """
    Get cached token service instance.
    
    Returns:
        TokenService: Singleton token service
    """
    return TokenService()


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    """Get cached password hasher instance."""
    return PasswordHasher()
