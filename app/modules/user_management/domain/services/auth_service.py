# 📄 File: app/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation): 
# Handles signing up with an emailed activation code, logging in and out, social login,
# and quietly renewing a user's login when their short-lived pass runs out
# 🧪 Purpose (Technical Summary): 
# Domain service implementing registration/activation, credential login, session
# creation in the cache, logout and refresh-token rotation
# 🔗 Dependencies: 
# Domain models, repositories, app.shared.core.security, session store, notifications
# 🔄 Connected Modules / Calls From: 
# API auth endpoints, refresh dependency in app.api.middleware.authentication

import logging
from dataclasses import dataclass
from typing import Optional

from ..models.user import User
from ..repositories.user_repository import UserRepository
from app.shared.core.auth_context import AuthContext
from app.shared.core.exceptions import (
    ConflictError,
    EmailDeliveryError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidTokenError,
    SessionExpiredError,
    ValidationError,
)
from app.shared.core.security import ActivationTicket, PasswordHasher, TokenService
from app.shared.infrastructure.cache.session_store import SessionStore
from app.shared.infrastructure.email.notifications import NotificationDispatcher
from app.shared.infrastructure.storage.image_storage import StoredImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class LoginResult:
    user: User
    tokens: TokenPair


@dataclass(frozen=True)
class RefreshResult:
    context: AuthContext
    tokens: TokenPair


class AuthService:
    """
    Domain service for authentication and session lifecycle.
    
    Business rules:
    - Registration is not persisted until the emailed code is confirmed
    - Activation codes expire with their token (5 minutes by default)
    - Every successful login stores the user's public record in the session cache
    - Refreshing rotates BOTH tokens, never just the access token
    """
    
    def __init__(
        self,
        user_repository: UserRepository,
        token_service: TokenService,
        password_hasher: PasswordHasher,
        session_store: SessionStore,
        notifications: NotificationDispatcher,
    ):
        self.user_repository = user_repository
        self.token_service = token_service
        self.password_hasher = password_hasher
        self.session_store = session_store
        self.notifications = notifications
    
    # =========================================================================
    # REGISTRATION
    # =========================================================================
    
    async def register(self, name: str, email: str, password: str) -> ActivationTicket:
        """
        Start a registration by emailing an activation code.
        
        Args:
            name: Display name
            email: Email address (must not be registered yet)
            password: Plain text password (hashed only at activation)
            
        Returns:
            ActivationTicket: activation token for the client, plus the code
            
        Raises:
            ConflictError: If the email is already registered
            EmailDeliveryError: If the activation email cannot be sent
        """
        email = email.strip().lower()
        logger.info(f"Registration requested for: {email}")
        
        if await self.user_repository.exists_by_email(email):
            raise ConflictError("Email already exists", field="email", value=email)
        
        ticket = self.token_service.issue_activation_token(
            {"name": name, "email": email, "password": password}
        )
        
        try:
            await self.notifications.send_activation_email(email, name, ticket.activation_code)
        except EmailDeliveryError as e:
            raise EmailDeliveryError(e.message, status_code=400) from e
        
        return ticket
    
    async def activate(self, activation_token: str, activation_code: str) -> User:
        """
        Confirm a registration and create the user.
        
        Raises:
            InvalidTokenError: If the token is tampered with or expired
            CodeMismatchError: If the code is wrong
            ConflictError: If the email was registered in the meantime
        """
        candidate = self.token_service.verify_activation_token(activation_token, activation_code)
        email = candidate["email"]
        
        if await self.user_repository.exists_by_email(email):
            raise ConflictError("Email already exists", field="email", value=email)
        
        user = User(
            name=candidate["name"],
            email=email,
            password=self.password_hasher.hash(candidate["password"]),
            is_verified=True,
        )
        created = await self.user_repository.create(user)
        logger.info(f"User activated: {created.id}")
        return created
    
    # =========================================================================
    # LOGIN / LOGOUT
    # =========================================================================
    
    async def _start_session(self, user: User) -> TokenPair:
        tokens = TokenPair(
            access_token=self.token_service.issue_access_token(user.id),
            refresh_token=self.token_service.issue_refresh_token(user.id),
        )
        await self.session_store.create_session(user.id, user.public_record())
        return tokens
    
    async def login(self, email: str, password: str) -> LoginResult:
        """
        Authenticate with email and password and open a session.
        
        Raises:
            ValidationError: If email or password is missing
            InvalidCredentialsError: If the email is unknown or the password wrong
        """
        if not email or not password:
            raise ValidationError("Please enter email and password")
        
        user = await self.user_repository.get_by_email(email, include_password=True)
        if user is None:
            logger.warning(f"Login failed - unknown email: {email}")
            raise InvalidCredentialsError()
        
        if not self.password_hasher.verify(password, user.password):
            logger.warning(f"Login failed - wrong password for user: {user.id}")
            raise InvalidCredentialsError()
        
        user.password = None
        tokens = await self._start_session(user)
        logger.info(f"User logged in: {user.id}")
        return LoginResult(user=user, tokens=tokens)
    
    async def social_auth(self, email: str, name: str, avatar: Optional[str] = None) -> LoginResult:
        """
        Log in a user authenticated by an external provider, creating the
        account on first sight.
        """
        user = await self.user_repository.get_by_email(email)
        if user is None:
            user = await self.user_repository.create(User(
                name=name,
                email=email,
                avatar=StoredImage(public_id="", url=avatar) if avatar else None,
                is_verified=True,
            ))
            logger.info(f"User created from social login: {user.id}")
        
        tokens = await self._start_session(user)
        return LoginResult(user=user, tokens=tokens)
    
    async def logout(self, context: AuthContext) -> None:
        """Drop the session. Safe to call when it is already gone."""
        await self.session_store.destroy_session(context.user_id)
        logger.info(f"User logged out: {context.user_id}")
    
    # =========================================================================
    # TOKEN ROTATION
    # =========================================================================
    
    async def update_access_token(self, refresh_token: Optional[str]) -> RefreshResult:
        """
        Exchange a refresh token for a new access/refresh token pair.
        
        Raises:
            InvalidRefreshTokenError: If the refresh token is missing, tampered or expired
            SessionExpiredError: If the session is no longer cached
        """
        if not refresh_token:
            raise InvalidRefreshTokenError()
        
        try:
            payload = self.token_service.verify_refresh_token(refresh_token)
        except InvalidTokenError as e:
            raise InvalidRefreshTokenError() from e
        
        user_id = payload.get("id")
        if not user_id:
            raise InvalidRefreshTokenError()
        
        record = await self.session_store.get_session(user_id)
        if record is None:
            raise SessionExpiredError("Please login for access this resources!")
        
        tokens = TokenPair(
            access_token=self.token_service.issue_access_token(user_id),
            refresh_token=self.token_service.issue_refresh_token(user_id),
        )
        # Re-store so the session TTL follows the new refresh token
        await self.session_store.create_session(user_id, record)
        
        logger.info(f"Tokens rotated for user: {user_id}")
        return RefreshResult(context=AuthContext.from_record(record), tokens=tokens)
