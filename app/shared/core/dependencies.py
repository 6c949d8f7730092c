"""
Common FastAPI dependencies for the E-Learning application.
Resolves the clients created at startup (stored on app.state) and builds the
shared services around them.
"""

import logging

from fastapi import Request
from pymongo.asynchronous.database import AsyncDatabase
from redis.asyncio import Redis

from .security import PasswordHasher, TokenService, get_password_hasher, get_token_service
from ..config.settings import get_settings
from ..infrastructure.cache.session_store import CourseCache, SessionStore
from ..infrastructure.database.connection import get_database
from ..infrastructure.email.notifications import NotificationDispatcher
from ..infrastructure.storage.image_storage import ImageStorage

logger = logging.getLogger(__name__)

# =========================================================================
# CLIENTS
# =========================================================================

def get_redis(request: Request) -> Redis:
    """Redis client opened in the application lifespan."""
    return request.app.state.redis

def get_db(request: Request) -> AsyncDatabase:
    """Application database on the Mongo client opened in the lifespan."""
    return get_database(request.app.state.mongo_client)

# =========================================================================
# SERVICES
# =========================================================================

def get_session_store(request: Request) -> SessionStore:
    return SessionStore(get_redis(request), ttl=get_settings().session_ttl)

def get_course_cache(request: Request) -> CourseCache:
    return CourseCache(get_redis(request))

def get_tokens() -> TokenService:
    return get_token_service()

def get_hasher() -> PasswordHasher:
    return get_password_hasher()

def get_notifications(request: Request) -> NotificationDispatcher:
    """Notification dispatcher over the mailer created at startup."""
    return NotificationDispatcher(request.app.state.mailer)

def get_image_storage(request: Request) -> ImageStorage:
    return request.app.state.image_storage
