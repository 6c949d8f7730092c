# 📄 File: app/shared/infrastructure/cache/session_store.py
#
# 🧭 Purpose (Layman Explanation):
# Remembers who is logged in (a "session" per user) and keeps quick copies of
# course pages so we don't have to ask the database every time.
#
# 🧪 Purpose (Technical Summary):
# Session cache keyed by user id holding the serialized user record, and a course
# read cache with explicit invalidation. Both sit on an injected redis.asyncio client.
#
# 🔗 Dependencies:
# - redis (redis.asyncio)
# - app.shared.config.redis (key patterns, JSON serialization)
#
# 🔄 Connected Modules / Calls From:
# - app.api.middleware.authentication (session lookup)
# - user_management AuthService/UserService (session create/refresh/destroy)
# - course_management CourseService (cached reads)

import logging
from typing import Any, Dict, Optional

from redis.asyncio import Redis

from app.shared.config.redis import CacheConfig, RedisUtils

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Session cache: user id -> serialized user record.
    
    Entries are written at login, activation-free social login, profile and
    password updates and token refresh, and removed at logout.
    """
    
    def __init__(self, redis: Redis, ttl: Optional[int] = None):
        self._redis = redis
        self._ttl = ttl
    
    @staticmethod
    def _key(user_id: str) -> str:
        return CacheConfig.get_cache_key("user_session", user_id=user_id)
    
    async def create_session(self, user_id: str, user_record: Dict[str, Any]) -> None:
        """Store (or replace) the session for a user."""
        await self._redis.set(
            self._key(user_id),
            RedisUtils.serialize_value(user_record),
            ex=self._ttl,
        )
        logger.debug(f"Session stored for user: {user_id}")
    
    async def get_session(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Return the cached user record, or None when no session exists."""
        raw = await self._redis.get(self._key(user_id))
        return RedisUtils.deserialize_value(raw)
    
    async def destroy_session(self, user_id: str) -> None:
        """Remove the session. Missing keys are ignored."""
        await self._redis.delete(self._key(user_id))
        logger.debug(f"Session destroyed for user: {user_id}")


class CourseCache:
    """Read-through cache for course detail and list projections."""
    
    def __init__(self, redis: Redis):
        self._redis = redis
    
    @staticmethod
    def course_key(course_id: str) -> str:
        return CacheConfig.get_cache_key("course_detail", course_id=course_id)
    
    @staticmethod
    def list_key() -> str:
        return CacheConfig.get_cache_key("course_list")
    
    async def get_cached(self, key: str) -> Any:
        value = RedisUtils.deserialize_value(await self._redis.get(key))
        logger.debug(f"Course cache {'hit' if value is not None else 'miss'}: {key}")
        return value
    
    async def set_cached(self, key: str, value: Any) -> None:
        await self._redis.set(key, RedisUtils.serialize_value(value))
    
    async def invalidate(self, *keys: str) -> None:
        if keys:
            await self._redis.delete(*keys)
            logger.debug(f"Course cache invalidated: {', '.join(keys)}")
