"""
Cache infrastructure: Redis client lifecycle, session store and course cache.
"""

from .redis_client import init_redis, close_redis, check_redis_health
from .session_store import SessionStore, CourseCache

__all__ = [
    "init_redis",
    "close_redis",
    "check_redis_health",
    "SessionStore",
    "CourseCache",
]
