# 📄 File: app/shared/config/redis.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for our Redis cache, which remembers who is logged in and keeps
# copies of course pages so they load faster.
#
# 🧪 Purpose (Technical Summary):
# Redis configuration with connection pooling, cache key patterns and
# environment-specific settings for session storage and course caching.
#
# 🔗 Dependencies:
# - redis Python package (redis.asyncio)
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.cache.redis_client
# - app.shared.infrastructure.cache.session_store

import json
from typing import Any, Dict

import redis.asyncio as redis
from redis.asyncio import ConnectionPool, Redis

from .settings import Settings, get_settings


# =============================================================================
# REDIS CONFIGURATION CLASS
# =============================================================================

class RedisConfig:
    """Redis configuration class with connection pool options."""
    
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
    
    @property
    def redis_url(self) -> str:
        """Get Redis connection URL."""
        return self.settings.REDIS_URL
    
    @property
    def connection_kwargs(self) -> Dict[str, Any]:
        """Get Redis connection configuration."""
        
        base_config = {
            "encoding": "utf-8",
            "decode_responses": True,
            "health_check_interval": 30,
        }
        
        # Environment-specific configurations
        if self.settings.is_production:
            base_config.update({
                "socket_timeout": 5.0,
                "socket_connect_timeout": 5.0,
                "socket_keepalive": True,
            })
        elif self.settings.is_development:
            base_config.update({
                "socket_timeout": 10.0,
                "socket_connect_timeout": 10.0,
            })
        
        return base_config
    
    @property
    def pool_kwargs(self) -> Dict[str, Any]:
        """Get Redis connection pool configuration."""
        return {
            "max_connections": self.settings.REDIS_MAX_CONNECTIONS,
            **self.connection_kwargs
        }
    
    def create_connection_pool(self) -> ConnectionPool:
        """Create Redis connection pool."""
        return ConnectionPool.from_url(self.redis_url, **self.pool_kwargs)
    
    def create_redis_client(self) -> Redis:
        """Create Redis client with its own connection pool."""
        return redis.Redis(connection_pool=self.create_connection_pool())


# =============================================================================
# CACHE CONFIGURATION
# =============================================================================

class CacheConfig:
    """Cache key patterns."""
    
    # Sessions are keyed by the bare user id; course detail keys are prefixed.
    ALL_COURSES_KEY = "allCourses"
    
    KEY_PATTERNS = {
        "user_session": "{user_id}",
        "course_detail": "course:{course_id}",
        "course_list": ALL_COURSES_KEY,
    }
    
    @classmethod
    def get_cache_key(cls, pattern_name: str, **kwargs) -> str:
        """
        Generate cache key from pattern and parameters.
        
        Args:
            pattern_name: Name of the key pattern
            **kwargs: Parameters to substitute in the pattern
            
        Returns:
            Formatted cache key string
        """
        if pattern_name not in cls.KEY_PATTERNS:
            raise ValueError(f"Unknown cache key pattern: {pattern_name}")
        
        pattern = cls.KEY_PATTERNS[pattern_name]
        try:
            return pattern.format(**kwargs)
        except KeyError as e:
            raise ValueError(f"Missing parameter {e} for pattern {pattern_name}")


# =============================================================================
# REDIS UTILITIES
# =============================================================================

class RedisUtils:
    """Utility functions for Redis values."""
    
    @staticmethod
    def serialize_value(value: Any) -> str:
        """
        Serialize Python object to JSON string for Redis storage.
        
        Args:
            value: Python object to serialize
            
        Returns:
            JSON string representation
        """
        try:
            return json.dumps(value, default=str)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot serialize value: {e}")
    
    @staticmethod
    def deserialize_value(value: str | None) -> Any:
        """
        Deserialize JSON string from Redis to Python object.
        
        Args:
            value: JSON string from Redis
            
        Returns:
            Deserialized Python object, or None when the key was absent
        """
        if value is None:
            return None
        return json.loads(value)
