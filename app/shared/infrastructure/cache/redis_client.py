# 📄 File: app/shared/infrastructure/cache/redis_client.py
#
# 🧭 Purpose (Layman Explanation):
# Opens and closes the connection to our Redis cache when the app starts and stops.
#
# 🧪 Purpose (Technical Summary):
# Redis client lifecycle (redis.asyncio) with explicit init/close functions used by
# the application lifespan, plus a health probe. The client is injected, not global.
#
# 🔗 Dependencies:
# - redis (redis.asyncio)
# - app.shared.config.redis
#
# 🔄 Connected Modules / Calls From:
# - app/main.py (lifespan)
# - app/api/v1/health.py

import logging
from typing import Any, Dict, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.shared.config.redis import RedisConfig
from app.shared.config.settings import Settings

logger = logging.getLogger(__name__)


async def init_redis(settings: Optional[Settings] = None) -> Redis:
    """
    Create the Redis client and verify connectivity.
    
    Returns:
        Redis: Connected client
    """
    client = RedisConfig(settings).create_redis_client()
    await client.ping()
    logger.info("Redis connected")
    return client


async def close_redis(client: Optional[Redis]) -> None:
    """Close the Redis client and its connection pool."""
    if client is not None:
        await client.aclose()
        logger.info("Redis connection closed")


async def check_redis_health(client: Redis) -> Dict[str, Any]:
    """
    Check Redis connectivity.
    
    Returns:
        Dict containing Redis health status
    """
    try:
        ping_result = await client.ping()
        return {
            "status": "healthy",
            "ping": ping_result,
        }
    except RedisError as e:
        return {
            "status": "unhealthy",
            "error": str(e),
            "type": type(e).__name__,
        }
