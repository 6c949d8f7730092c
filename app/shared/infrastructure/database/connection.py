# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens and closes the connection to the database that keeps our users and courses,
# and can tell the health check whether the database is reachable.
#
# 🧪 Purpose (Technical Summary):
# MongoDB connection lifecycle (pymongo asyncio client): explicit init/close tied to
# application startup/shutdown, index creation and health checks. The client is
# returned to the caller and injected downstream, never held in module state.
#
# 🔗 Dependencies:
# - pymongo (AsyncMongoClient, errors)
# - app/shared/config/database.py (client configuration)
#
# 🔄 Connected Modules / Calls From:
# - app/main.py (lifespan)
# - app/shared/core/dependencies.py (database injection)
# - app/api/v1/health.py (readiness probe)

import logging
from typing import Any, Dict, Optional

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.shared.config.database import DatabaseConfig, USERS_COLLECTION
from app.shared.config.settings import Settings

logger = logging.getLogger(__name__)


async def init_database(settings: Optional[Settings] = None) -> AsyncMongoClient:
    """
    Create the MongoDB client and make sure required indexes exist.
    
    Args:
        settings: Application settings (defaults to cached settings)
        
    Returns:
        AsyncMongoClient: Connected client
    """
    config = DatabaseConfig(settings)
    client = config.create_client()
    database = client[config.database_name]
    
    try:
        await database[USERS_COLLECTION].create_index(
            [("email", ASCENDING)], unique=True, name="email_unique"
        )
    except PyMongoError as e:
        await client.close()
        logger.error(f"Database initialization failed: {e}")
        raise
    
    logger.info(f"MongoDB connected: database '{config.database_name}'")
    return client


async def close_database(client: Optional[AsyncMongoClient]) -> None:
    """Close the MongoDB client."""
    if client is not None:
        await client.close()
        logger.info("MongoDB connection closed")


def get_database(client: AsyncMongoClient, settings: Optional[Settings] = None) -> AsyncDatabase:
    """Get the application database from a client."""
    return client[DatabaseConfig(settings).database_name]


async def check_database_health(client: AsyncMongoClient) -> Dict[str, Any]:
    """
    Check MongoDB connectivity.
    
    Returns:
        Dict containing database health status
    """
    try:
        await client.admin.command("ping")
        return {"status": "healthy"}
    except PyMongoError as e:
        return {
            "status": "unhealthy",
            "error": str(e),
            "type": type(e).__name__,
        }
