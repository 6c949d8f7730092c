# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to the database that stores our users and courses,
# so every part of the app talks to the same place with the same options.
#
# 🧪 Purpose (Technical Summary):
# MongoDB client configuration (pymongo asyncio driver) with connection pool
# and timeout options derived from environment-specific settings.
#
# 🔗 Dependencies:
# - pymongo (AsyncMongoClient)
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.connection

from typing import Any, Dict

from pymongo import AsyncMongoClient

from .settings import Settings, get_settings


# =============================================================================
# COLLECTION NAMES
# =============================================================================

USERS_COLLECTION = "users"
COURSES_COLLECTION = "courses"


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """MongoDB configuration with environment-specific client options."""
    
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
    
    @property
    def database_url(self) -> str:
        """Get the MongoDB connection URL."""
        return self.settings.MONGODB_URL
    
    @property
    def database_name(self) -> str:
        return self.settings.MONGODB_DB_NAME
    
    @property
    def client_kwargs(self) -> Dict[str, Any]:
        """Get client configuration based on environment."""
        base_config: Dict[str, Any] = {
            "serverSelectionTimeoutMS": self.settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            "appname": f"{self.settings.APP_NAME}_{self.settings.ENVIRONMENT}",
            "tz_aware": True,
        }
        
        if self.settings.is_production:
            base_config.update({
                "maxPoolSize": 50,
                "retryWrites": True,
            })
        else:
            base_config.update({
                "maxPoolSize": 10,
            })
        
        return base_config
    
    def create_client(self) -> AsyncMongoClient:
        """Create a MongoDB client. Connections are opened lazily."""
        return AsyncMongoClient(self.database_url, **self.client_kwargs)
