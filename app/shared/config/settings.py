# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and provides them to the rest of our e-learning app in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Database, cache, storage and email clients
# - Token service and session store
# - All modules requiring configuration

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )
    
    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    
    APP_NAME: str = Field(default="E-Learning API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Course selling and e-learning platform backend",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")
    
    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    
    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")
    
    # =========================================================================
    # DATABASE SETTINGS
    # =========================================================================
    
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URL"
    )
    MONGODB_DB_NAME: str = Field(default="elearning", description="MongoDB database name")
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        default=5000,
        description="MongoDB server selection timeout (ms)"
    )
    
    # =========================================================================
    # REDIS SETTINGS
    # =========================================================================
    
    REDIS_URL: str = Field(default="redis://localhost:6379/0", description="Redis URL")
    REDIS_MAX_CONNECTIONS: int = Field(default=20, description="Redis connection pool size")
    
    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================
    
    ACTIVATION_SECRET: str = Field(..., description="Activation token signing secret")
    ACCESS_TOKEN_SECRET: str = Field(..., description="Access token signing secret")
    REFRESH_TOKEN_SECRET: str = Field(..., description="Refresh token signing secret")
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    ACTIVATION_TOKEN_EXPIRE_MINUTES: int = Field(
        default=5,
        description="Activation token expiration (minutes)"
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=5,
        description="Access token expiration (minutes)"
    )
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(
        default=3,
        description="Refresh token expiration (days)"
    )
    SESSION_TTL_SECONDS: Optional[int] = Field(
        default=None,
        description="Session cache TTL; defaults to the refresh token lifetime, 0 disables expiry"
    )
    BCRYPT_ROUNDS: int = Field(default=10, description="BCrypt hash rounds")
    PASSWORD_MIN_LENGTH: int = Field(default=6, description="Minimum password length")
    
    # CORS settings
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")
    
    # =========================================================================
    # SUPABASE STORAGE SETTINGS
    # =========================================================================
    
    SUPABASE_URL: Optional[str] = Field(None, description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(None, description="Supabase service role key")
    SUPABASE_STORAGE_BUCKET: str = Field(
        default="elearning-media",
        description="Supabase storage bucket for avatars and thumbnails"
    )
    
    # =========================================================================
    # EMAIL SETTINGS
    # =========================================================================
    
    SENDGRID_API_KEY: Optional[str] = Field(None, description="SendGrid API key")
    MAIL_FROM_EMAIL: str = Field(
        default="noreply@elearning.app",
        description="Sender address for transactional email"
    )
    MAIL_FROM_NAME: str = Field(
        default="E-Learning",
        description="Sender display name for transactional email"
    )
    
    # =========================================================================
    # VALIDATORS
    # =========================================================================
    
    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()
    
    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()
    
    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()
    
    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Validate JWT algorithm."""
        allowed_algorithms = ["HS256", "HS384", "HS512"]
        if v not in allowed_algorithms:
            raise ValueError(f"JWT algorithm must be one of {allowed_algorithms}")
        return v
    
    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v
    
    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    
    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]
    
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"
    
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == "production"
    
    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.ENVIRONMENT == "test"
    
    @property
    def access_token_expire_seconds(self) -> int:
        return self.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    
    @property
    def refresh_token_expire_seconds(self) -> int:
        return self.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60
    
    @property
    def session_ttl(self) -> Optional[int]:
        """
        Session cache TTL in seconds.
        
        Falls back to the refresh token lifetime so a session never outlives
        the token that can renew it. Returns None when expiry is disabled.
        """
        if self.SESSION_TTL_SECONDS is None:
            return self.refresh_token_expire_seconds
        if self.SESSION_TTL_SECONDS <= 0:
            return None
        return self.SESSION_TTL_SECONDS
    
    @property
    def storage_enabled(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.
    
    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.
    
    Returns:
        Settings: Application settings instance
    """
    return Settings()
