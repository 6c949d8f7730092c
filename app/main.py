# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up the e-learning API, connects the database, cache, email
# and image services, and makes sure everything is ready to handle requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point. The lifespan opens every external client once and
# stores it on app.state; request dependencies read them from there. Middleware, exception
# handlers and the v1 router are registered in create_application.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure (database, cache, email, storage)
# - app.api (middleware and routers)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - Test suite (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from app.api.middleware.error_handling import ErrorHandlingMiddleware, register_exception_handlers
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1 import API_V1_PREFIX
from app.api.v1.router import api_v1_router
from app.shared.config.settings import get_settings
from app.shared.config.supabase import SupabaseManager
from app.shared.infrastructure.cache.redis_client import close_redis, init_redis
from app.shared.infrastructure.database.connection import close_database, init_database
from app.shared.infrastructure.email.mailer import Mailer
from app.shared.infrastructure.storage.image_storage import ImageStorage
from app.shared.utils.logging import setup_logging

# Get application settings
settings = get_settings()

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the MongoDB and Redis clients and builds the mailer and image
    storage, exposing them on app.state. Everything is closed on shutdown.
    """
    logger.info("🎓 E-Learning API starting up...")

    app.state.mongo_client = None
    app.state.redis = None

    try:
        app.state.mongo_client = await init_database(settings)
        logger.info("✅ Database connection initialized")

        app.state.redis = await init_redis(settings)
        logger.info("✅ Redis cache initialized")

        app.state.mailer = Mailer(settings)
        app.state.image_storage = ImageStorage(SupabaseManager(settings))
        logger.info("✅ Mail and image storage clients ready")

        logger.info("✅ E-Learning API startup complete")

        yield  # Application is running

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    finally:
        logger.info("🔄 E-Learning API shutting down...")
        await close_redis(app.state.redis)
        await close_database(app.state.mongo_client)
        logger.info("✅ E-Learning API shutdown complete")


def create_application(use_lifespan: bool = True) -> FastAPI:
    """
    Application factory function.

    Args:
        use_lifespan: Attach the lifespan that opens external clients. Tests
            pass False and populate app.state themselves.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan if use_lifespan else None,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # CORS middleware (innermost of the three)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Request logging middleware
    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    # Error handling middleware (added last so it wraps everything)
    app.add_middleware(ErrorHandlingMiddleware)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix=API_V1_PREFIX)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": f"{API_V1_PREFIX}/health",
            "api_base": API_V1_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
