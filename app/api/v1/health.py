# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation): 
# This file provides health check endpoints that tell us if the e-learning API is working properly,
# like a quick checkup making sure the database and cache are reachable.
# 🧪 Purpose (Technical Summary): 
# Liveness and readiness endpoints. Readiness pings MongoDB and Redis through the clients
# held on app.state.
# 🔗 Dependencies: 
# FastAPI, app.shared.infrastructure (database, cache), datetime
# 🔄 Connected Modules / Calls From: 
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.cache.redis_client import check_redis_health
from app.shared.infrastructure.database.connection import check_database_health

logger = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get("/health",
                  summary="Basic Health Check",
                  description="Basic health check endpoint for load balancers and monitoring")
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint
    
    Returns simple OK status without touching any dependency.
    """
    settings = get_settings()
    return JSONResponse(
        status_code=200,
        content={
            "success": True,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }
    )


@health_router.get("/health/ready",
                  summary="Readiness Probe",
                  description="Checks database and cache connectivity")
async def readiness_probe(request: Request) -> JSONResponse:
    """
    Readiness probe
    
    Returns 200 when both MongoDB and Redis answer a ping, 503 otherwise.
    """
    mongo_client = getattr(request.app.state, "mongo_client", None)
    redis_client = getattr(request.app.state, "redis", None)
    
    checks: Dict[str, Any] = {
        "database": (
            await check_database_health(mongo_client)
            if mongo_client is not None else {"status": "not_configured"}
        ),
        "cache": (
            await check_redis_health(redis_client)
            if redis_client is not None else {"status": "not_configured"}
        ),
    }
    ready = all(check["status"] == "healthy" for check in checks.values())
    
    if not ready:
        logger.warning(f"Readiness check failed: {checks}")
    
    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "success": ready,
            "status": "ready" if ready else "not_ready",
            "checks": checks,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )
