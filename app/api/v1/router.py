# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation): 
# This file acts like a traffic director for all API version 1 requests, sending account requests
# to the user handlers and course requests to the course handlers.
# 🧪 Purpose (Technical Summary): 
# Main API v1 router aggregation combining the health, user management and course management routers.
# 🔗 Dependencies: 
# FastAPI, app.api.v1.health, module presentation routers
# 🔄 Connected Modules / Calls From: 
# app.main.py

import logging

from fastapi import APIRouter

from .health import health_router
from app.modules.course_management.presentation.api.v1.courses import courses_router
from app.modules.user_management.presentation.api import create_user_management_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])
api_v1_router.include_router(create_user_management_router())
api_v1_router.include_router(courses_router, tags=["Courses"])
