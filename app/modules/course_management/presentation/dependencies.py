# 📄 File: app/modules/course_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation): 
# Assembles what the course endpoints need for each request - course storage, the catalog cache,
# image uploads and email notifications.
# 🧪 Purpose (Technical Summary): 
# Module-specific FastAPI dependencies building CourseRepositoryImpl, CourseService and
# DiscussionService from the shared clients on app.state.
# 🔗 Dependencies: 
# FastAPI, app.shared.core.dependencies, course management domain and infrastructure
# 🔄 Connected Modules / Calls From: 
# app.modules.course_management.presentation.api.v1.courses

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase

from app.shared.core.dependencies import (
    get_course_cache,
    get_db,
    get_image_storage,
    get_notifications,
)
from app.shared.infrastructure.cache.session_store import CourseCache
from app.shared.infrastructure.email.notifications import NotificationDispatcher
from app.shared.infrastructure.storage.image_storage import ImageStorage

from app.modules.course_management.domain.repositories.course_repository import CourseRepository
from app.modules.course_management.domain.services.course_service import CourseService
from app.modules.course_management.domain.services.discussion_service import DiscussionService
from app.modules.course_management.infrastructure.database.course_repository_impl import CourseRepositoryImpl


def get_course_repository(db: AsyncDatabase = Depends(get_db)) -> CourseRepository:
    return CourseRepositoryImpl(db)


def get_course_service(
    course_repository: CourseRepository = Depends(get_course_repository),
    course_cache: CourseCache = Depends(get_course_cache),
    image_storage: ImageStorage = Depends(get_image_storage),
) -> CourseService:
    return CourseService(
        course_repository=course_repository,
        course_cache=course_cache,
        image_storage=image_storage,
    )


def get_discussion_service(
    course_repository: CourseRepository = Depends(get_course_repository),
    notifications: NotificationDispatcher = Depends(get_notifications),
) -> DiscussionService:
    return DiscussionService(course_repository=course_repository, notifications=notifications)
