# 📄 File: app/modules/course_management/domain/services/course_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for the course catalog - admins create and edit courses, anyone can browse them
# (served from a fast cache), and only enrolled learners can open the lessons.
# 🧪 Purpose (Technical Summary):
# Domain service for course CRUD: thumbnail handling through the image host, cache-first
# reads of the public projection and cache invalidation on every write.
# 🔗 Dependencies:
# Course aggregate, CourseRepository, CourseCache, ImageStorage, AuthContext
# 🔄 Connected Modules / Calls From:
# Course API endpoints

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from ..models.course import ContentItem, Course
from ..repositories.course_repository import CourseRepository
from app.shared.core.auth_context import AuthContext
from app.shared.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.shared.infrastructure.cache.session_store import CourseCache
from app.shared.infrastructure.storage.image_storage import ImageStorage

logger = logging.getLogger(__name__)

THUMBNAIL_FOLDER = "courses"


class CourseService:
    """
    Domain service for the course catalog.

    Business rules:
    - Only admins write (enforced at the route)
    - The catalog cache holds public projections only
    - Any write drops the course's cache entry and the full list entry
    - Lesson content is only served to enrolled users and admins
    """

    def __init__(
        self,
        course_repository: CourseRepository,
        course_cache: CourseCache,
        image_storage: Optional[ImageStorage] = None,
    ):
        self.course_repository = course_repository
        self.course_cache = course_cache
        self.image_storage = image_storage

    async def _load(self, course_id: str) -> Course:
        course = await self.course_repository.get_by_id(course_id)
        if course is None:
            raise NotFoundError("Course not found", resource_type="course", resource_id=course_id)
        return course

    @staticmethod
    def _validate(payload: Dict[str, Any]) -> Course:
        try:
            return Course.model_validate(payload)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error.get("loc", ()))
            raise ValidationError(f"{field}: {error.get('msg', 'Invalid value')}", field=field) from e

    @staticmethod
    def _merge_lessons(existing: List[ContentItem], items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Resolve submitted lessons against the stored ones.

        A lesson whose `_id` matches a stored lesson keeps that id and its
        question thread, with the submitted fields applied on top. Any other
        lesson is new and gets a fresh id.
        """
        stored = {lesson.id: lesson for lesson in existing}
        merged = []
        for item in items:
            item = dict(item)
            lesson_id = item.pop("id", None) or item.pop("_id", None)
            item.pop("questions", None)

            current = stored.get(lesson_id) if lesson_id else None
            if current is None:
                merged.append(item)
            else:
                merged.append({**current.model_dump(by_alias=True), **item})
        return merged

    # =========================================================================
    # WRITES
    # =========================================================================

    async def create_course(self, data: Dict[str, Any]) -> Course:
        """
        Create a course.

        Args:
            data: Course fields; `thumbnail` may be a base64 image

        Returns:
            Course: Created course

        Raises:
            ValidationError: If a field does not fit the course model
        """
        data = dict(data)
        thumbnail = data.pop("thumbnail", None)
        if data.get("course_data"):
            data["course_data"] = self._merge_lessons([], data["course_data"])

        course = self._validate(data)
        if thumbnail:
            course.thumbnail = await self.image_storage.upload(thumbnail, folder=THUMBNAIL_FOLDER)

        course = await self.course_repository.create(course)
        await self.course_cache.invalidate(CourseCache.list_key())

        logger.info(f"Course created: {course.id}")
        return course

    async def edit_course(self, course_id: str, data: Dict[str, Any]) -> Course:
        """
        Update course fields, replacing the thumbnail when a new image is given.

        Lessons sent with the `_id` of a stored lesson are updated in place and
        keep their questions.

        Raises:
            NotFoundError: If the course does not exist
            ValidationError: If a field does not fit the course model
        """
        course = await self._load(course_id)
        data = dict(data)
        thumbnail = data.pop("thumbnail", None)

        if data.get("course_data") is not None:
            data["course_data"] = self._merge_lessons(course.course_data, data["course_data"])

        merged = self._validate({**course.model_dump(by_alias=True), **data})
        changed = set(data) | {"updated_at"}

        if thumbnail:
            if course.thumbnail and course.thumbnail.public_id:
                await self.image_storage.destroy(course.thumbnail.public_id)
            merged.thumbnail = await self.image_storage.upload(thumbnail, folder=THUMBNAIL_FOLDER)
            changed.add("thumbnail")

        merged.touch()
        fields = merged.model_dump(by_alias=True, include=changed)

        updated = await self.course_repository.update_fields(course_id, fields)
        if updated is None:
            raise NotFoundError("Course not found", resource_type="course", resource_id=course_id)

        await self.course_cache.invalidate(
            CourseCache.course_key(course_id),
            CourseCache.list_key(),
        )
        logger.info(f"Course edited: {course_id}")
        return updated

    # =========================================================================
    # READS
    # =========================================================================

    async def get_single_course(self, course_id: str) -> Dict[str, Any]:
        """Public projection of one course, served from cache when present."""
        key = CourseCache.course_key(course_id)
        cached = await self.course_cache.get_cached(key)
        if isinstance(cached, dict) and "course_data" in cached:
            return cached

        course = await self._load(course_id)
        view = course.public_view()
        await self.course_cache.set_cached(key, view)
        return view

    async def get_all_courses(self) -> List[Dict[str, Any]]:
        """Public projections of every course, served from cache when present."""
        key = CourseCache.list_key()
        cached = await self.course_cache.get_cached(key)
        if cached is not None:
            return cached

        views = [course.public_view() for course in await self.course_repository.list_all()]
        await self.course_cache.set_cached(key, views)
        return views

    async def get_course_by_user(self, context: AuthContext, course_id: str) -> List[Dict[str, Any]]:
        """
        Full lesson list for an enrolled user.

        Raises:
            ForbiddenError: If the user is neither enrolled nor an admin
            NotFoundError: If the course does not exist
        """
        if not context.has_role("admin") and course_id not in context.course_ids:
            logger.warning(f"User {context.user_id} is not enrolled in course {course_id}")
            raise ForbiddenError(
                "You are not authorized to access this course",
                user_id=context.user_id,
            )

        course = await self._load(course_id)
        return course.content_view()
