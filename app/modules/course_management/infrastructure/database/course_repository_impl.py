# 📄 File: app/modules/course_management/infrastructure/database/course_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for courses - creating them, loading one or all
# of them, and saving changes to their lessons and discussions.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of CourseRepository over a MongoDB collection (pymongo asyncio).
# Top-level ids are ObjectIds; embedded lesson/question/reply ids are stored as hex strings.
#
# 🔗 Dependencies:
# - app.modules.course_management.domain (interface and aggregate)
# - pymongo asyncio collection API, bson.ObjectId
#
# 🔄 Connected Modules / Calls From:
# - app.modules.course_management.presentation.dependencies (repository injection)

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from app.modules.course_management.domain.models.course import Course
from app.modules.course_management.domain.repositories.course_repository import CourseRepository
from app.shared.config.database import COURSES_COLLECTION

logger = logging.getLogger(__name__)


class CourseRepositoryImpl(CourseRepository):
    """
    MongoDB implementation of the CourseRepository interface.
    """
    
    def __init__(self, database: AsyncDatabase):
        self._collection = database[COURSES_COLLECTION]
    
    @staticmethod
    def _to_document(course: Course) -> Dict[str, Any]:
        document = course.model_dump(by_alias=True)
        document["_id"] = ObjectId(course.id)
        return document
    
    @staticmethod
    def _to_domain(document: Dict[str, Any]) -> Course:
        document = dict(document)
        document["_id"] = str(document["_id"])
        return Course.model_validate(document)
    
    async def create(self, course: Course) -> Course:
        await self._collection.insert_one(self._to_document(course))
        logger.info(f"Created course with ID: {course.id}")
        return course
    
    async def get_by_id(self, course_id: str) -> Optional[Course]:
        # Malformed ids surface as bson.errors.InvalidId, translated centrally
        document = await self._collection.find_one({"_id": ObjectId(course_id)})
        return self._to_domain(document) if document else None
    
    async def list_all(self) -> List[Course]:
        cursor = self._collection.find({}).sort("created_at", 1)
        return [self._to_domain(document) async for document in cursor]
    
    async def update_fields(self, course_id: str, fields: Dict[str, Any]) -> Optional[Course]:
        document = await self._collection.find_one_and_update(
            {"_id": ObjectId(course_id)},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return self._to_domain(document) if document else None
    
    async def save(self, course: Course) -> Course:
        course.touch()
        await self._collection.replace_one({"_id": ObjectId(course.id)}, self._to_document(course))
        logger.debug(f"Saved course: {course.id}")
        return course
