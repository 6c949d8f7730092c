# 📄 File: app/modules/course_management/presentation/api/v1/courses.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for the course catalog - admins create and edit courses,
# everyone browses them, enrolled learners open lessons and ask or answer questions.
#
# 🧪 Purpose (Technical Summary):
# FastAPI course endpoints delegating to CourseService and DiscussionService. Writes to the
# catalog are admin-only; thread mutations need any authenticated user.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - app.modules.course_management.presentation.dependencies (service injection)
# - app.api.middleware.authentication (auth context, role checks)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

"""
Course API Endpoints

Endpoints:
- POST /courses: Create a course (admin)
- PUT /courses/add-question: Ask a question under a lesson
- PUT /courses/add-answer: Reply to a question
- PUT /courses/{course_id}: Edit a course (admin)
- GET /courses: Public list of all courses
- GET /courses/{course_id}: Public view of one course
- GET /courses/{course_id}/content: Lessons for enrolled users
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.middleware.authentication import authorize_roles, get_auth_context
from app.modules.course_management.domain.services.course_service import CourseService
from app.modules.course_management.domain.services.discussion_service import DiscussionService
from app.modules.course_management.presentation.api.schemas.course_schemas import (
    AddAnswerRequest,
    AddQuestionRequest,
    CourseCreateRequest,
    CourseUpdateRequest,
)
from app.modules.course_management.presentation.dependencies import (
    get_course_service,
    get_discussion_service,
)
from app.shared.core.auth_context import AuthContext

logger = logging.getLogger(__name__)

courses_router = APIRouter(prefix="/courses")


@courses_router.post("", status_code=status.HTTP_201_CREATED, summary="Create course")
async def create_course(
    course_data: CourseCreateRequest,
    context: AuthContext = Depends(authorize_roles("admin")),
    course_service: CourseService = Depends(get_course_service),
):
    course = await course_service.create_course(course_data.model_dump())
    return {"success": True, "course": course.to_record()}


# Thread routes are declared before /{course_id} so they are not captured by it

@courses_router.put("/add-question", summary="Ask a question under a lesson")
async def add_question(
    question_data: AddQuestionRequest,
    context: AuthContext = Depends(get_auth_context),
    discussion_service: DiscussionService = Depends(get_discussion_service),
):
    course = await discussion_service.add_question(
        context,
        course_id=question_data.course_id,
        content_id=question_data.content_id,
        question=question_data.question,
    )
    return {"success": True, "course": course.to_record()}


@courses_router.put("/add-answer", summary="Reply to a question")
async def add_answer(
    answer_data: AddAnswerRequest,
    context: AuthContext = Depends(get_auth_context),
    discussion_service: DiscussionService = Depends(get_discussion_service),
):
    course = await discussion_service.add_answer(
        context,
        course_id=answer_data.course_id,
        content_id=answer_data.content_id,
        question_id=answer_data.question_id,
        answer=answer_data.answer,
    )
    return {"success": True, "course": course.to_record()}


@courses_router.put("/{course_id}", summary="Edit course")
async def edit_course(
    course_id: str,
    course_data: CourseUpdateRequest,
    context: AuthContext = Depends(authorize_roles("admin")),
    course_service: CourseService = Depends(get_course_service),
):
    course = await course_service.edit_course(course_id, course_data.model_dump(exclude_unset=True))
    return {"success": True, "course": course.to_record()}


@courses_router.get("", summary="List courses")
async def get_all_courses(course_service: CourseService = Depends(get_course_service)):
    courses = await course_service.get_all_courses()
    return {"success": True, "courses": courses}


@courses_router.get("/{course_id}", summary="Get course")
async def get_single_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
):
    course = await course_service.get_single_course(course_id)
    return {"success": True, "course": course}


@courses_router.get("/{course_id}/content", summary="Get lessons of an enrolled course")
async def get_course_by_user(
    course_id: str,
    context: AuthContext = Depends(get_auth_context),
    course_service: CourseService = Depends(get_course_service),
):
    content = await course_service.get_course_by_user(context, course_id)
    return {"success": True, "content": content}
