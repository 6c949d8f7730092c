# 📄 File: app/modules/course_management/domain/services/discussion_service.py
# 🧭 Purpose (Layman Explanation):
# Lets learners ask questions under a lesson and reply to each other, emailing the person who
# asked whenever someone else answers.
# 🧪 Purpose (Technical Summary):
# Mutations of the nested discussion thread (Course -> ContentItem -> Question -> Reply).
# Every mutation reloads the aggregate, appends in memory and saves the whole aggregate back.
# 🔗 Dependencies:
# Course aggregate, CourseRepository, NotificationDispatcher, AuthContext
# 🔄 Connected Modules / Calls From:
# Course API endpoints (add-question, add-answer)

import logging

from ..models.course import ContentItem, Course, Question, Reply
from ..repositories.course_repository import CourseRepository
from app.shared.core.auth_context import AuthContext
from app.shared.core.exceptions import InvalidIdError, NotFoundError
from app.shared.infrastructure.email.notifications import NotificationDispatcher
from app.shared.utils.validators import is_valid_object_id

logger = logging.getLogger(__name__)


class DiscussionService:
    """
    Domain service for lesson discussions.

    Business rules:
    - Identifiers are checked for shape before any lookup
    - Malformed and unknown identifiers fail the same way and change nothing
    - Questions and replies are append-only
    - The asker is emailed when someone other than themselves replies

    Known limitation: two concurrent appends to the same course are
    last-write-wins, so one of them can be lost.
    """

    def __init__(self, course_repository: CourseRepository, notifications: NotificationDispatcher):
        self.course_repository = course_repository
        self.notifications = notifications

    async def _load_content(self, course_id: str, content_id: str) -> tuple[Course, ContentItem]:
        course = await self.course_repository.get_by_id(course_id)
        if course is None:
            raise NotFoundError("Course not found", resource_type="course", resource_id=course_id)

        if not is_valid_object_id(content_id):
            raise InvalidIdError("contentId")

        content = course.find_content(content_id)
        if content is None:
            raise InvalidIdError("contentId")

        return course, content

    async def add_question(
        self,
        context: AuthContext,
        course_id: str,
        content_id: str,
        question: str,
    ) -> Course:
        """
        Append a question to a lesson.

        Args:
            context: Asking user
            course_id: Course holding the lesson
            content_id: Lesson identifier
            question: Question text

        Returns:
            Course: The saved aggregate

        Raises:
            NotFoundError: If the course does not exist
            InvalidIdError: If the lesson id is malformed or unknown
        """
        course, content = await self._load_content(course_id, content_id)

        content.questions.append(Question(user=context.snapshot(), question=question))
        course = await self.course_repository.save(course)

        logger.info(f"Question added to course {course_id} lesson {content_id} by {context.user_id}")
        return course

    async def add_answer(
        self,
        context: AuthContext,
        course_id: str,
        content_id: str,
        question_id: str,
        answer: str,
    ) -> Course:
        """
        Append a reply to a question and notify the asker.

        Raises:
            NotFoundError: If the course does not exist
            InvalidIdError: If the lesson or question id is malformed or unknown
            EmailDeliveryError: If the reply notification cannot be sent
        """
        course, content = await self._load_content(course_id, content_id)

        if not is_valid_object_id(question_id):
            raise InvalidIdError("questionId")

        question = content.find_question(question_id)
        if question is None:
            raise InvalidIdError("questionId")

        question.question_replies.append(Reply(user=context.snapshot(), answer=answer))
        course = await self.course_repository.save(course)
        logger.info(f"Reply added to question {question_id} by {context.user_id}")

        if question.author_id == context.user_id:
            logger.debug(f"Self-reply on question {question_id}, no notification sent")
        else:
            await self.notifications.send_question_reply_email(
                email=question.user.get("email", ""),
                name=question.user.get("name", ""),
                title=content.title,
            )

        return course
