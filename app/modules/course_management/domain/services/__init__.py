"""
Course Management Domain Services

- CourseService: Catalog writes and cache-first reads
- DiscussionService: Question/answer thread under each lesson
"""

from .course_service import CourseService
from .discussion_service import DiscussionService

__all__ = ["CourseService", "DiscussionService"]
