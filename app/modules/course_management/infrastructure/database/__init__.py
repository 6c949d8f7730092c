"""
Course Management Database Layer

MongoDB repository implementation for the Course aggregate.
"""

from .course_repository_impl import CourseRepositoryImpl

__all__ = ["CourseRepositoryImpl"]
