"""
Course management domain models.
"""

from .course import ContentItem, Course, Link, Question, Reply, Review, TitleEntry

__all__ = ["ContentItem", "Course", "Link", "Question", "Reply", "Review", "TitleEntry"]
