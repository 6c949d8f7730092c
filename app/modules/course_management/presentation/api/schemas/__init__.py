from .course_schemas import (
    AddAnswerRequest,
    AddQuestionRequest,
    ContentItemInput,
    CourseCreateRequest,
    CourseUpdateRequest,
)

__all__ = [
    "AddAnswerRequest",
    "AddQuestionRequest",
    "ContentItemInput",
    "CourseCreateRequest",
    "CourseUpdateRequest",
]
