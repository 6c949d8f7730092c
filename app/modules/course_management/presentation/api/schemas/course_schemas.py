# 📄 File: app/modules/course_management/presentation/api/schemas/course_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data formats for creating and editing courses and for posting
# questions and answers under a lesson.
#
# 🧪 Purpose (Technical Summary):
# Pydantic v2 request schemas for the course endpoints. Thread requests accept the
# camelCase identifiers (courseId, contentId, questionId) used by the clients.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
#
# 🔄 Connected Modules / Calls From:
# - app.modules.course_management.presentation.api.v1.courses

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TitleEntryInput(BaseModel):
    title: str = Field(..., min_length=1)


class LinkInput(BaseModel):
    title: str
    url: str


class ContentItemInput(BaseModel):
    """
    One lesson as submitted by an admin.

    `_id` names an existing lesson to update in place; lessons without one
    are created.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id")
    title: str = Field(..., min_length=1)
    description: str = ""
    video_url: str = ""
    video_thumbnail: Optional[Dict[str, Any]] = None
    video_section: str = ""
    video_length: float = Field(0, ge=0)
    video_player: str = ""
    links: List[LinkInput] = Field(default_factory=list)
    suggestion: str = ""


class CourseCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    estimated_price: Optional[float] = Field(None, ge=0)
    thumbnail: Optional[str] = Field(None, description="Base64 image or data URL")
    tags: str = ""
    level: str = ""
    demo_url: str = ""
    benefits: List[TitleEntryInput] = Field(default_factory=list)
    prerequisites: List[TitleEntryInput] = Field(default_factory=list)
    course_data: List[ContentItemInput] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Async Python",
                "description": "Event loops from the ground up",
                "price": 29.0,
                "tags": "python,asyncio",
                "level": "Intermediate",
                "course_data": [{"title": "Coroutines", "video_section": "Basics"}],
            }
        }
    )


class CourseUpdateRequest(BaseModel):
    """Partial update. Only fields present in the body are changed."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    estimated_price: Optional[float] = Field(None, ge=0)
    thumbnail: Optional[str] = None
    tags: Optional[str] = None
    level: Optional[str] = None
    demo_url: Optional[str] = None
    benefits: Optional[List[TitleEntryInput]] = None
    prerequisites: Optional[List[TitleEntryInput]] = None
    course_data: Optional[List[ContentItemInput]] = None

    @field_validator(
        'name', 'description', 'price', 'tags', 'level', 'demo_url',
        'benefits', 'prerequisites', 'course_data',
    )
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v


class AddQuestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(..., min_length=1)
    course_id: str = Field(..., alias="courseId")
    content_id: str = Field(..., alias="contentId")


class AddAnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer: str = Field(..., min_length=1)
    course_id: str = Field(..., alias="courseId")
    content_id: str = Field(..., alias="contentId")
    question_id: str = Field(..., alias="questionId")
