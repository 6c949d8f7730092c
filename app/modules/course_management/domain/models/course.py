# 📄 File: app/modules/course_management/domain/models/course.py
# 🧭 Purpose (Layman Explanation):
# Defines what a course is - its name, price, thumbnail, the list of lessons (videos) it contains,
# and the questions and answers learners post under each lesson.
# 🧪 Purpose (Technical Summary):
# Course aggregate with embedded ContentItems, Questions and Replies. The whole aggregate is
# persisted as one document; nested lookups are by embedded identifier.
# 🔗 Dependencies:
# pydantic, app.shared.utils.validators, app.shared.infrastructure.storage.image_storage
# 🔄 Connected Modules / Calls From:
# course_service.py, discussion_service.py, course_repository.py, course API schemas

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.shared.infrastructure.storage.image_storage import StoredImage
from app.shared.utils.validators import new_object_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _Embedded(BaseModel):
    """Base for sub-documents carrying their own `_id`."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=new_object_id, alias="_id")


class TitleEntry(BaseModel):
    """Benefit or prerequisite line."""
    title: str


class Link(BaseModel):
    title: str
    url: str


class Reply(_Embedded):
    user: Dict[str, Any]
    answer: str
    created_at: datetime = Field(default_factory=_utcnow)


class Question(_Embedded):
    """
    A learner's question under a lesson.

    Replies are append-only.
    """
    user: Dict[str, Any]
    question: str
    question_replies: List[Reply] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)

    @property
    def author_id(self) -> Optional[str]:
        author = self.user.get("_id")
        return str(author) if author is not None else None


class Review(_Embedded):
    user: Dict[str, Any]
    rating: float = 0
    comment: str = ""
    comment_replies: List[Dict[str, Any]] = Field(default_factory=list)


class ContentItem(_Embedded):
    """One lesson (video) of a course."""
    title: str
    description: str = ""
    video_url: str = ""
    video_thumbnail: Optional[Dict[str, Any]] = None
    video_section: str = ""
    video_length: float = 0
    video_player: str = ""
    links: List[Link] = Field(default_factory=list)
    suggestion: str = ""
    questions: List[Question] = Field(default_factory=list)

    def find_question(self, question_id: str) -> Optional[Question]:
        return next((q for q in self.questions if q.id == question_id), None)


# Content fields only visible to enrolled users
PRIVATE_CONTENT_FIELDS = {"video_url", "suggestion", "questions", "links"}


class Course(BaseModel):
    """
    Course aggregate.

    - course_data: Ordered lessons, each owning its question thread
    - thumbnail: Image host reference
    - ratings / purchased: Aggregated review score and sales count
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=new_object_id, alias="_id")
    name: str
    description: str
    price: float
    estimated_price: Optional[float] = None
    thumbnail: Optional[StoredImage] = None
    tags: str = ""
    level: str = ""
    demo_url: str = ""
    benefits: List[TitleEntry] = Field(default_factory=list)
    prerequisites: List[TitleEntry] = Field(default_factory=list)
    reviews: List[Review] = Field(default_factory=list)
    ratings: float = 0
    purchased: int = 0
    course_data: List[ContentItem] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    def find_content(self, content_id: str) -> Optional[ContentItem]:
        return next((item for item in self.course_data if item.id == content_id), None)

    def touch(self) -> None:
        self.updated_at = _utcnow()

    def to_record(self) -> Dict[str, Any]:
        """Full JSON-ready representation."""
        return self.model_dump(mode="json", by_alias=True)

    def public_view(self) -> Dict[str, Any]:
        """
        Representation for anyone browsing the catalog.

        Lesson videos, links, suggestions and question threads are left out.
        """
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude={"course_data": {"__all__": PRIVATE_CONTENT_FIELDS}},
        )

    def content_view(self) -> List[Dict[str, Any]]:
        """Lessons with everything an enrolled learner can see."""
        return [item.model_dump(mode="json", by_alias=True) for item in self.course_data]
