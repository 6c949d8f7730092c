"""
Shared fixtures: in-memory repositories, fake mail and image collaborators,
an isolated fake Redis and an HTTP client bound to a freshly built app.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("ACTIVATION_SECRET", "test-activation-secret")
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-secret")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SENDGRID_API_KEY", "")

from typing import Dict, List, Optional, Tuple

import pytest
import pytest_asyncio
from bson import ObjectId
from fakeredis import FakeAsyncRedis, FakeServer
from httpx import ASGITransport, AsyncClient

from app.main import create_application
from app.modules.course_management.domain.models.course import ContentItem, Course, Link
from app.modules.course_management.domain.repositories.course_repository import CourseRepository
from app.modules.course_management.presentation.dependencies import get_course_repository
from app.modules.user_management.domain.models.user import EnrolledCourse, User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.presentation.dependencies import get_user_repository
from app.shared.config.settings import get_settings
from app.shared.core.auth_context import AuthContext
from app.shared.core.exceptions import ConflictError, EmailDeliveryError
from app.shared.core.security import PasswordHasher, TokenService
from app.shared.infrastructure.cache.session_store import CourseCache, SessionStore
from app.shared.infrastructure.email.mailer import EmailMessage
from app.shared.infrastructure.email.notifications import NotificationDispatcher
from app.shared.infrastructure.storage.image_storage import StoredImage


# =============================================================================
# TEST DOUBLES
# =============================================================================

class InMemoryUserRepository(UserRepository):
    """Dict-backed user store with the same id and email rules as MongoDB."""

    def __init__(self):
        self.users: Dict[str, User] = {}

    @staticmethod
    def _copy(user: User, include_password: bool) -> User:
        copy = user.model_copy(deep=True)
        if not include_password:
            copy.password = None
        return copy

    async def create(self, user: User) -> User:
        if any(existing.email == user.email for existing in self.users.values()):
            raise ConflictError("Email already exists", field="email", value=user.email)
        self.users[user.id] = user.model_copy(deep=True)
        return self._copy(user, include_password=False)

    async def get_by_id(self, user_id: str, include_password: bool = False) -> Optional[User]:
        ObjectId(user_id)
        user = self.users.get(user_id)
        return self._copy(user, include_password) if user else None

    async def get_by_email(self, email: str, include_password: bool = False) -> Optional[User]:
        email = email.strip().lower()
        for user in self.users.values():
            if user.email == email:
                return self._copy(user, include_password)
        return None

    async def update(self, user: User) -> User:
        user.touch()
        stored = user.model_copy(deep=True)
        if stored.password is None:
            stored.password = self.users[user.id].password
        self.users[user.id] = stored
        return user


class InMemoryCourseRepository(CourseRepository):
    def __init__(self):
        self.courses: Dict[str, Course] = {}
        self.save_count = 0

    async def create(self, course: Course) -> Course:
        self.courses[course.id] = course.model_copy(deep=True)
        return course

    async def get_by_id(self, course_id: str) -> Optional[Course]:
        ObjectId(course_id)
        course = self.courses.get(course_id)
        return course.model_copy(deep=True) if course else None

    async def list_all(self) -> List[Course]:
        return [course.model_copy(deep=True) for course in self.courses.values()]

    async def update_fields(self, course_id, fields):
        stored = self.courses.get(course_id)
        if stored is None:
            return None
        merged = Course.model_validate({**stored.model_dump(by_alias=True), **fields})
        self.courses[course_id] = merged
        return merged.model_copy(deep=True)

    async def save(self, course: Course) -> Course:
        course.touch()
        self.courses[course.id] = course.model_copy(deep=True)
        self.save_count += 1
        return course


class FakeMailer:
    """Records outgoing mail instead of calling SendGrid."""

    def __init__(self):
        self.sent: List[EmailMessage] = []
        self.fail = False

    async def send(self, message: EmailMessage) -> None:
        if self.fail:
            raise EmailDeliveryError("Email delivery failed")
        self.sent.append(message)


class FakeImageStorage:
    def __init__(self):
        self.uploads: List[Tuple[str, Optional[int]]] = []
        self.destroyed: List[str] = []

    async def upload(self, base64_image: str, folder: str, width: Optional[int] = None) -> StoredImage:
        self.uploads.append((folder, width))
        public_id = f"{folder}/image-{len(self.uploads)}.jpg"
        return StoredImage(public_id=public_id, url=f"https://cdn.test/{public_id}")

    async def destroy(self, public_id: str) -> None:
        self.destroyed.append(public_id)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def token_service():
    return TokenService()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def redis():
    client = FakeAsyncRedis(server=FakeServer(), decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
def session_store(redis, settings):
    return SessionStore(redis, ttl=settings.session_ttl)


@pytest.fixture
def course_cache(redis):
    return CourseCache(redis)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def course_repo():
    return InMemoryCourseRepository()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def notifications(mailer):
    return NotificationDispatcher(mailer)


@pytest.fixture
def image_storage():
    return FakeImageStorage()


@pytest.fixture
def app(redis, mailer, image_storage, user_repo, course_repo):
    application = create_application(use_lifespan=False)
    application.state.mongo_client = None
    application.state.redis = redis
    application.state.mailer = mailer
    application.state.image_storage = image_storage
    application.dependency_overrides[get_user_repository] = lambda: user_repo
    application.dependency_overrides[get_course_repository] = lambda: course_repo
    return application


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


# =============================================================================
# FACTORIES
# =============================================================================

@pytest.fixture
def make_user(user_repo, hasher):
    async def factory(
        name: str = "Learner",
        email: str = "learner@example.com",
        password: Optional[str] = "secret123",
        role: str = "User",
        courses: Tuple[str, ...] = (),
    ) -> User:
        user = User(
            name=name,
            email=email,
            password=hasher.hash(password) if password else None,
            role=role,
            is_verified=True,
            courses=[EnrolledCourse(course_id=course_id) for course_id in courses],
        )
        return await user_repo.create(user)
    return factory


@pytest.fixture
def login_as(session_store, token_service):
    """Open a session for a user and return Authorization headers."""
    async def factory(user: User) -> Dict[str, str]:
        await session_store.create_session(user.id, user.public_record())
        return {"Authorization": f"Bearer {token_service.issue_access_token(user.id)}"}
    return factory


@pytest.fixture
def context_for():
    def factory(user: User) -> AuthContext:
        return AuthContext.from_record(user.public_record())
    return factory


@pytest.fixture
def make_course(course_repo):
    async def factory(name: str = "Async Python", lessons: int = 1) -> Course:
        course = Course(
            name=name,
            description="Event loops from the ground up",
            price=29.0,
            course_data=[
                ContentItem(
                    title=f"Lesson {index + 1}",
                    video_url=f"https://videos.test/{index + 1}",
                    suggestion="Watch twice",
                    links=[Link(title="Docs", url="https://docs.python.org")],
                )
                for index in range(lessons)
            ],
        )
        return await course_repo.create(course)
    return factory
