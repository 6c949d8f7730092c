import pytest
import pytest_asyncio

from app.modules.course_management.domain.services.discussion_service import DiscussionService
from app.shared.core.exceptions import EmailDeliveryError, InvalidIdError, NotFoundError
from app.shared.utils.validators import new_object_id


@pytest.fixture
def discussion_service(course_repo, notifications):
    return DiscussionService(course_repo, notifications)


@pytest_asyncio.fixture
async def asker(make_user, context_for):
    return context_for(await make_user(name="Asker", email="asker@example.com"))


@pytest_asyncio.fixture
async def helper(make_user, context_for):
    return context_for(await make_user(name="Helper", email="helper@example.com"))


async def ask(discussion_service, course, context, text="What is an event loop?"):
    content_id = course.course_data[0].id
    updated = await discussion_service.add_question(context, course.id, content_id, text)
    return updated.course_data[0].questions[-1]


class TestAddQuestion:

    async def test_question_is_appended_with_author_snapshot(self, discussion_service, course_repo, make_course, asker):
        course = await make_course()

        question = await ask(discussion_service, course, asker)

        stored = await course_repo.get_by_id(course.id)
        questions = stored.course_data[0].questions
        assert len(questions) == 1
        assert questions[0].id == question.id
        assert questions[0].question == "What is an event loop?"
        assert questions[0].question_replies == []
        assert questions[0].user["_id"] == asker.user_id
        assert questions[0].user["email"] == "asker@example.com"

    async def test_questions_keep_insertion_order(self, discussion_service, course_repo, make_course, asker):
        course = await make_course()

        for text in ("first", "second", "third"):
            await ask(discussion_service, course, asker, text)

        stored = await course_repo.get_by_id(course.id)
        assert [q.question for q in stored.course_data[0].questions] == ["first", "second", "third"]

    async def test_only_the_targeted_lesson_changes(self, discussion_service, course_repo, make_course, asker):
        course = await make_course(lessons=2)

        await discussion_service.add_question(asker, course.id, course.course_data[1].id, "Lesson two?")

        stored = await course_repo.get_by_id(course.id)
        assert stored.course_data[0].questions == []
        assert len(stored.course_data[1].questions) == 1

    @pytest.mark.parametrize("content_id", ["not-an-id", "123"])
    async def test_malformed_content_id(self, discussion_service, course_repo, make_course, asker, content_id):
        course = await make_course()

        with pytest.raises(InvalidIdError) as exc_info:
            await discussion_service.add_question(asker, course.id, content_id, "Hello?")

        assert exc_info.value.message == "Invalid contentId"
        assert exc_info.value.status_code == 400
        assert course_repo.save_count == 0

    async def test_unknown_content_id(self, discussion_service, course_repo, make_course, asker):
        course = await make_course()

        with pytest.raises(InvalidIdError):
            await discussion_service.add_question(asker, course.id, new_object_id(), "Hello?")

        assert course_repo.save_count == 0

    async def test_missing_course(self, discussion_service, asker):
        with pytest.raises(NotFoundError):
            await discussion_service.add_question(asker, new_object_id(), new_object_id(), "Hello?")


class TestAddAnswer:

    async def test_reply_notifies_the_asker(self, discussion_service, course_repo, make_course, mailer, asker, helper):
        course = await make_course()
        question = await ask(discussion_service, course, asker)

        await discussion_service.add_answer(helper, course.id, course.course_data[0].id, question.id, "A scheduler")

        stored = await course_repo.get_by_id(course.id)
        replies = stored.course_data[0].questions[0].question_replies
        assert len(replies) == 1
        assert replies[0].answer == "A scheduler"
        assert replies[0].user["_id"] == helper.user_id

        assert len(mailer.sent) == 1
        message = mailer.sent[0]
        assert message.recipient == "asker@example.com"
        assert message.template_name == "question-reply"
        assert message.template_data == {"name": "Asker", "title": "Lesson 1"}

    async def test_self_reply_sends_no_mail(self, discussion_service, course_repo, make_course, mailer, asker):
        course = await make_course()
        question = await ask(discussion_service, course, asker)

        await discussion_service.add_answer(asker, course.id, course.course_data[0].id, question.id, "Never mind")

        stored = await course_repo.get_by_id(course.id)
        assert len(stored.course_data[0].questions[0].question_replies) == 1
        assert mailer.sent == []

    async def test_replies_keep_insertion_order(self, discussion_service, course_repo, make_course, asker, helper):
        course = await make_course()
        question = await ask(discussion_service, course, asker)
        content_id = course.course_data[0].id

        await discussion_service.add_answer(helper, course.id, content_id, question.id, "one")
        await discussion_service.add_answer(asker, course.id, content_id, question.id, "two")

        stored = await course_repo.get_by_id(course.id)
        answers = [reply.answer for reply in stored.course_data[0].questions[0].question_replies]
        assert answers == ["one", "two"]

    @pytest.mark.parametrize("question_id", ["malformed", "unknown"])
    async def test_invalid_question_id_leaves_course_unchanged(
        self, discussion_service, course_repo, make_course, mailer, asker, helper, question_id
    ):
        course = await make_course()
        await ask(discussion_service, course, asker)
        before = (await course_repo.get_by_id(course.id)).model_dump()
        saves = course_repo.save_count

        with pytest.raises(InvalidIdError) as exc_info:
            await discussion_service.add_answer(
                helper,
                course.id,
                course.course_data[0].id,
                "bogus" if question_id == "malformed" else new_object_id(),
                "Hello",
            )

        assert exc_info.value.message == "Invalid questionId"
        assert (await course_repo.get_by_id(course.id)).model_dump() == before
        assert course_repo.save_count == saves
        assert mailer.sent == []

    async def test_mail_failure_keeps_the_reply(
        self, discussion_service, course_repo, make_course, mailer, asker, helper
    ):
        course = await make_course()
        question = await ask(discussion_service, course, asker)
        mailer.fail = True

        with pytest.raises(EmailDeliveryError) as exc_info:
            await discussion_service.add_answer(helper, course.id, course.course_data[0].id, question.id, "Hi")

        assert exc_info.value.status_code == 500
        stored = await course_repo.get_by_id(course.id)
        assert len(stored.course_data[0].questions[0].question_replies) == 1


class TestDiscussionApi:

    async def test_add_question_and_answer_over_http(self, client, course_repo, make_course, make_user, login_as, mailer):
        course = await make_course()
        content_id = course.course_data[0].id
        asker = await make_user(name="Asker", email="asker@example.com")
        helper = await make_user(name="Helper", email="helper@example.com")

        response = await client.put(
            "/api/v1/courses/add-question",
            json={"question": "Why async?", "courseId": course.id, "contentId": content_id},
            headers=await login_as(asker),
        )
        assert response.status_code == 200
        assert response.json()["success"] is True
        question_id = response.json()["course"]["course_data"][0]["questions"][0]["_id"]

        response = await client.put(
            "/api/v1/courses/add-answer",
            json={"answer": "Throughput", "courseId": course.id, "contentId": content_id, "questionId": question_id},
            headers=await login_as(helper),
        )
        assert response.status_code == 200
        assert len(mailer.sent) == 1

        stored = await course_repo.get_by_id(course.id)
        assert stored.course_data[0].questions[0].question_replies[0].answer == "Throughput"

    async def test_add_question_requires_login(self, client, make_course):
        course = await make_course()

        response = await client.put(
            "/api/v1/courses/add-question",
            json={"question": "Why?", "courseId": course.id, "contentId": course.course_data[0].id},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Please login to access this resource"

    async def test_invalid_content_id_over_http(self, client, make_course, make_user, login_as):
        course = await make_course()
        user = await make_user()

        response = await client.put(
            "/api/v1/courses/add-question",
            json={"question": "Why?", "courseId": course.id, "contentId": "nope"},
            headers=await login_as(user),
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid contentId"}
