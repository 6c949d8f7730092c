from app.shared.infrastructure.cache.session_store import CourseCache, SessionStore

RECORD = {"_id": "64b7f0c2a1b2c3d4e5f60718", "name": "Ada", "email": "ada@example.com", "role": "User"}


async def test_create_and_get_session(session_store):
    await session_store.create_session(RECORD["_id"], RECORD)

    assert await session_store.get_session(RECORD["_id"]) == RECORD


async def test_missing_session_is_none(session_store):
    assert await session_store.get_session("64b7f0c2a1b2c3d4e5f60000") is None


async def test_create_replaces_existing_session(session_store):
    await session_store.create_session(RECORD["_id"], RECORD)
    await session_store.create_session(RECORD["_id"], {**RECORD, "name": "Ada L."})

    session = await session_store.get_session(RECORD["_id"])
    assert session["name"] == "Ada L."


async def test_destroy_session_is_idempotent(session_store):
    await session_store.create_session(RECORD["_id"], RECORD)

    await session_store.destroy_session(RECORD["_id"])
    await session_store.destroy_session(RECORD["_id"])

    assert await session_store.get_session(RECORD["_id"]) is None


async def test_session_key_is_the_user_id(redis, session_store):
    await session_store.create_session(RECORD["_id"], RECORD)

    assert await redis.exists(RECORD["_id"]) == 1


async def test_session_ttl_is_applied(redis):
    store = SessionStore(redis, ttl=120)
    await store.create_session(RECORD["_id"], RECORD)

    ttl = await redis.ttl(RECORD["_id"])
    assert 0 < ttl <= 120


async def test_session_without_ttl_does_not_expire(redis):
    store = SessionStore(redis, ttl=None)
    await store.create_session(RECORD["_id"], RECORD)

    assert await redis.ttl(RECORD["_id"]) == -1


async def test_course_cache_set_get_and_invalidate(course_cache):
    detail_key = CourseCache.course_key("64b7f0c2a1b2c3d4e5f60718")
    list_key = CourseCache.list_key()

    await course_cache.set_cached(detail_key, {"name": "Async Python"})
    await course_cache.set_cached(list_key, [{"name": "Async Python"}])

    assert await course_cache.get_cached(detail_key) == {"name": "Async Python"}
    assert await course_cache.get_cached(list_key) == [{"name": "Async Python"}]

    await course_cache.invalidate(detail_key, list_key)

    assert await course_cache.get_cached(detail_key) is None
    assert await course_cache.get_cached(list_key) is None


async def test_invalidate_without_keys_is_a_no_op(course_cache):
    await course_cache.invalidate()
