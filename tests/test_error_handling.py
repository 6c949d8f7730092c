import pytest
from bson.errors import InvalidId
from fastapi import HTTPException
from jose import ExpiredSignatureError, JWTError
from pymongo.errors import DuplicateKeyError

from app.api.middleware.error_handling import translate_exception
from app.shared.core.exceptions import ConflictError, EmailDeliveryError, NotFoundError
from app.shared.core.security import EXPIRED_TOKEN_MESSAGE, INVALID_TOKEN_MESSAGE


@pytest.mark.parametrize("exc, expected", [
    (NotFoundError("Course not found"), (404, "Course not found")),
    (ConflictError("Email already exists"), (400, "Email already exists")),
    (EmailDeliveryError(), (500, "Email delivery failed")),
    (InvalidId("bad"), (400, "Resources not found. Invalid path _id")),
    (ExpiredSignatureError("old"), (400, EXPIRED_TOKEN_MESSAGE)),
    (JWTError("bad"), (400, INVALID_TOKEN_MESSAGE)),
    (HTTPException(status_code=405, detail="Method Not Allowed"), (405, "Method Not Allowed")),
    (RuntimeError("secret internals"), (500, "Internal server error")),
])
def test_translate_exception(exc, expected):
    assert translate_exception(exc) == expected


def test_duplicate_key_names_the_field():
    exc = DuplicateKeyError("E11000", code=11000, details={"keyValue": {"email": "a@b.c"}})

    assert translate_exception(exc) == (400, "Duplicate email entered")


async def test_unhandled_error_is_a_generic_500(app, client):
    async def explode():
        raise RuntimeError("secret internals")

    app.add_api_route("/explode", explode)

    response = await client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}


async def test_unknown_route_uses_error_shape(client):
    response = await client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


async def test_validation_error_is_400(client):
    response = await client.post("/api/v1/register", json={"name": "Ada"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "email" in body["message"]


async def test_health(client):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_readiness_without_database(client):
    response = await client.get("/api/v1/health/ready")

    assert response.status_code == 503
    checks = response.json()["checks"]
    assert checks["database"] == {"status": "not_configured"}
    assert checks["cache"]["status"] == "healthy"
