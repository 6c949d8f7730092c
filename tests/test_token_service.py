from datetime import timedelta

import pytest

from app.shared.core.exceptions import CodeMismatchError, InvalidTokenError
from app.shared.core.security import (
    EXPIRED_TOKEN_MESSAGE,
    INVALID_TOKEN_MESSAGE,
    PasswordHasher,
    TokenService,
)

CANDIDATE = {"name": "Ada", "email": "ada@example.com", "password": "secret123"}


def test_activation_code_is_four_digits(token_service):
    for _ in range(200):
        code = token_service.generate_activation_code()
        assert len(code) == 4
        assert 1000 <= int(code) <= 9999


def test_activation_token_round_trip(token_service):
    ticket = token_service.issue_activation_token(CANDIDATE)

    candidate = token_service.verify_activation_token(ticket.token, ticket.activation_code)

    assert candidate == CANDIDATE


def test_activation_with_wrong_code_is_rejected(token_service):
    ticket = token_service.issue_activation_token(CANDIDATE)
    wrong = "1000" if ticket.activation_code != "1000" else "1001"

    with pytest.raises(CodeMismatchError) as exc_info:
        token_service.verify_activation_token(ticket.token, wrong)

    assert exc_info.value.message == "Invalid activation code"
    assert exc_info.value.status_code == 400


def test_tampered_activation_token_is_rejected(token_service):
    ticket = token_service.issue_activation_token(CANDIDATE)
    other = token_service.issue_activation_token({**CANDIDATE, "email": "eve@example.com"})
    header, payload, _ = ticket.token.split(".")
    foreign_signature = other.token.split(".")[2]

    with pytest.raises(InvalidTokenError) as exc_info:
        token_service.verify_activation_token(
            f"{header}.{payload}.{foreign_signature}",
            ticket.activation_code,
        )

    assert exc_info.value.message == INVALID_TOKEN_MESSAGE


def test_expired_access_token_is_rejected(token_service):
    token = token_service._sign({"id": "abc"}, token_service.access_secret, timedelta(seconds=-30))

    with pytest.raises(InvalidTokenError) as exc_info:
        token_service.verify_access_token(token)

    assert exc_info.value.message == EXPIRED_TOKEN_MESSAGE


def test_token_kinds_are_not_interchangeable(token_service):
    refresh_token = token_service.issue_refresh_token("abc")
    access_token = token_service.issue_access_token("abc")

    with pytest.raises(InvalidTokenError):
        token_service.verify_access_token(refresh_token)
    with pytest.raises(InvalidTokenError):
        token_service.verify_refresh_token(access_token)

    assert token_service.verify_access_token(access_token)["id"] == "abc"
    assert token_service.verify_refresh_token(refresh_token)["id"] == "abc"


def test_tokens_issued_together_are_distinct(token_service):
    assert token_service.issue_access_token("abc") != token_service.issue_access_token("abc")


def test_garbage_token_is_rejected(token_service):
    with pytest.raises(InvalidTokenError) as exc_info:
        token_service.verify_access_token("not-a-jwt")

    assert exc_info.value.message == INVALID_TOKEN_MESSAGE


class TestPasswordHasher:

    def test_hash_and_verify(self):
        hasher = PasswordHasher(rounds=4)
        hashed = hasher.hash("secret123")

        assert hashed != "secret123"
        assert hasher.verify("secret123", hashed)
        assert not hasher.verify("wrong-password", hashed)

    def test_missing_hash_never_verifies(self):
        hasher = PasswordHasher(rounds=4)

        assert not hasher.verify("secret123", None)
        assert not hasher.verify("secret123", "")


def test_token_service_reads_lifetimes_from_settings(settings):
    service = TokenService(settings)

    assert service.access_expire == timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    assert service.refresh_expire == timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
