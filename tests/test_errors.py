"""Error taxonomy tests — every kind maps to a status code."""

import uuid

import pytest

from authapi.api.errors import STATUS_BY_KIND
from authapi.errors import (
    AuthError,
    AuthErrorKind,
    ComparisonError,
    DuplicateEmailError,
    HashingError,
    InvalidPasswordError,
    InvalidTokenError,
    UserNotFoundError,
)


def test_every_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(AuthErrorKind)


@pytest.mark.parametrize(
    "error, status",
    [
        (DuplicateEmailError("a@example.com"), 409),
        (UserNotFoundError(email="a@example.com"), 404),
        (InvalidPasswordError("a@example.com"), 401),
        (InvalidTokenError("expired"), 401),
        (HashingError(), 500),
        (ComparisonError(), 500),
    ],
)
def test_status_by_kind(error, status):
    assert isinstance(error, AuthError)
    assert STATUS_BY_KIND[error.kind] == status


def test_errors_carry_structured_data():
    user_id = uuid.uuid4()
    err = UserNotFoundError(user_id=user_id)
    assert err.data == {"email": None, "user_id": user_id}
    assert str(err) == "User not found"

    token_err = InvalidTokenError("expired")
    assert token_err.data == {"reason": "expired"}
    assert token_err.message == "Token has expired"
    assert InvalidTokenError().message == "Invalid token"
