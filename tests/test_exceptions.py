"""Tests for error kinds and their status codes."""

import pytest

from songbook.core.exceptions import (
    BadRequestError,
    DuplicateError,
    InvalidInputError,
    NotFoundError,
    SongbookError,
    UnauthorizedError,
)


@pytest.mark.parametrize("error_cls, status", [
    (NotFoundError, 404),
    (BadRequestError, 400),
    (DuplicateError, 400),
    (InvalidInputError, 400),
    (UnauthorizedError, 401),
])
def test_status_codes(error_cls, status):
    error = error_cls("boom")
    assert isinstance(error, SongbookError)
    assert error.status_code == status
    assert error.to_dict() == {"error": {"message": "boom", "status": status}}


def test_bad_request_family():
    assert issubclass(DuplicateError, BadRequestError)
    assert issubclass(InvalidInputError, BadRequestError)
    assert not issubclass(NotFoundError, BadRequestError)


def test_default_message():
    assert str(NotFoundError()) == "Not Found"
