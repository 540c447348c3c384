"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass
from enum import Enum

import pytest

from verify.config import reset_settings
from verify.errors import ErrorCode, ValidationError


@dataclass(frozen=True)
class User:
    phone: str
    mail: str
    age: int | None


class UserErrorCode(Enum):
    USER_MAIL_EMPTY = "mail cant be empty"
    USER_MAIL_FORMAT = "bad mail format"
    USER_PHONE_EMPTY = "phone cant be empty"
    USER_PHONE_FORMAT = "bad phone format"


def user_error(message: str) -> ValidationError:
    return ValidationError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=message)


def user_error_from_code(code: UserErrorCode) -> ValidationError:
    return user_error(code.value)


@pytest.fixture(autouse=True)
def reset_config_settings():
    """Reset the settings singleton before and after each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def good_user() -> User:
    return User("3116419582", "d.cardona.rojas@gmail.com", 25)


@pytest.fixture
def bad_user() -> User:
    return User("31123123", "d.cardona.rojas", 25)


@pytest.fixture
def blank_user() -> User:
    return User("", "", None)
