"""Shared fixtures and sample models for fluentval tests."""

from dataclasses import dataclass

import pytest

from fluentval import Validator


@dataclass
class Address:
    street: str | None = None
    city: str | None = None
    country: str | None = None


@dataclass
class User:
    name: str | None = None
    email: str | None = None
    age: int | None = None
    is_active: bool = False
    country: str = "US"
    middle_name: str | None = None
    has_middle_name: bool = False
    phone: str | None = None
    is_public: bool = False
    username: str | None = None
    address: Address | None = None


@dataclass
class Holder:
    """Single-value wrapper for exercising one rule at a time."""
    value: object = None


class ActiveAgeValidator(Validator):
    def __init__(self, config=None):
        super().__init__(config)
        self.rule_for("age", lambda user: user.age) \
            .when(lambda user: user.is_active) \
            .greater_than_or_equal_to(18)


class UserValidator(Validator):
    def __init__(self, config=None):
        super().__init__(config)
        self.rule_for("name").not_null().not_blank().max_length(10)
        self.rule_for("email").not_null().email()
        self.rule_for("age").not_null().inclusive_between(0, 130)


@pytest.fixture
def user_validator():
    return UserValidator()


@pytest.fixture
def valid_user():
    return User(name="Alice", email="alice@example.com", age=30)


@pytest.fixture
def invalid_user():
    return User(name="   ", email="not-an-email", age=200)


@pytest.fixture
def check_value():
    """Validate a single value against rules configured by a callback.

    Usage: ``check_value(42, lambda chain: chain.greater_than(10))``
    """
    def _check(value, configure, config=None):
        class _SingleValueValidator(Validator):
            def __init__(self):
                super().__init__(config)
                configure(self.rule_for("value", lambda holder: holder.value))

        return _SingleValueValidator().validate(Holder(value))

    return _check
