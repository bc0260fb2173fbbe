"""Tests for Validator orchestration, cascade and conditional rules."""

import logging

import pytest
from conftest import ActiveAgeValidator, Address, Holder, User

from fluentval import (
    CascadeMode,
    FieldError,
    FluentValConfig,
    FluentValidationError,
    RuleConfigurationError,
    Validator,
)
from fluentval.validation import Guard


class TestValidatorBasics:
    """Test rule registration and evaluation order."""

    def test_valid_target(self, user_validator, valid_user):
        result = user_validator.validate(valid_user)
        assert result.is_valid()

    def test_errors_follow_declaration_order(self, user_validator, invalid_user):
        """Errors appear in chain order, then step order."""
        result = user_validator.validate(invalid_user)
        assert result.errors == (
            FieldError("name", "must not be blank"),
            FieldError("email", "must be a valid email address"),
            FieldError("age", "must be between 0 and 130 (inclusive)"),
        )

    def test_continue_records_every_failure(self, user_validator):
        """Default cascade records all failing steps of a chain."""
        result = user_validator.validate(User(name=None, email="a@b.cd", age=1))
        assert [e.message for e in result.errors_for("name")] == [
            "must not be null",
            "must not be blank",
            "must be at most 10 characters long",
        ]

    def test_validator_without_rules_is_valid(self):
        assert Validator().validate(object()).is_valid()

    def test_chains_are_registered(self, user_validator):
        assert [chain.property_name for chain in user_validator.chains] == ["name", "email", "age"]

    def test_default_accessor_reads_dotted_attribute(self):
        """rule_for without an accessor reads the attribute path."""
        class AddressValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("address.city").not_blank()

        validator = AddressValidator()
        assert validator.validate(User(address=Address(city="Paris"))).is_valid()
        result = validator.validate(User(address=Address(city="")))
        assert result.errors == (FieldError("address.city", "must not be blank"),)

    def test_validate_is_idempotent(self, user_validator, invalid_user):
        first = user_validator.validate(invalid_user)
        second = user_validator.validate(invalid_user)
        assert first.errors == second.errors
        assert first is not second

    def test_accessor_errors_propagate(self):
        """Exceptions from user code are not swallowed."""
        class Broken(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("value", lambda target: target.missing).not_null()

        with pytest.raises(AttributeError):
            Broken().validate(Holder(1))


class TestSkip:
    """Test whole-target bypass."""

    def test_skip_returns_empty_result(self, caplog):
        class SkippingValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("name").not_null().min_length(100)

            def skip(self, target):
                return not target.is_active

        validator = SkippingValidator()
        with caplog.at_level(logging.DEBUG, logger="fluentval"):
            result = validator.validate(User(is_active=False))

        assert result.is_valid()
        assert "Skipping validation of User" in caplog.text
        assert validator.validate(User(is_active=True)).is_not_valid()

    def test_skip_defaults_to_false(self):
        assert Validator().skip(object()) is False


class TestCascade:
    """Test cascade-mode semantics."""

    def test_stop_records_only_first_failure(self):
        class StopValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("value").cascade(CascadeMode.STOP).not_null().not_empty().not_blank()

        result = StopValidator().validate(Holder(None))
        assert result.errors == (FieldError("value", "must not be null"),)

    def test_stop_does_not_evaluate_later_steps(self):
        calls = []

        class StopValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("value").cascade(CascadeMode.STOP) \
                    .must(lambda v: False, "first") \
                    .must(lambda v: calls.append(v) or True, "second")

        StopValidator().validate(Holder(5))
        assert calls == []

    def test_stop_is_per_chain(self):
        """Other chains keep running after one chain stops."""
        class TwoChains(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("name").cascade(CascadeMode.STOP).not_null().min_length(3)
                self.rule_for("email").not_null().email()

        result = TwoChains().validate(User())
        assert result.errors == (
            FieldError("name", "must not be null"),
            FieldError("email", "must not be null"),
            FieldError("email", "must be a valid email address"),
        )

    def test_skipped_step_does_not_trigger_stop(self):
        """A skipped step is neither recorded nor a reason to stop."""
        validator = Validator()
        chain = validator.rule_for("age").cascade(CascadeMode.STOP)
        skipped = chain.add_step(lambda v: False, "skipped")
        skipped.guards = (Guard(lambda user: False),)
        chain.must(lambda v: v > 100, "must exceed 100")

        assert validator.validate(User(age=1)).errors == (FieldError("age", "must exceed 100"),)

    def test_config_sets_default_cascade(self):
        config = FluentValConfig(validation={"defaultCascade": "stop"})
        validator = Validator(config)
        chain = validator.rule_for("name").not_null().not_blank()

        assert chain.cascade_mode == CascadeMode.STOP
        assert validator.validate(User()).error_count == 1

    def test_chain_cascade_overrides_config(self):
        config = FluentValConfig(validation={"defaultCascade": "stop"})
        validator = Validator(config)
        validator.rule_for("name").cascade(CascadeMode.CONTINUE).not_null().not_blank()

        assert validator.validate(User()).error_count == 2

    def test_cascade_accepts_mode_value(self):
        chain = Validator().rule_for("name").cascade("stop")
        assert chain.cascade_mode == CascadeMode.STOP

    def test_cascade_rejects_unknown_mode(self):
        with pytest.raises(RuleConfigurationError):
            Validator().rule_for("name").cascade("sometimes")


class TestConditionalRules:
    """Test when/unless guards."""

    def test_when_false_skips_step(self):
        validator = ActiveAgeValidator()
        assert validator.validate(User(is_active=False, age=10)).is_valid()

    def test_when_true_runs_step(self):
        validator = ActiveAgeValidator()
        result = validator.validate(User(is_active=True, age=10))
        assert result.errors == (FieldError("age", "must be greater than or equal to 18"),)

    def test_country_specific_age(self):
        class USAgeValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("age") \
                    .when(lambda user: user.country == "US") \
                    .greater_than_or_equal_to(21)

        validator = USAgeValidator()
        assert validator.validate(User(country="US", age=19)).is_not_valid()
        assert validator.validate(User(country="DE", age=19)).is_valid()
        assert validator.validate(User(country="US", age=21)).is_valid()

    def test_unless(self):
        class MiddleNameValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("middle_name") \
                    .unless(lambda user: user.has_middle_name) \
                    .is_null()

        validator = MiddleNameValidator()
        assert validator.validate(User(has_middle_name=True, middle_name="Lee")).is_valid()
        result = validator.validate(User(has_middle_name=False, middle_name="Lee"))
        assert result.errors == (FieldError("middle_name", "must be null"),)

    def test_when_and_unless_combine(self):
        """Stacked guards all have to allow the step."""
        class PhoneValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("phone") \
                    .when(lambda user: user.is_active) \
                    .unless(lambda user: user.is_public) \
                    .not_null()

        validator = PhoneValidator()
        assert validator.validate(User(is_active=True, is_public=False)).is_not_valid()
        assert validator.validate(User(is_active=True, is_public=True)).is_valid()
        assert validator.validate(User(is_active=False, is_public=False)).is_valid()

    def test_guard_applies_only_to_later_steps(self):
        class UsernameValidator(Validator):
            def __init__(self):
                super().__init__()
                self.rule_for("username") \
                    .not_null() \
                    .min_length(3) \
                    .max_length(50) \
                    .when(lambda user: user.is_public) \
                    .matches(r"^[a-zA-Z0-9_]+$")

        validator = UsernameValidator()
        assert validator.validate(User(username="bad name!", is_public=False)).is_valid()
        result = validator.validate(User(username="bad name!", is_public=True))
        assert result.errors == (FieldError("username", "must match pattern: ^[a-zA-Z0-9_]+$"),)
        result = validator.validate(User(username="ab", is_public=False))
        assert result.errors == (FieldError("username", "must be at least 3 characters long"),)

    def test_when_and_unless_are_complementary(self):
        """The same condition never fires both a when- and an unless-guarded step."""
        validator = Validator()
        validator.rule_for("age").when(lambda user: user.is_active).must(lambda v: False, "when")
        validator.rule_for("age").unless(lambda user: user.is_active).must(lambda v: False, "unless")

        for active in (True, False):
            assert validator.validate(User(is_active=active, age=1)).error_count == 1

    def test_guards_are_snapshotted(self):
        chain = Validator().rule_for("age")
        chain.not_null()
        chain.when(lambda user: user.is_active).is_positive()

        first, second = chain.steps
        assert first.guards == ()
        assert len(second.guards) == 1
        assert chain.active_guards == second.guards


class TestValidateOrRaise:
    """Test the opt-in raising entry point."""

    def test_valid_target_returns_result(self, user_validator, valid_user):
        assert user_validator.validate_or_raise(valid_user).is_valid()

    def test_invalid_target_raises(self, user_validator, invalid_user):
        with pytest.raises(FluentValidationError) as exc_info:
            user_validator.validate_or_raise(invalid_user)

        error = exc_info.value
        assert error.entity_name == "user"
        assert len(error.errors) == 3
        assert str(error).splitlines() == [
            "Validation failed for user",
            " - name: must not be blank",
            " - email: must be a valid email address",
            " - age: must be between 0 and 130 (inclusive)",
        ]

    def test_custom_entity_name(self, user_validator, invalid_user):
        with pytest.raises(FluentValidationError, match="Validation failed for account"):
            user_validator.validate_or_raise(invalid_user, entity_name="account")
