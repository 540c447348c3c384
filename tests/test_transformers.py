"""Tests for map, join and on_exception."""

import pytest
import structlog
from structlog.testing import capture_logs

from conftest import User, user_error
from verify.errors import ErrorCode, Failure, Success
from verify.validation import error, from_function, lift, not_null, valid


class TestMap:
    """Tests for output transformation."""

    def test_transforms_success_value(self):
        validator = valid("123").map(int)
        assert validator.verify("").fold(lambda _: 0, lambda v: v) == 123

    def test_does_not_affect_failing_validator(self, good_user):
        e = user_error("validation error")
        error_validator = error(e)
        transformed = error_validator.map(lambda _: 25)

        result = transformed.verify(good_user)
        original = error_validator.verify(good_user)

        assert result.is_failure()
        assert result.fold(lambda errors: errors[0], lambda _: None) == \
            original.fold(lambda errors: errors[0], lambda _: None)

    def test_failure_is_passed_through_by_identity(self):
        failed = Failure((user_error("x"),))
        calls = []
        validator = from_function(lambda _: failed).map(lambda v: calls.append(v))
        assert validator.verify(None) is failed
        assert calls == []

    def test_round_trip_on_valid(self):
        assert valid(4).map(lambda v: v + 1).verify("anything") == Success(5)

    def test_requires_callable(self):
        with pytest.raises(TypeError):
            valid(1).map("not callable")


class TestJoin:
    """Tests for sequential bind."""

    def test_does_not_collect_both_validator_errors(self, blank_user):
        error1 = user_error("validation error")
        error2 = user_error("age is required")
        age_not_null = not_null(error2)
        validator = error(error1).join(lambda user: age_not_null.verify(user.age))

        result = validator.verify(blank_user)

        assert result.is_failure()
        assert result.fold(lambda errors: errors, lambda _: ()) == (error1,)

    def test_second_step_is_not_evaluated_after_failure(self):
        calls = []
        validator = error(user_error("first")).join(lambda v: calls.append(v))
        validator.verify("subject")
        assert calls == []

    def test_yields_errors_of_second_step_when_first_succeeds(self, blank_user):
        error2 = user_error("age is required")
        age_not_null = not_null(error2)
        validator = valid(blank_user).join(lambda user: age_not_null.verify(user.age))

        result = validator.verify(blank_user)

        assert result.is_failure()
        assert result.fold(lambda errors: errors, lambda _: ()) == (error2,)

    def test_chains_validators_of_different_types(self):
        count_length = lift(len)
        greater_than_one = lift(lambda count: count > 1)
        validator = count_length.join(greater_than_one)
        assert validator.verify("123").fold(lambda _: -1, lambda v: v) is True

    def test_second_result_replaces_first_verbatim(self):
        second = Failure((user_error("a"), user_error("b")))
        validator = valid(1).join(lambda _: second)
        assert validator.verify(None) is second


class TestOnException:
    """Tests for the fault boundary."""

    def test_converts_fault_to_supplied_error(self):
        e = user_error("not a proper int")
        int_parsing = from_function(lambda s: Success(int(s)))
        validator = int_parsing.on_exception(lambda _: e)

        result = validator.verify("12s")

        assert result.fold(lambda errors: errors[0], lambda _: None) == e

    def test_normal_results_pass_through(self):
        int_parsing = from_function(lambda s: Success(int(s)))
        validator = int_parsing.on_exception(lambda _: user_error("x"))
        assert validator.verify("12") == Success(12)

    def test_fault_is_handed_to_error_factory(self):
        validator = lift(int).on_exception(lambda exc: type(exc).__name__)
        assert validator.verify("12s") == Failure(("ValueError",))

    def test_default_error_factory(self):
        result = lift(int).on_exception().verify("12s")
        [e] = result.fold(lambda errors: errors, lambda _: ())
        assert e.code == ErrorCode.E9001_UNEXPECTED_ERROR
        assert e.metadata["exception_type"] == "ValueError"

    def test_unwrapped_fault_propagates(self):
        with pytest.raises(AttributeError):
            lift(lambda u: u.missing).verify(User("", "", None))

    def test_captured_fault_is_silent_without_logging_configuration(self, capsys):
        structlog.reset_defaults()
        validator = lift(int).on_exception(lambda _: user_error("bad int"))

        assert validator.verify("12s").is_failure()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_captured_fault_is_logged(self):
        validator = lift(int).on_exception(lambda _: user_error("x"))
        with capture_logs() as logs:
            validator.verify("12s")
        assert logs[0]["event"] == "evaluation_fault_captured"
        assert logs[0]["fault_type"] == "ValueError"
        assert logs[0]["log_level"] == "debug"
