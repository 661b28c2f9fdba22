"""
Tests for descriptors, outcomes and results.
"""

import pytest

from approve.core.exceptions import InvalidArgument, InvalidTestReturn
from approve.core.models import Outcome, Result, StrengthScore, TestDescriptor


def always(value, args):
    return True


def test_descriptor_normalizes_expects():
    """Test that false, None and lists are normalized to tuples."""
    assert TestDescriptor(always, "msg", False).expects == ()
    assert TestDescriptor(always, "msg", None).expects == ()
    assert TestDescriptor(always, "msg", ["min", "max"]).expects == ("min", "max")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"validate": "not callable", "message": "msg"},
        {"validate": always, "message": 5},
        {"validate": always, "message": "msg", "expects": "min"},
        {"validate": always, "message": "msg", "expects": ["min", ""]},
    ],
)
def test_descriptor_rejects_malformed_definitions(kwargs):
    """Test descriptor validation."""
    with pytest.raises(InvalidArgument):
        TestDescriptor(**kwargs)


def test_descriptor_is_immutable():
    """Test that descriptors cannot be rewritten after construction."""
    descriptor = TestDescriptor(always, "msg")
    with pytest.raises(AttributeError):
        descriptor.message = "other"


def test_descriptor_from_mapping():
    """Test building a descriptor from a mapping."""
    descriptor = TestDescriptor.from_object(
        {"validate": always, "message": "{title} failed", "expects": ["level"]}
    )
    assert descriptor.message == "{title} failed"
    assert descriptor.expects == ("level",)
    assert descriptor.run("x", {}) is True


def test_descriptor_from_object_attributes():
    """Test building a descriptor from a duck-typed object."""

    class Shouty:
        message = "{title} must be upper case"
        expects = False

        def validate(self, value, args):
            return value.isupper()

    descriptor = TestDescriptor.from_object(Shouty())
    assert descriptor.run("ABC", {}) is True
    assert descriptor.run("abc", {}) is False


@pytest.mark.parametrize("obj", [None, 42, "test", {"message": "no validate"}, object()])
def test_descriptor_from_invalid_object(obj):
    """Test that non-test objects are rejected."""
    with pytest.raises(InvalidArgument):
        TestDescriptor.from_object(obj)


def test_outcome_from_bool():
    """Test boolean outcomes."""
    outcome = Outcome.coerce(False, "rule")
    assert outcome.valid is False
    assert outcome.structured is False
    assert outcome.messages == ()


def test_outcome_from_mapping():
    """Test structured outcomes read from a mapping."""
    outcome = Outcome.coerce({"valid": True, "errors": ["{title} bad"], "score": 3}, "rule")
    assert outcome.valid is True
    assert outcome.messages == ("{title} bad",)
    assert outcome.data == {"valid": True, "score": 3}


def test_outcome_missing_valid_means_failure():
    """Test that a mapping without a valid key fails."""
    assert Outcome.coerce({}, "rule").valid is False


@pytest.mark.parametrize("raw", [None, 1, "yes", ["valid"]])
def test_outcome_rejects_other_returns(raw):
    """Test that unsupported returns raise InvalidTestReturn."""
    with pytest.raises(InvalidTestReturn) as exc_info:
        Outcome.coerce(raw, "custom")
    assert exc_info.value.rule == "custom"


def test_outcome_constructors():
    """Test passed and failed helpers."""
    assert Outcome.passed(score=1).data == {"score": 1}
    failed = Outcome.failed(["a", "b"], level=2)
    assert failed.valid is False
    assert failed.messages == ("a", "b")
    assert failed.data == {"level": 2}


def test_result_defaults():
    """Test a fresh result."""
    result = Result()
    assert result.approved is True
    assert result.errors == []
    assert result.extra == {}


def test_result_each_visits_last_error_first():
    """Test reverse iteration over errors."""
    result = Result(approved=False, errors=["first", "second", "third"])
    seen = []
    result.each(seen.append)
    assert seen == ["third", "second", "first"]


def test_result_each_ignores_non_callable():
    """Test that a non-callable callback is ignored."""
    Result(errors=["first"]).each(None)


def test_result_extra_access():
    """Test attribute and item access to merged data."""
    result = Result()
    result.merge({"score": {"value": 2}, "valid": False})
    assert result.score == {"value": 2}
    assert result["valid"] is False
    assert result["approved"] is True
    with pytest.raises(AttributeError):
        result.missing


def test_result_to_dict():
    """Test flattening a result."""
    result = Result(approved=False, errors=["bad"], extra={"message": "Weak"})
    assert result.to_dict() == {"approved": False, "errors": ["bad"], "message": "Weak"}


def test_results_compare_structurally():
    """Test equality of independently built results."""
    assert Result(False, ["a"], {"x": 1}) == Result(False, ["a"], {"x": 1})


def test_strength_score_to_dict():
    """Test the score dictionary keys."""
    assert set(StrengthScore().to_dict()) == {
        "value",
        "isMinimum",
        "hasLower",
        "hasUpper",
        "hasNumber",
        "hasSpecial",
        "isBonus",
        "strength",
    }
