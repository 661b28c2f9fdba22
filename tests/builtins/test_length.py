"""
Tests for the min, max and range tests.
"""

import pytest

from approve.core.exceptions import InvalidArgument


@pytest.mark.parametrize(
    "value, rules, approved",
    [
        ("abc", {"min": 3}, True),
        ("abcdef", {"min": 5.0}, True),
        ("abcd", {"min": 5.0}, False),
        ("ab", {"min": 3}, False),
        ("abc", {"min": {"min": 3}}, True),
        ("abcdef", {"max": 5}, False),
        ("abcde", {"max": 5}, True),
        ("abc", {"range": {"min": 2, "max": 4}}, True),
        ("a", {"range": {"min": 2, "max": 4}}, False),
        ("abcde", {"range": {"min": 2, "max": 4}}, False),
    ],
)
def test_length_rules(approver, value, rules, approved):
    """Test length boundaries."""
    assert approver.value(value, rules).approved is approved


@pytest.mark.parametrize("rule", ["min", "max"])
def test_non_string_values_fail(approver, rule):
    """Test that only strings have a length to check."""
    assert approver.value(12345, {rule: 1}).approved is False


def test_range_message(approver):
    """Test the range message lists both bounds."""
    result = approver.value("a", {"range": {"min": 2, "max": 4}, "title": "Code"})
    assert result.errors == ["Code must be a minimum of 2 and a maximum of 4 characters"]


def test_max_message(approver):
    """Test the max message."""
    result = approver.value("abcdef", {"max": 5, "title": "Code"})
    assert result.errors == ["Code must be a maximum of 5 characters"]


def test_non_integer_length(approver):
    """Test a length parameter that is not a number."""
    with pytest.raises(InvalidArgument):
        approver.value("abc", {"min": "abc"})


def test_integral_float_length_message(approver):
    """Test that a whole-number float renders without a decimal part."""
    result = approver.value("abc", {"min": 5.0, "title": "Code"})
    assert result.errors == ["Code must be a minimum of 5 characters"]
