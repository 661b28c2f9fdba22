"""
Tests for message formatting.
"""

import re

import pytest

from approve.core.exceptions import MissingPlaceholder
from approve.core.formatter import fill_placeholders, format_message


def test_escaped_braces_and_substitution():
    """Test literal braces around a substituted placeholder."""
    assert format_message("{{a}} {x} {{b}}", {"x": "V"}) == "{a} V {b}"


def test_escape_takes_precedence_over_placeholder():
    """Test that a doubled brace is never read as a placeholder."""
    assert format_message("{{x}}", {"x": "V"}) == "{x}"


def test_missing_placeholder_substitutes_empty_string():
    """Test lenient handling of unresolved placeholders."""
    assert format_message("{title} is required", {}) == "is required"
    assert format_message("{title} is required") == "is required"


def test_missing_placeholder_strict_mode():
    """Test strict handling of unresolved placeholders."""
    with pytest.raises(MissingPlaceholder) as exc_info:
        format_message("{title} is required", {}, strict=True)
    assert exc_info.value.name == "title"


def test_positional_placeholders():
    """Test numeric placeholders resolved from positional arguments."""
    result = format_message("i can speak {0} since i was {1}", None, "python", 10)
    assert result == "i can speak python since i was 10"


def test_value_rendering():
    """Test display forms of substituted values."""
    assert format_message("{flag}", {"flag": True}) == "true"
    assert format_message("{none}", {"none": None}) == ""
    assert format_message("[{regex}]", {"regex": re.compile(r"^a+$")}) == "[^a+$]"
    assert format_message("{n}", {"n": 5}) == "5"
    assert format_message("{n}", {"n": 5.0}) == "5"
    assert format_message("{n}", {"n": 2.5}) == "2.5"


def test_result_is_trimmed():
    """Test surrounding whitespace removal."""
    assert format_message("  {x}  ", {"x": "y"}) == "y"


def test_non_word_tokens_are_left_alone():
    """Test that braces around non-word text are kept literally."""
    assert format_message("{a-b}", {"a-b": "x"}) == "{a-b}"


def test_fill_placeholders_keeps_unknown_names():
    """Test partial substitution leaves other placeholders for a later pass."""
    template = "{title} must be at least {min} characters {{literal}}"
    filled = fill_placeholders(template, {"min": 8.0})
    assert filled == "{title} must be at least 8 characters {{literal}}"
    assert format_message(filled, {"title": "Password"}) == (
        "Password must be at least 8 characters {literal}"
    )
