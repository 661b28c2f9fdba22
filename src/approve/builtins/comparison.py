"""
Comparison tests: equal and format.

``equal`` compares the string forms of the value and another field's value.
``format`` checks the value against a caller-supplied compiled pattern.
"""

import re
from typing import Any, Dict

from ..core.exceptions import InvalidArgument
from ..core.models import TestDescriptor
from .patterns import as_text


def validate_equal(value: Any, args: Dict[str, Any]) -> bool:
    return as_text(value) == as_text(args["value"])


def validate_format(value: Any, args: Dict[str, Any]) -> bool:
    """
    Check the value against ``args["regex"]``.

    Raises:
        InvalidArgument: If the regex parameter is not a compiled pattern
    """
    pattern = args["regex"]
    if not isinstance(pattern, re.Pattern):
        raise InvalidArgument("regex is not a valid regular expression", rule="format")
    return pattern.search(as_text(value)) is not None


def comparison_tests() -> Dict[str, TestDescriptor]:
    """Return the comparison tests keyed by rule name."""
    return {
        "equal": TestDescriptor(
            validate=validate_equal,
            message="{title} must be equal to {field}",
            expects=("value", "field"),
        ),
        "format": TestDescriptor(
            validate=validate_format,
            message="{title} did not pass the [{regex}] test",
            expects=("regex",),
        ),
    }
