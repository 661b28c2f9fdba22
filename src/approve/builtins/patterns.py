"""
Presence and pattern tests.

Each pattern test coerces the value to a string and checks it against a
compiled regular expression captured when the descriptor is built.
"""

import ipaddress
import re
from typing import Any, Dict, Pattern

from ..core.models import TestDescriptor

EMAIL_PATTERN = re.compile(
    r"^((([a-z]|\d|[!#\$%&'\*\+\-\/=\?\^_`{\|}~]|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])+(\.([a-z]|\d|[!#\$%&'\*\+\-\/=\?\^_`{\|}~]|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])+)*)|((\x22)((((\x20|\x09)*(\x0d\x0a))?(\x20|\x09)+)?(([\x01-\x08\x0b\x0c\x0e-\x1f\x7f]|\x21|[\x23-\x5b]|[\x5d-\x7e]|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])|(\\([\x01-\x09\x0b\x0c\x0d-\x7f]|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF]))))*(((\x20|\x09)*(\x0d\x0a))?(\x20|\x09)+)?(\x22)))@((([a-z]|\d|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])|(([a-z]|\d|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])([a-z]|\d|-|\.|_|~|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])*([a-z]|\d|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])))\.)+(([a-z]|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])|(([a-z]|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])([a-z]|\d|-|\.|_|~|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])*([a-z]|[\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF])))$",
    re.IGNORECASE,
)
URL_PATTERN = re.compile(
    r"^(?:(?:https?|ftp):\/\/)?(?:(?!(?:10|127)(?:\.\d{1,3}){3})(?!(?:169\.254|192\.168)(?:\.\d{1,3}){2})(?!172\.(?:1[6-9]|2\d|3[0-1])(?:\.\d{1,3}){2})(?:[1-9]\d?|1\d\d|2[01]\d|22[0-3])(?:\.(?:1?\d{1,2}|2[0-4]\d|25[0-5])){2}(?:\.(?:[1-9]\d?|1\d\d|2[0-4]\d|25[0-4]))|(?:(?:[a-z\u00a1-\uffff0-9]-*)*[a-z\u00a1-\uffff0-9]+)(?:\.(?:[a-z\u00a1-\uffff0-9]-*)*[a-z\u00a1-\uffff0-9]+)*(?:\.(?:[a-z\u00a1-\uffff]{2,})))(?::\d{2,5})?(?:\/\S*)?$",
    re.IGNORECASE,
)
CC_PATTERN = re.compile(
    r"^(?:(4[0-9]{12}(?:[0-9]{3})?)|(5[1-5][0-9]{14})|(6(?:011|5[0-9]{2})[0-9]{12})"
    r"|(3[47][0-9]{13})|(3(?:0[0-5]|[68][0-9])[0-9]{11})|((?:2131|1800|35[0-9]{3})[0-9]{11}))$"
)
ALPHA_NUMERIC_PATTERN = re.compile(r"^[A-Za-z0-9]+$", re.IGNORECASE)
NUMERIC_PATTERN = re.compile(r"^[0-9]+$")
ALPHA_PATTERN = re.compile(r"^[A-Za-z]+$")
DECIMAL_PATTERN = re.compile(r"^\s*(\+|-)?((\d+(\.\d+)?)|(\.\d+))\s*$")
CURRENCY_PATTERN = re.compile(r"^\s*(\+|-)?((\d+(\.\d\d)?)|(\.\d\d))\s*$")


def as_text(value: Any) -> str:
    """Coerce a value to the string form pattern tests run against."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def pattern_test(pattern: Pattern[str], message: str) -> TestDescriptor:
    """
    Build a parameterless test that passes when ``pattern`` matches the value.

    Args:
        pattern: Compiled regular expression
        message: Default message template

    Returns:
        TestDescriptor: The pattern test
    """

    def validate(value: Any, args: Dict[str, Any]) -> bool:
        return pattern.search(as_text(value)) is not None

    return TestDescriptor(validate=validate, message=message)


def validate_required(value: Any, args: Dict[str, Any]) -> bool:
    return bool(value)


def validate_ip(value: Any, args: Dict[str, Any]) -> bool:
    """Pass for a dotted-quad IPv4 or any valid IPv6 address."""
    try:
        ipaddress.ip_address(as_text(value))
    except ValueError:
        return False
    return True


def pattern_tests() -> Dict[str, TestDescriptor]:
    """Return the presence and pattern tests keyed by rule name."""
    return {
        "required": TestDescriptor(validate=validate_required, message="{title} is required"),
        "email": pattern_test(EMAIL_PATTERN, "{title} must be a valid email address"),
        "url": pattern_test(URL_PATTERN, "{title} must be a valid web address"),
        "cc": pattern_test(CC_PATTERN, "{title} must be a valid credit card number"),
        "alphaNumeric": pattern_test(
            ALPHA_NUMERIC_PATTERN, "{title} may only contain [A-Za-z] and [0-9]"
        ),
        "numeric": pattern_test(NUMERIC_PATTERN, "{title} may only contain [0-9]"),
        "alpha": pattern_test(ALPHA_PATTERN, "{title} may only contain [A-Za-z]"),
        "decimal": pattern_test(DECIMAL_PATTERN, "{title} must be a valid decimal"),
        "currency": pattern_test(CURRENCY_PATTERN, "{title} must be a valid currency value"),
        "ip": TestDescriptor(validate=validate_ip, message="{title} must be a valid IP address"),
    }
