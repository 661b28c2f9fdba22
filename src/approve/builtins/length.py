"""Length tests: min, max and range."""

from typing import Any, Dict

from ..core.exceptions import InvalidArgument
from ..core.models import TestDescriptor


def as_length(args: Dict[str, Any], name: str) -> int:
    """Read a length parameter as an integer."""
    try:
        return int(args[name])
    except (TypeError, ValueError):
        raise InvalidArgument(f"{name} must be an integer, got {args[name]!r}", rule=name) from None


def validate_min(value: Any, args: Dict[str, Any]) -> bool:
    return isinstance(value, str) and len(value) >= as_length(args, "min")


def validate_max(value: Any, args: Dict[str, Any]) -> bool:
    return isinstance(value, str) and len(value) <= as_length(args, "max")


def validate_range(value: Any, args: Dict[str, Any]) -> bool:
    return (
        isinstance(value, str)
        and as_length(args, "min") <= len(value) <= as_length(args, "max")
    )


def length_tests() -> Dict[str, TestDescriptor]:
    """Return the length tests keyed by rule name."""
    return {
        "min": TestDescriptor(
            validate=validate_min,
            message="{title} must be a minimum of {min} characters",
            expects=("min",),
        ),
        "max": TestDescriptor(
            validate=validate_max,
            message="{title} must be a maximum of {max} characters",
            expects=("max",),
        ),
        "range": TestDescriptor(
            validate=validate_range,
            message="{title} must be a minimum of {min} and a maximum of {max} characters",
            expects=("min", "max"),
        ),
    }
