"""
Message formatting for validation errors.

Templates use ``{name}`` placeholders resolved from a context mapping and
``{{`` / ``}}`` for literal braces. Numeric placeholders such as ``{0}``
index positional arguments. Substituted values are not escaped.
"""

import re
from typing import Any, Mapping, Optional

from .exceptions import MissingPlaceholder

TOKEN_PATTERN = re.compile(r"\{\{|\}\}|\{(\w+)\}")


def render_value(value: Any) -> str:
    """Convert a substituted value to its display form."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, re.Pattern):
        return value.pattern
    return str(value)


def format_message(
    template: str,
    context: Optional[Mapping[str, Any]] = None,
    *positional: Any,
    strict: bool = False,
) -> str:
    """
    Substitute placeholders in a message template.

    Args:
        template: Template containing ``{name}`` tokens
        context: Values for named placeholders
        *positional: Values for numeric placeholders (``{0}``, ``{1}``...)
        strict: Raise instead of substituting an empty string when a
            placeholder has no value

    Returns:
        str: The formatted message with surrounding whitespace removed

    Raises:
        MissingPlaceholder: In strict mode, when a placeholder is unresolved

    Example:
        >>> format_message("{{a}} {x} {{b}}", {"x": "V"})
        '{a} V {b}'
        >>> format_message("i can speak {0} since i was {1}", None, "python", 10)
        'i can speak python since i was 10'
    """
    context = context or {}

    def replace(match: "re.Match[str]") -> str:
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"
        name = match.group(1)
        if name in context:
            return render_value(context[name])
        if name.isdigit() and int(name) < len(positional):
            return render_value(positional[int(name)])
        if strict:
            raise MissingPlaceholder(name, template)
        return ""

    return TOKEN_PATTERN.sub(replace, template).strip()


def fill_placeholders(template: str, context: Mapping[str, Any]) -> str:
    """
    Substitute only the placeholders present in ``context``.

    Unknown placeholders and escaped braces are left untouched so the
    template can be formatted again later.

    Example:
        >>> fill_placeholders("{title} must be at least {min} characters", {"min": 8})
        '{title} must be at least 8 characters'
    """

    def replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name is not None and name in context:
            return render_value(context[name])
        return match.group(0)

    return TOKEN_PATTERN.sub(replace, template)
