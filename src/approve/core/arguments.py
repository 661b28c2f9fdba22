"""
Parameter extraction for test invocation.

A constraint is either a bare value (``{"min": 5}``) or a mapping carrying
the test's parameters by name plus optional ``message`` and ``config`` keys
(``{"range": {"min": 5, "max": 20}}``). This module turns a constraint into
the argument bundle handed to a test's validate function, and into the
Format Context used to render its messages.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Pattern

from .exceptions import MissingParameter
from .formatter import render_value
from .models import TestDescriptor

SHORTHAND_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


@dataclass(frozen=True)
class TestParams:
    """
    Everything needed to run one rule against one value.

    Attributes:
        constraint: The value attached to the rule in the rule set
        rule: The rule name
        title: Human label substituted for ``{title}``
        test: The descriptor registered under the rule name
        value: The value being validated
    """

    __test__ = False

    constraint: Any
    rule: str
    title: str
    test: TestDescriptor
    value: Any

    @property
    def keyed(self) -> Mapping[str, Any]:
        """The constraint when it is a mapping, otherwise an empty mapping."""
        if isinstance(self.constraint, Mapping):
            return self.constraint
        return {}


def is_shorthand(constraint: Any, pattern: Pattern[str] = SHORTHAND_PATTERN) -> bool:
    """Check whether a bare constraint can stand in for a single parameter."""
    if isinstance(constraint, (Mapping, re.Pattern)):
        return False
    return bool(pattern.match(render_value(constraint)))


def extract_args(params: TestParams, pattern: Pattern[str] = SHORTHAND_PATTERN) -> Dict[str, Any]:
    """
    Build the argument bundle for a test from its constraint.

    Each expected parameter is taken from the constraint mapping when
    present. Otherwise, when the test expects exactly one parameter and the
    constraint is a bare alphanumeric token, the constraint itself is used.
    A ``config`` entry on the constraint is passed through untouched.

    Args:
        params: The parameter bundle for the current rule
        pattern: Shape a bare constraint must have to be used as shorthand

    Returns:
        Dict[str, Any]: Arguments keyed by parameter name

    Raises:
        MissingParameter: If an expected parameter cannot be resolved

    Example:
        >>> test = TestCatalog.with_builtins().lookup("min")
        >>> extract_args(TestParams(5, "min", "", test, "abc123"))
        {'min': 5}
    """
    expects = params.test.expects
    keyed = params.keyed
    args: Dict[str, Any] = {}

    # Checked last to first, so the last declared parameter is reported missing first.
    for name in reversed(expects):
        if name in keyed:
            args[name] = keyed[name]
        elif len(expects) == 1 and is_shorthand(params.constraint, pattern):
            args[name] = params.constraint
        else:
            raise MissingParameter(params.rule, name)

    if "config" in keyed:
        args["config"] = keyed["config"]
    return args


def format_context(params: TestParams, pattern: Pattern[str] = SHORTHAND_PATTERN) -> Dict[str, Any]:
    """
    Build the placeholder values available to a rule's messages.

    The context holds the expected parameters (keyed or shorthand) and the
    rule set's ``title``.
    """
    keyed = params.keyed
    context: Dict[str, Any] = {}
    for name in params.test.expects:
        if name in keyed:
            context[name] = keyed[name]
        if is_shorthand(params.constraint, pattern):
            context[name] = params.constraint
    context["title"] = params.title
    return context
