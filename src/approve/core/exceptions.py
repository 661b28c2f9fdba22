"""
Custom exceptions for the approve validation engine.

This module defines the hierarchy of exceptions raised by the engine. Every
error is raised synchronously to the immediate caller; the engine never
catches and continues. Each exception carries the offending rule or
parameter name as data so callers can react without parsing messages.
"""

from typing import Optional


class ApproveError(Exception):
    """
    Base class for all errors raised by the validation engine.

    Catching this type covers every failure the engine itself produces.
    Exceptions raised from inside a test's own validate function are not
    wrapped and propagate unmodified.
    """


class InvalidArgument(ApproveError, ValueError):
    """
    Raised when a call-level argument is malformed.

    Examples:
        * A rule set that is not a mapping
        * A custom test descriptor that is not a well-formed object
        * The ``format`` rule given something other than a compiled pattern
    """

    def __init__(self, message: str, rule: Optional[str] = None):
        super().__init__(message)
        self.rule = rule

    def __str__(self) -> str:
        """Format invalid argument message."""
        if self.rule:
            return f"Invalid Argument [{self.rule}]: {super().__str__()}"
        return f"Invalid Argument: {super().__str__()}"


class TestNotDefined(ApproveError, LookupError):
    """
    Raised when a rule name has no test registered in the catalog.

    Attributes:
        rule: The unknown rule name
    """

    __test__ = False

    def __init__(self, rule: str):
        super().__init__(rule)
        self.rule = rule

    def __str__(self) -> str:
        return f"Test Not Defined: {self.rule}"


class MissingParameter(ApproveError):
    """
    Raised when a parameter a test expects cannot be resolved from the constraint.

    The parameter was neither present as a key of the constraint mapping nor
    resolvable through the single-parameter shorthand.

    Attributes:
        rule: The rule being evaluated
        parameter: The expected parameter that could not be resolved
    """

    def __init__(self, rule: str, parameter: str):
        super().__init__(rule, parameter)
        self.rule = rule
        self.parameter = parameter

    def __str__(self) -> str:
        return f"Missing Parameter: {self.rule} expects the {self.parameter} parameter"


class InvalidTestReturn(ApproveError, TypeError):
    """
    Raised when a test's validate function returns an unsupported value.

    Only booleans, Outcome instances and mappings are accepted. Anything else
    is a bug in the test itself.

    Attributes:
        rule: The rule whose test misbehaved
        returned: The offending return value
    """

    def __init__(self, rule: str, returned: object):
        super().__init__(rule, returned)
        self.rule = rule
        self.returned = returned

    def __str__(self) -> str:
        return (
            f"Invalid Test Return: {self.rule} returned "
            f"{type(self.returned).__name__} instead of a bool or outcome"
        )


class MissingPlaceholder(ApproveError, KeyError):
    """
    Raised by the message formatter in strict mode when a placeholder has no value.

    Attributes:
        name: The placeholder name that could not be resolved
        template: The template being formatted
    """

    def __init__(self, name: str, template: str):
        super().__init__(name, template)
        self.name = name
        self.template = template

    def __str__(self) -> str:
        return f"Missing Placeholder: {{{self.name}}} in {self.template!r}"


class ConfigurationError(ApproveError):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-numeric strength defaults in the environment
        * Unknown log level names
    """
