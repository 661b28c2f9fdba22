"""
Core components of the approve validation engine.

This package contains the dispatch and formatting machinery:
- exceptions: the error taxonomy
- models: TestDescriptor, Outcome, Result and StrengthScore
- formatter: placeholder substitution for messages
- catalog: the registry of tests
- arguments: parameter extraction from constraints
- dispatcher: the Approver tying everything together
"""

from .arguments import TestParams, extract_args, format_context
from .catalog import TestCatalog
from .exceptions import (
    ApproveError,
    ConfigurationError,
    InvalidArgument,
    InvalidTestReturn,
    MissingParameter,
    MissingPlaceholder,
    TestNotDefined,
)
from .formatter import format_message
from .models import Outcome, Result, StrengthScore, TestDescriptor

__all__ = [
    "ApproveError",
    "ConfigurationError",
    "InvalidArgument",
    "InvalidTestReturn",
    "MissingParameter",
    "MissingPlaceholder",
    "Outcome",
    "Result",
    "StrengthScore",
    "TestCatalog",
    "TestDescriptor",
    "TestNotDefined",
    "TestParams",
    "extract_args",
    "format_context",
    "format_message",
]
