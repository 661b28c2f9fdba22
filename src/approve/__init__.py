"""
approve - a declarative value-validation engine

Validates single values against named rules and returns a Result holding
an ``approved`` flag and formatted error messages:

    >>> import approve
    >>> result = approve.value("abc", {"min": 5, "title": "Username"})
    >>> result.approved
    False
    >>> result.errors
    ['Username must be a minimum of 5 characters']

The package ships a catalog of built-in tests (presence, formats, lengths,
equality, custom patterns and password strength) and accepts custom tests
through ``add_test``.
"""

__version__ = "0.0.6"
VERSION = __version__

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("approve requires Python 3.9 or higher")

import threading
from typing import Any, Mapping, Optional

from .config import ApproveConfig, configure_logging
from .core import (
    ApproveError,
    InvalidArgument,
    InvalidTestReturn,
    MissingParameter,
    MissingPlaceholder,
    Outcome,
    Result,
    TestCatalog,
    TestDescriptor,
    TestNotDefined,
    format_message,
)
from .core.dispatcher import Approver

_default_approver: Optional[Approver] = None
_default_lock = threading.Lock()


def get_approver() -> Approver:
    """Return the process-wide approver, creating it on first use."""
    global _default_approver
    with _default_lock:
        if _default_approver is None:
            _default_approver = Approver(config=ApproveConfig.from_env())
        return _default_approver


def value(val: Any, rules: Mapping[str, Any]) -> Result:
    """Validate ``val`` against ``rules`` using the process-wide approver."""
    return get_approver().value(val, rules)


def add_test(test: Any, name: str) -> bool:
    """Register a custom test on the process-wide approver's catalog."""
    return get_approver().add_test(test, name)


__all__ = [
    "VERSION",
    "ApproveConfig",
    "ApproveError",
    "Approver",
    "InvalidArgument",
    "InvalidTestReturn",
    "MissingParameter",
    "MissingPlaceholder",
    "Outcome",
    "Result",
    "TestCatalog",
    "TestDescriptor",
    "TestNotDefined",
    "add_test",
    "configure_logging",
    "format_message",
    "get_approver",
    "value",
]
