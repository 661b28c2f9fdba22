"""
Built-in validation tests.

Provides the default catalog content:
- Presence and pattern tests: required, email, url, cc, alphaNumeric,
  numeric, alpha, decimal, currency, ip
- Length tests: min, max, range
- Comparison tests: equal, format
- Password strength: strength
"""

from typing import Dict, Optional

from ..config import ApproveConfig
from ..core.models import TestDescriptor
from .comparison import comparison_tests
from .length import length_tests
from .patterns import pattern_tests
from .strength import strength_test


def builtin_tests(config: Optional[ApproveConfig] = None) -> Dict[str, TestDescriptor]:
    """Return every built-in test keyed by rule name."""
    tests: Dict[str, TestDescriptor] = {}
    tests.update(pattern_tests())
    tests.update(length_tests())
    tests.update(comparison_tests())
    tests["strength"] = strength_test(config)
    return tests


def register_builtins(catalog, config: Optional[ApproveConfig] = None) -> None:
    """Register the built-in tests on a catalog, keeping any existing registrations."""
    for name, test in builtin_tests(config).items():
        catalog.register(name, test)


__all__ = ["builtin_tests", "register_builtins", "strength_test"]
