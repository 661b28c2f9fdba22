"""
Test catalog for the approve validation engine.

The catalog maps rule names to TestDescriptor instances. It is populated
with the built-in tests at startup, optionally extended with custom tests,
and read-only in steady state. Registration never overwrites: the first
descriptor registered under a name wins.
"""

import logging
import threading
from typing import Any, Dict, Iterator, List, Optional

from .exceptions import InvalidArgument, TestNotDefined
from .models import TestDescriptor

logger = logging.getLogger(__name__)


class TestCatalog:
    """
    Thread-safe registry of validation tests keyed by rule name.

    Attributes:
        _tests (Dict[str, TestDescriptor]): Registered descriptors in
            registration order
        _lock (threading.RLock): Guards registration and lookup
    """

    __test__ = False

    def __init__(self, tests: Optional[Dict[str, Any]] = None):
        """
        Initialize a catalog.

        Args:
            tests: Optional mapping of rule names to test definitions to
                register immediately
        """
        self._tests: Dict[str, TestDescriptor] = {}
        self._lock = threading.RLock()
        for name, test in (tests or {}).items():
            self.register(name, test)

    @classmethod
    def with_builtins(cls, config=None) -> "TestCatalog":
        """
        Create a catalog pre-populated with the built-in tests.

        Args:
            config: Optional ApproveConfig controlling built-in defaults

        Returns:
            TestCatalog: A new catalog holding every built-in test
        """
        from ..builtins import register_builtins

        catalog = cls()
        register_builtins(catalog, config)
        return catalog

    def register(self, name: str, test: Any) -> bool:
        """
        Register a test under a name unless the name is already taken.

        Args:
            name: Rule name the test is dispatched under
            test: A TestDescriptor, a mapping or an object exposing
                ``validate``, ``message`` and ``expects``

        Returns:
            bool: True if the test was added, False if the name already existed

        Raises:
            InvalidArgument: If the name is empty or the test is malformed
        """
        descriptor = TestDescriptor.from_object(test)
        if not isinstance(name, str) or not name:
            raise InvalidArgument("test name must be a non-empty string")
        if name in ("title", "message"):
            raise InvalidArgument(f"{name!r} is a reserved rule set key", rule=name)

        with self._lock:
            if name in self._tests:
                logger.warning(f"Test already registered, ignoring: {name}")
                return False
            self._tests[name] = descriptor

        logger.debug(f"Registered test: {name}")
        return True

    def lookup(self, name: str) -> TestDescriptor:
        """
        Return the descriptor registered under ``name``.

        Raises:
            TestNotDefined: If no test has that name
        """
        with self._lock:
            try:
                return self._tests[name]
            except KeyError:
                raise TestNotDefined(name) from None

    def get(self, name: str) -> Optional[TestDescriptor]:
        with self._lock:
            return self._tests.get(name)

    def names(self) -> List[str]:
        """Registered rule names in registration order."""
        with self._lock:
            return list(self._tests)

    def copy(self) -> "TestCatalog":
        """Return an independent catalog with the same registrations."""
        with self._lock:
            return TestCatalog(dict(self._tests))

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._tests

    def __len__(self) -> int:
        with self._lock:
            return len(self._tests)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
