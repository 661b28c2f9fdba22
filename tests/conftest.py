"""Shared test fixtures."""

import pytest

from approve.config import ApproveConfig
from approve.core.catalog import TestCatalog
from approve.core.dispatcher import Approver


@pytest.fixture
def config() -> ApproveConfig:
    """Fixture providing default engine settings."""
    return ApproveConfig()


@pytest.fixture
def catalog(config) -> TestCatalog:
    """Fixture providing a fresh catalog holding the built-in tests."""
    return TestCatalog.with_builtins(config)


@pytest.fixture
def approver(catalog, config) -> Approver:
    """Fixture providing an approver bound to a fresh catalog."""
    return Approver(catalog=catalog, config=config)
