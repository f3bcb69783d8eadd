"""
Pytest configuration and shared fixtures.
"""

import pytest

from deprecation_admonition.core import create_block
from deprecation_admonition.extensions import (
    DeprecationAdmonition,
    ExtensionRegistry,
    create_default_registry,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def processor():
    """Create the DEPRECATED block processor."""
    return DeprecationAdmonition()


@pytest.fixture
def parent():
    """Create an enclosing document node."""
    return create_block(None, "document", [], {})


@pytest.fixture
def registry():
    """Create a registry with the built-in extensions."""
    return create_default_registry()


@pytest.fixture
def empty_registry():
    """Create a registry with nothing registered."""
    return ExtensionRegistry()

