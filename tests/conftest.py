"""Conftest for all pytest configuration - fixtures, hooks, and doctest setup."""

import doctest

import pytest

from mhash.plugins import create_generation_registry
from mhash.plugins import create_validation_registry
from mhash.settings import get_global_settings
from mhash.settings import set_global_settings

# Doctest Configuration


def pytest_configure(config):
    """Configure pytest with custom doctest options."""
    doctest.ELLIPSIS_MARKER = "..."


def pytest_collection_modifyitems(items):
    """Automatically mark doctest items with the 'doctest' marker."""
    for item in items:
        if isinstance(item, pytest.DoctestItem):
            item.add_marker(pytest.mark.doctest)


# Fixtures


@pytest.fixture(autouse=True)
def restore_settings():
    """Restore the global settings after tests that change them."""
    saved = get_global_settings()
    yield
    set_global_settings(saved)


@pytest.fixture
def validators():
    """Frozen validation registry with only the built-in hashlib plugin."""
    return create_validation_registry(load_entry_points=False)


@pytest.fixture
def generators():
    """Frozen generation registry with only the built-in hashlib plugin."""
    return create_generation_registry(load_entry_points=False)
