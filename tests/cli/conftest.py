"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging

import pytest

from mhash.settings import MhashSettings
from mhash.settings import set_global_settings


@pytest.fixture(autouse=True)
def isolate_cli():
    """Keep CLI runs away from installed entry-point plugins and restore logging state.

    ``mhash --verbose`` calls ``logging.basicConfig``, which adds a handler to the root logger and
    lowers its level. Restoring both keeps later tests using ``caplog`` isolated.
    """
    set_global_settings(MhashSettings(load_entry_points=False))

    root_level = logging.root.level
    root_handlers = logging.root.handlers[:]

    yield

    logging.root.handlers = root_handlers
    logging.root.setLevel(root_level)
