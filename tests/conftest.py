"""Shared fixtures for the minischema test-suite.

Logging and settings are process-global; every test starts from structlog's
defaults and a fresh settings cache so environment overrides do not leak.
"""
from __future__ import annotations

import logging

import pytest
import structlog

from minischema.config import get_settings
from minischema.logging import LoggerRegistry


@pytest.fixture(autouse=True)
def _isolate_globals():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    LoggerRegistry._loggers.clear()
    get_settings.cache_clear()
    root.handlers = handlers
    root.setLevel(level)
