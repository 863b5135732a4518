"""
Test Configuration Module
"""

import logging

import pytest

from intake_dispatch.config import AnthropicAdapterOptions, get_settings
from intake_dispatch.adapters import AnthropicMessageCreateAdapter


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; give every test a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_package_logger():
    """Undo logger changes made by setup_logging()."""
    package_logger = logging.getLogger("intake_dispatch")
    saved = (package_logger.level, package_logger.propagate, list(package_logger.handlers))
    yield package_logger
    package_logger.setLevel(saved[0])
    package_logger.propagate = saved[1]
    package_logger.handlers[:] = saved[2]


@pytest.fixture
def adapter():
    """Anthropic adapter with the default policy."""
    return AnthropicMessageCreateAdapter(AnthropicAdapterOptions())
