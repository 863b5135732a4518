"""
Unit Tests for Settings, Adapter Options and Logging Setup
"""

import logging

from intake_dispatch.config import (
    DEFAULT_ANTHROPIC_MAX_TOKENS,
    AnthropicAdapterOptions,
    Settings,
    get_settings,
)
from intake_dispatch.logging_config import setup_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.DEBUG is False
        assert settings.ANTHROPIC_IMAGE_PARTS_FIRST is True
        assert settings.ANTHROPIC_MAP_MODEL_IMAGES_TO_USER is True
        assert settings.ANTHROPIC_FALLBACK_MAX_TOKENS == DEFAULT_ANTHROPIC_MAX_TOKENS == 4096

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("INTAKE_DISPATCH_ANTHROPIC_IMAGE_PARTS_FIRST", "false")
        monkeypatch.setenv("INTAKE_DISPATCH_ANTHROPIC_MAP_MODEL_IMAGES_TO_USER", "0")
        monkeypatch.setenv("INTAKE_DISPATCH_ANTHROPIC_FALLBACK_MAX_TOKENS", "8192")

        options = get_settings().anthropic_options()

        assert options == AnthropicAdapterOptions(
            image_parts_first=False,
            map_model_images_to_user=False,
            fallback_max_tokens=8192,
        )

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_default_options_match_default_settings(self):
        assert Settings().anthropic_options() == AnthropicAdapterOptions()


class TestLoggingSetup:
    """Tests for setup_logging()."""

    def test_info_level_by_default(self, restore_package_logger):
        setup_logging()

        assert restore_package_logger.level == logging.INFO
        assert restore_package_logger.propagate is False
        assert restore_package_logger.handlers

    def test_debug_level(self, monkeypatch, restore_package_logger):
        monkeypatch.setenv("INTAKE_DISPATCH_DEBUG", "true")

        setup_logging()

        assert restore_package_logger.level == logging.DEBUG
