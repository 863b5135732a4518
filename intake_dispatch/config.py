"""
Configuration Management Module

Configures dispatch policy via environment variables or .env file.
Every variable is read with the ``INTAKE_DISPATCH_`` prefix, e.g.
``INTAKE_DISPATCH_ANTHROPIC_FALLBACK_MAX_TOKENS=8192``.
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# [2024-07-12] max output tokens across Anthropic models, per their model docs
DEFAULT_ANTHROPIC_MAX_TOKENS = 4096


class Settings(BaseSettings):
    """
    Dispatch Configuration Class

    All configuration items can be overridden by environment variables, with
    names matching fields (uppercase, prefixed).
    """

    # Debug logging
    DEBUG: bool = False

    # Anthropic Adapter Config
    # Move inline images ahead of the other parts of each message
    ANTHROPIC_IMAGE_PARTS_FIRST: bool = True
    # Send model-authored images as user content (Anthropic rejects assistant images)
    ANTHROPIC_MAP_MODEL_IMAGES_TO_USER: bool = True
    # max_tokens used when the model config does not set one
    ANTHROPIC_FALLBACK_MAX_TOKENS: int = DEFAULT_ANTHROPIC_MAX_TOKENS

    model_config = SettingsConfigDict(
        env_prefix="INTAKE_DISPATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    def anthropic_options(self) -> "AnthropicAdapterOptions":
        """Build the Anthropic adapter policy from these settings."""
        return AnthropicAdapterOptions(
            image_parts_first=self.ANTHROPIC_IMAGE_PARTS_FIRST,
            map_model_images_to_user=self.ANTHROPIC_MAP_MODEL_IMAGES_TO_USER,
            fallback_max_tokens=self.ANTHROPIC_FALLBACK_MAX_TOKENS,
        )


@dataclass(frozen=True)
class AnthropicAdapterOptions:
    """
    Policy knobs of the Anthropic adapter.

    Passed explicitly to each conversion so the outcome of a call never
    depends on shared mutable state.
    """

    # Stable-partition inline images ahead of the other parts of a message
    image_parts_first: bool = True
    # Remap model images to user image blocks instead of failing
    map_model_images_to_user: bool = True
    # max_tokens when ModelConfig.max_tokens is unset
    fallback_max_tokens: int = DEFAULT_ANTHROPIC_MAX_TOKENS


@lru_cache()
def get_settings() -> Settings:
    """
    Get dispatch configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Dispatch configuration instance
    """
    return Settings()
