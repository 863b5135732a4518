"""
Wire Schemas Module

Vendor request schemas that dispatched payloads are validated against.
"""

from enum import Enum

from .anthropic import (
    AnthropicMessageCreate,
    AnthropicMessage,
    AnthropicContentBlock,
    AnthropicTextBlock,
    AnthropicImageBlock,
    AnthropicToolUseBlock,
    AnthropicToolResultBlock,
    AnthropicTool,
    AnthropicToolChoice,
    validate_message_create,
    text_block,
    image_block,
    tool_use_block,
    tool_result_block,
)


class Dialect(str, Enum):
    """Supported target wire dialects."""
    ANTHROPIC = "anthropic"


__all__ = [
    "Dialect",
    # Anthropic schema
    "AnthropicMessageCreate",
    "AnthropicMessage",
    "AnthropicContentBlock",
    "AnthropicTextBlock",
    "AnthropicImageBlock",
    "AnthropicToolUseBlock",
    "AnthropicToolResultBlock",
    "AnthropicTool",
    "AnthropicToolChoice",
    "validate_message_create",
    # Anthropic block builders
    "text_block",
    "image_block",
    "tool_use_block",
    "tool_result_block",
]
