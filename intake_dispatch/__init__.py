"""
Intake Dispatch

Converts provider-neutral chat generation requests into validated vendor
wire payloads, ready to be sent upstream.
"""

from .adapters import (
    create_chat_generate_request,
    AnthropicMessageCreateAdapter,
    intake_to_anthropic_message_create,
    partition_images_first,
)
from .adapters.exceptions import (
    ConversionError,
    CapabilityNotSupportedError,
    UnsupportedPartTypeError,
    ValidationError,
)
from .config import AnthropicAdapterOptions, Settings, get_settings
from .intake import (
    ChatMessage,
    GenerationRequest,
    ModelConfig,
    SystemMessage,
)
from .wire import Dialect

__version__ = "0.1.0"
__all__ = [
    # Conversion
    "create_chat_generate_request",
    "intake_to_anthropic_message_create",
    "AnthropicMessageCreateAdapter",
    "partition_images_first",
    # Intake types
    "GenerationRequest",
    "ModelConfig",
    "ChatMessage",
    "SystemMessage",
    # Configuration
    "AnthropicAdapterOptions",
    "Settings",
    "get_settings",
    # Enums
    "Dialect",
    # Exceptions
    "ConversionError",
    "CapabilityNotSupportedError",
    "UnsupportedPartTypeError",
    "ValidationError",
]
