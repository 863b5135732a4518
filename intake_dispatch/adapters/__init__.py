"""
Dialect Adapters Module

Turns intake generation requests into validated vendor wire payloads.
"""

from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..config import AnthropicAdapterOptions
from ..intake import GenerationRequest, ModelConfig
from ..wire import Dialect

from .anthropic import (
    AnthropicMessageCreateAdapter,
    intake_to_anthropic_message_create,
    partition_images_first,
)
from .exceptions import (
    ConversionError,
    CapabilityNotSupportedError,
    UnsupportedPartTypeError,
    ValidationError,
    summarize_validation_error,
)


# Adapter registry
_ADAPTERS = {
    Dialect.ANTHROPIC: AnthropicMessageCreateAdapter,
}

IntakeT = TypeVar("IntakeT", bound=BaseModel)


def _get_dialect(dialect: Union[Dialect, str]) -> Dialect:
    """Convert string to Dialect enum if needed."""
    if isinstance(dialect, Dialect):
        return dialect
    try:
        return Dialect(dialect.lower())
    except ValueError:
        raise CapabilityNotSupportedError(
            "dialect",
            f"Unsupported dialect: {dialect}",
            dialect=dialect,
        ) from None


def _parse_intake(
    intake_cls: Type[IntakeT],
    value: Union[IntakeT, Mapping[str, Any]],
    field: str,
) -> IntakeT:
    """Accept an intake model as-is, or parse it from its JSON form."""
    if isinstance(value, intake_cls):
        return value
    try:
        return intake_cls.model_validate(value)
    except PydanticValidationError as e:
        detail, errors = summarize_validation_error(e)
        raise ValidationError(
            f"Invalid intake {field}: {detail}",
            field=field,
            errors=errors,
        ) from e


def create_chat_generate_request(
    dialect: Union[Dialect, str],
    model: Union[ModelConfig, Mapping[str, Any]],
    request: Union[GenerationRequest, Mapping[str, Any]],
    streaming: bool,
    *,
    options: Optional[AnthropicAdapterOptions] = None,
) -> Dict[str, Any]:
    """
    Build the wire payload for a chat generation call.

    Args:
        dialect: Target wire dialect, e.g. ``"anthropic"``
        model: Model config, as a model or its intake JSON
        request: Generation request, as a model or its intake JSON
        streaming: Whether the upstream call will stream
        options: Adapter policy; defaults come from settings

    Returns:
        The validated payload in the target dialect

    Raises:
        ConversionError: If conversion fails
        CapabilityNotSupportedError: If the dialect doesn't support a required feature
        ValidationError: If the intake or the resulting payload is invalid
    """
    target = _get_dialect(dialect)
    adapter = _ADAPTERS[target](options)

    model_config = _parse_intake(ModelConfig, model, "model")
    generation_request = _parse_intake(GenerationRequest, request, "request")

    return adapter.encode_request(model_config, generation_request, streaming)


__all__ = [
    "create_chat_generate_request",
    # Anthropic
    "AnthropicMessageCreateAdapter",
    "intake_to_anthropic_message_create",
    "partition_images_first",
    # Exceptions
    "ConversionError",
    "CapabilityNotSupportedError",
    "UnsupportedPartTypeError",
    "ValidationError",
]
