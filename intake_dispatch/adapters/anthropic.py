"""
Anthropic Messages Adapter

Converts an intake generation request into the body of an Anthropic
Messages ``create`` call, and validates it before it leaves the process.
"""

import logging
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple

from pydantic import ValidationError as PydanticValidationError

from ..config import AnthropicAdapterOptions, get_settings
from ..intake import (
    AnyToolsPolicy,
    AutoToolsPolicy,
    ChatMessage,
    ChatMessagePart,
    DocPart,
    FunctionCallToolDefinition,
    GeminiCodeInterpreterToolDefinition,
    GenerationRequest,
    InlineImagePart,
    MetaReplyToPart,
    ModelConfig,
    PreprocessorToolDefinition,
    SystemMessage,
    TextPart,
    ToolCallPart,
    ToolDefinition,
    ToolResponsePart,
    ToolsPolicy,
)
from ..wire import (
    Dialect,
    image_block,
    text_block,
    tool_result_block,
    tool_use_block,
    validate_message_create,
)
from .exceptions import (
    CapabilityNotSupportedError,
    ConversionError,
    UnsupportedPartTypeError,
    ValidationError,
    summarize_validation_error,
)

logger = logging.getLogger(__name__)

WireRole = Literal["user", "assistant"]
RoleContentBlock = Tuple[WireRole, Dict[str, Any]]


def partition_images_first(parts: Sequence[ChatMessagePart]) -> List[ChatMessagePart]:
    """
    Stable partition: inline images first, everything else after.

    Relative order inside each group is preserved. Returns a new list.
    """
    images = [part for part in parts if isinstance(part, InlineImagePart)]
    others = [part for part in parts if not isinstance(part, InlineImagePart)]
    return images + others


class AnthropicMessageCreateAdapter:
    """Encodes intake requests to Anthropic Messages request bodies."""

    dialect = Dialect.ANTHROPIC.value

    def __init__(self, options: Optional[AnthropicAdapterOptions] = None):
        self.options = options or get_settings().anthropic_options()

    def encode_request(
        self,
        model: ModelConfig,
        request: GenerationRequest,
        streaming: bool,
    ) -> Dict[str, Any]:
        """
        Build and validate the Anthropic request body.

        Args:
            model: Target model id and sampling settings
            request: The intake generation request
            streaming: Value of the ``stream`` flag

        Returns:
            The validated payload, as a JSON-serializable dict

        Raises:
            UnsupportedPartTypeError: If a part is not legal for its message role
            CapabilityNotSupportedError: If a tool type or model image can't be sent
            ValidationError: If the assembled payload fails the wire schema
        """
        max_tokens = model.max_tokens
        if max_tokens is None:
            max_tokens = self.options.fallback_max_tokens

        payload: Dict[str, Any] = {
            "max_tokens": max_tokens,
            "model": model.id,
        }

        system = self.encode_system(request.system_message)
        if system is not None:
            payload["system"] = system

        payload["messages"] = self.coalesce_messages(request.chat_sequence)

        if request.tools is not None:
            payload["tools"] = self.encode_tools(request.tools)

        if request.tools_policy is not None:
            payload["tool_choice"] = self.encode_tool_choice(request.tools_policy)

        payload["stream"] = streaming

        # Only sent when set; never defaulted here
        if model.temperature is not None:
            payload["temperature"] = model.temperature

        logger.debug(
            "Encoded Anthropic request: model=%s messages=%d tools=%d stream=%s",
            model.id,
            len(payload["messages"]),
            len(payload.get("tools", [])),
            streaming,
        )

        return self.validate(payload)

    def validate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Run the payload through the wire schema.

        The validated model is what gets returned, so any defaults or
        coercions applied by the schema are part of the result.
        """
        try:
            validated = validate_message_create(payload)
        except PydanticValidationError as e:
            detail, errors = summarize_validation_error(e)
            logger.warning(
                "Anthropic payload rejected by wire schema: %s (%d errors)",
                detail,
                len(errors),
            )
            raise ValidationError(
                f"Invalid message sequence for Anthropic models: {detail}",
                field="payload",
                dialect=self.dialect,
                errors=errors,
            ) from e

        return validated.model_dump(mode="json", exclude_none=True)

    def encode_system(
        self, system_message: Optional[SystemMessage]
    ) -> Optional[List[Dict[str, Any]]]:
        """One text block per system part; None when there is nothing to send."""
        if system_message is None or not system_message.parts:
            return None
        return [text_block(part.text) for part in system_message.parts]

    def coalesce_messages(
        self, chat_sequence: Sequence[ChatMessage]
    ) -> List[Dict[str, Any]]:
        """
        Turn the chat sequence into wire messages.

        Content blocks with the same wire role are appended to the same
        message, also across intake message boundaries, so adjacent wire
        messages always alternate roles.
        """
        messages: List[Dict[str, Any]] = []
        current: Optional[Dict[str, Any]] = None

        for chat_message in chat_sequence:
            for role, block in self.generate_content_blocks(chat_message):
                if current is None or current["role"] != role:
                    if current is not None:
                        messages.append(current)
                    current = {"role": role, "content": []}
                current["content"].append(block)

        if current is not None:
            messages.append(current)

        return messages

    def generate_content_blocks(self, message: ChatMessage) -> List[RoleContentBlock]:
        """Expand one intake message into (wire role, content block) pairs."""
        # skip empty messages
        if not message.parts:
            return []

        parts: Sequence[ChatMessagePart] = message.parts
        if self.options.image_parts_first:
            parts = partition_images_first(parts)

        encoders = {
            "user": self._encode_user_part,
            "model": self._encode_model_part,
            "tool": self._encode_tool_part,
        }
        encode_part = encoders[message.role]
        return [encode_part(part) for part in parts]

    def _encode_user_part(self, part: ChatMessagePart) -> RoleContentBlock:
        if isinstance(part, TextPart):
            return "user", text_block(part.text)

        elif isinstance(part, InlineImagePart):
            return "user", image_block(part.mime_type, part.base64)

        elif isinstance(part, DocPart):
            return "user", text_block("```" + part.ref + "\n" + part.data.text + "\n```\n")

        elif isinstance(part, MetaReplyToPart):
            return "user", text_block(
                f"<context>The user is referring to: {part.reply_to}</context>"
            )

        raise UnsupportedPartTypeError("user", part.pt, dialect=self.dialect)

    def _encode_model_part(self, part: ChatMessagePart) -> RoleContentBlock:
        if isinstance(part, TextPart):
            return "assistant", text_block(part.text)

        elif isinstance(part, InlineImagePart):
            # Anthropic only accepts images authored by the user
            if not self.options.map_model_images_to_user:
                raise CapabilityNotSupportedError(
                    "model_images",
                    "Model-generated images are not supported by Anthropic yet",
                    dialect=self.dialect,
                )
            logger.debug("Remapping model image (%s) to a user image block", part.mime_type)
            return "user", image_block(part.mime_type, part.base64)

        elif isinstance(part, ToolCallPart):
            return "assistant", tool_use_block(part.id, part.name, part.args)

        raise UnsupportedPartTypeError("model", part.pt, dialect=self.dialect)

    def _encode_tool_part(self, part: ChatMessagePart) -> RoleContentBlock:
        if isinstance(part, ToolResponsePart):
            content = [text_block(part.response)] if part.response else []
            return "user", tool_result_block(part.id, content, part.is_error)

        raise UnsupportedPartTypeError("tool", part.pt, dialect=self.dialect)

    def encode_tools(self, tools: Sequence[ToolDefinition]) -> List[Dict[str, Any]]:
        """Encode tool definitions. Only function calls can be sent to Anthropic."""
        result = []
        for tool in tools:
            if isinstance(tool, FunctionCallToolDefinition):
                function_call = tool.function_call
                input_schema: Dict[str, Any] = {"type": "object"}
                if function_call.input_schema is not None:
                    if function_call.input_schema.properties is not None:
                        input_schema["properties"] = function_call.input_schema.properties
                    if function_call.input_schema.required is not None:
                        input_schema["required"] = function_call.input_schema.required

                encoded: Dict[str, Any] = {
                    "name": function_call.name,
                    "input_schema": input_schema,
                }
                if function_call.description is not None:
                    encoded["description"] = function_call.description
                result.append(encoded)

            elif isinstance(tool, GeminiCodeInterpreterToolDefinition):
                raise CapabilityNotSupportedError(
                    "gemini_code_interpreter",
                    "Gemini code interpreter is not supported",
                    dialect=self.dialect,
                )

            elif isinstance(tool, PreprocessorToolDefinition):
                raise CapabilityNotSupportedError(
                    "preprocessor",
                    "Preprocessors are not supported yet",
                    dialect=self.dialect,
                    details={"pname": tool.pname},
                )

            else:
                raise ConversionError(
                    f"Unknown tool definition type: {getattr(tool, 'type', type(tool).__name__)}",
                    dialect=self.dialect,
                    field="tools",
                )

        return result

    def encode_tool_choice(self, tools_policy: ToolsPolicy) -> Dict[str, Any]:
        """Encode the tools policy as an Anthropic tool_choice."""
        if isinstance(tools_policy, AutoToolsPolicy):
            return {"type": "auto"}
        elif isinstance(tools_policy, AnyToolsPolicy):
            return {"type": "any"}
        return {"type": "tool", "name": tools_policy.function_call.name}


def intake_to_anthropic_message_create(
    model: ModelConfig,
    request: GenerationRequest,
    streaming: bool,
    *,
    options: Optional[AnthropicAdapterOptions] = None,
) -> Dict[str, Any]:
    """Convert an intake request into a validated Anthropic Messages request body."""
    adapter = AnthropicMessageCreateAdapter(options)
    return adapter.encode_request(model, request, streaming)
