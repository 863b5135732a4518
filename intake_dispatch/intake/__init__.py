"""
Intake Module

Provider-neutral request types consumed by the dialect adapters.
"""

from .types import (
    # Request
    GenerationRequest,
    ModelConfig,
    # Messages
    ChatMessage,
    ChatMessagePart,
    SystemMessage,
    # Parts
    TextPart,
    InlineImagePart,
    DocPart,
    DocPartData,
    MetaReplyToPart,
    ToolCallPart,
    ToolResponsePart,
    # Tools
    ToolDefinition,
    FunctionCallToolDefinition,
    FunctionCallDefinition,
    FunctionInputSchema,
    GeminiCodeInterpreterToolDefinition,
    PreprocessorToolDefinition,
    ToolsPolicy,
    AutoToolsPolicy,
    AnyToolsPolicy,
    FunctionCallToolsPolicy,
    FunctionCallName,
)

__all__ = [
    # Request
    "GenerationRequest",
    "ModelConfig",
    # Messages
    "ChatMessage",
    "ChatMessagePart",
    "SystemMessage",
    # Parts
    "TextPart",
    "InlineImagePart",
    "DocPart",
    "DocPartData",
    "MetaReplyToPart",
    "ToolCallPart",
    "ToolResponsePart",
    # Tools
    "ToolDefinition",
    "FunctionCallToolDefinition",
    "FunctionCallDefinition",
    "FunctionInputSchema",
    "GeminiCodeInterpreterToolDefinition",
    "PreprocessorToolDefinition",
    "ToolsPolicy",
    "AutoToolsPolicy",
    "AnyToolsPolicy",
    "FunctionCallToolsPolicy",
    "FunctionCallName",
]
