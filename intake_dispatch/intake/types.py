"""
Intake Type Definitions

Provider-neutral chat generation request, as handed over by the intake layer.
Models parse the intake JSON (camelCase keys) and can also be built directly
from Python with snake_case names. Which part types are legal for which role
is not checked here: that is the job of each dialect adapter.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class IntakeModel(BaseModel):
    """Base for all intake models: immutable, accepts field names or aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# =============================================================================
# Message Parts
# =============================================================================

class TextPart(IntakeModel):
    """Plain text."""
    pt: Literal["text"] = "text"
    text: str


class InlineImagePart(IntakeModel):
    """Base64-encoded image carried inline."""
    pt: Literal["inline_image"] = "inline_image"
    mime_type: str = Field(..., alias="mimeType")
    base64: str


class DocPartData(IntakeModel):
    """Body of an attached document."""
    mimetype: str = "text/plain"
    text: str


class DocPart(IntakeModel):
    """Attached text document, referred to by name."""
    pt: Literal["doc"] = "doc"
    ref: str = ""
    data: DocPartData


class MetaReplyToPart(IntakeModel):
    """Marker that the user is replying to earlier content."""
    pt: Literal["meta_reply_to"] = "meta_reply_to"
    reply_to: str = Field(..., alias="replyTo")


class ToolCallPart(IntakeModel):
    """Function invocation requested by the model."""
    pt: Literal["tool_call"] = "tool_call"
    id: str
    name: str
    args: Dict[str, Any] = Field(default_factory=dict)


class ToolResponsePart(IntakeModel):
    """Result of a previous tool call."""
    pt: Literal["tool_response"] = "tool_response"
    id: str
    response: str = ""
    is_error: Optional[bool] = Field(None, alias="isError")


ChatMessagePart = Annotated[
    Union[
        TextPart,
        InlineImagePart,
        DocPart,
        MetaReplyToPart,
        ToolCallPart,
        ToolResponsePart,
    ],
    Field(discriminator="pt"),
]


# =============================================================================
# Messages
# =============================================================================

class SystemMessage(IntakeModel):
    """System instruction, made of text parts only."""
    parts: List[TextPart] = Field(default_factory=list)


class ChatMessage(IntakeModel):
    """A single chat turn."""
    role: Literal["user", "model", "tool"]
    parts: List[ChatMessagePart] = Field(default_factory=list)


# =============================================================================
# Tools
# =============================================================================

class FunctionInputSchema(IntakeModel):
    """JSON Schema fragment for function arguments."""
    properties: Optional[Dict[str, Any]] = None
    required: Optional[List[str]] = None


class FunctionCallDefinition(IntakeModel):
    """Declared function the model may call."""
    name: str
    description: Optional[str] = None
    input_schema: Optional[FunctionInputSchema] = None


class FunctionCallToolDefinition(IntakeModel):
    type: Literal["function_call"] = "function_call"
    function_call: FunctionCallDefinition


class GeminiCodeInterpreterToolDefinition(IntakeModel):
    type: Literal["gemini_code_interpreter"] = "gemini_code_interpreter"


class PreprocessorToolDefinition(IntakeModel):
    type: Literal["preprocessor"] = "preprocessor"
    pname: str = "anthropic_artifacts"


ToolDefinition = Annotated[
    Union[
        FunctionCallToolDefinition,
        GeminiCodeInterpreterToolDefinition,
        PreprocessorToolDefinition,
    ],
    Field(discriminator="type"),
]


class AutoToolsPolicy(IntakeModel):
    type: Literal["auto"] = "auto"


class AnyToolsPolicy(IntakeModel):
    type: Literal["any"] = "any"


class FunctionCallName(IntakeModel):
    name: str


class FunctionCallToolsPolicy(IntakeModel):
    type: Literal["function_call"] = "function_call"
    function_call: FunctionCallName


ToolsPolicy = Annotated[
    Union[AutoToolsPolicy, AnyToolsPolicy, FunctionCallToolsPolicy],
    Field(discriminator="type"),
]


# =============================================================================
# Request
# =============================================================================

class ModelConfig(IntakeModel):
    """Target model and its sampling settings."""
    id: str
    max_tokens: Optional[int] = Field(None, alias="maxTokens")
    temperature: Optional[float] = None


class GenerationRequest(IntakeModel):
    """
    Chat generation request.

    This is what every dialect adapter consumes to produce its own wire payload.
    """
    system_message: Optional[SystemMessage] = Field(None, alias="systemMessage")
    chat_sequence: List[ChatMessage] = Field(default_factory=list, alias="chatSequence")
    tools: Optional[List[ToolDefinition]] = None
    tools_policy: Optional[ToolsPolicy] = Field(None, alias="toolsPolicy")
