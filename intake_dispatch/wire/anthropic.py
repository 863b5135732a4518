"""
Anthropic Messages Wire Schema

Pydantic models for the body of Anthropic's ``POST /v1/messages`` request,
plus the builders used to create its content blocks. The models act as the
last-chance validator before a payload is released to the transport layer.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


AnthropicImageMediaType = Literal["image/jpeg", "image/png", "image/gif", "image/webp"]


class AnthropicWireModel(BaseModel):
    """Base for wire models. Unknown keys are stripped, not rejected."""

    model_config = ConfigDict(extra="ignore")


# =============================================================================
# Content Blocks
# =============================================================================

class AnthropicTextBlock(AnthropicWireModel):
    type: Literal["text"]
    text: str


class AnthropicBase64ImageSource(AnthropicWireModel):
    type: Literal["base64"]
    media_type: AnthropicImageMediaType
    data: str


class AnthropicImageBlock(AnthropicWireModel):
    type: Literal["image"]
    source: AnthropicBase64ImageSource


class AnthropicToolUseBlock(AnthropicWireModel):
    type: Literal["tool_use"]
    id: str
    name: str
    input: Dict[str, Any]


AnthropicToolResultContent = Annotated[
    Union[AnthropicTextBlock, AnthropicImageBlock],
    Field(discriminator="type"),
]


class AnthropicToolResultBlock(AnthropicWireModel):
    type: Literal["tool_result"]
    tool_use_id: str
    content: List[AnthropicToolResultContent] = Field(default_factory=list)
    is_error: Optional[bool] = None


AnthropicContentBlock = Annotated[
    Union[
        AnthropicTextBlock,
        AnthropicImageBlock,
        AnthropicToolUseBlock,
        AnthropicToolResultBlock,
    ],
    Field(discriminator="type"),
]


class AnthropicMessage(AnthropicWireModel):
    role: Literal["user", "assistant"]
    content: List[AnthropicContentBlock] = Field(..., min_length=1)


# =============================================================================
# Tools
# =============================================================================

class AnthropicToolInputSchema(AnthropicWireModel):
    type: Literal["object"]
    properties: Optional[Dict[str, Any]] = None
    required: Optional[List[str]] = None


class AnthropicTool(AnthropicWireModel):
    name: str = Field(..., pattern=r"^[a-zA-Z0-9_-]{1,64}$")
    description: Optional[str] = None
    input_schema: AnthropicToolInputSchema


class AnthropicToolChoiceAuto(AnthropicWireModel):
    type: Literal["auto"]


class AnthropicToolChoiceAny(AnthropicWireModel):
    type: Literal["any"]


class AnthropicToolChoiceTool(AnthropicWireModel):
    type: Literal["tool"]
    name: str


AnthropicToolChoice = Annotated[
    Union[AnthropicToolChoiceAuto, AnthropicToolChoiceAny, AnthropicToolChoiceTool],
    Field(discriminator="type"),
]


# =============================================================================
# Request
# =============================================================================

class AnthropicMetadata(AnthropicWireModel):
    user_id: Optional[str] = None


class AnthropicMessageCreate(AnthropicWireModel):
    """Anthropic Messages API request body."""

    max_tokens: int = Field(..., ge=1)
    model: str = Field(..., min_length=1)
    system: Optional[List[AnthropicTextBlock]] = None
    messages: List[AnthropicMessage] = Field(..., min_length=1)
    tools: Optional[List[AnthropicTool]] = None
    tool_choice: Optional[AnthropicToolChoice] = None
    metadata: Optional[AnthropicMetadata] = None
    stop_sequences: Optional[List[str]] = None
    stream: Optional[bool] = None
    temperature: Optional[float] = Field(None, ge=0.0, le=1.0)
    top_k: Optional[int] = Field(None, ge=0)
    top_p: Optional[float] = Field(None, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_alternating_roles(self) -> "AnthropicMessageCreate":
        """Adjacent messages must not share a role."""
        for index in range(1, len(self.messages)):
            role = self.messages[index].role
            if role == self.messages[index - 1].role:
                raise ValueError(
                    f"messages.{index}: consecutive '{role}' messages must be merged"
                )
        return self


def validate_message_create(payload: Dict[str, Any]) -> AnthropicMessageCreate:
    """
    Validate a request body against the Anthropic wire schema.

    Raises:
        pydantic.ValidationError: If the payload does not match the schema
    """
    return AnthropicMessageCreate.model_validate(payload)


# =============================================================================
# Block Builders
# =============================================================================

def text_block(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text}


def image_block(media_type: str, data: str) -> Dict[str, Any]:
    return {
        "type": "image",
        "source": {
            "type": "base64",
            "media_type": media_type,
            "data": data,
        },
    }


def tool_use_block(id: str, name: str, input: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "tool_use", "id": id, "name": name, "input": input}


def tool_result_block(
    tool_use_id: str,
    content: List[Dict[str, Any]],
    is_error: Optional[bool] = None,
) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "type": "tool_result",
        "tool_use_id": tool_use_id,
        "content": content,
    }
    if is_error is not None:
        result["is_error"] = is_error
    return result
