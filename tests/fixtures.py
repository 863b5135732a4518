"""
Test Fixtures

Sample intake payloads (in their JSON form) for testing dispatch conversions.
"""

PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
JPEG_BASE64 = "/9j/4AAQSkZJRgABAQAAAQABAAD/2wBDAAEBAQ=="

# =============================================================================
# Model Configs
# =============================================================================

SIMPLE_MODEL = {"id": "claude-3-5-sonnet-20240620"}

MODEL_WITH_LIMITS = {
    "id": "claude-3-5-sonnet-20240620",
    "maxTokens": 8000,
    "temperature": 0.5,
}

# =============================================================================
# Generation Requests
# =============================================================================

SIMPLE_REQUEST = {
    "chatSequence": [
        {"role": "user", "parts": [{"pt": "text", "text": "Hello, how are you?"}]},
    ],
}

WITH_SYSTEM_REQUEST = {
    "systemMessage": {
        "parts": [
            {"pt": "text", "text": "You are a helpful assistant."},
            {"pt": "text", "text": "Answer in one sentence."},
        ],
    },
    "chatSequence": [
        {"role": "user", "parts": [{"pt": "text", "text": "What is 2+2?"}]},
    ],
}

EMPTY_SYSTEM_REQUEST = {
    "systemMessage": {"parts": []},
    "chatSequence": [
        {"role": "user", "parts": [{"pt": "text", "text": "Hi"}]},
    ],
}

MULTIMODAL_REQUEST = {
    "chatSequence": [
        {
            "role": "user",
            "parts": [
                {"pt": "text", "text": "A"},
                {"pt": "inline_image", "mimeType": "image/png", "base64": PNG_BASE64},
                {"pt": "text", "text": "C"},
                {"pt": "inline_image", "mimeType": "image/jpeg", "base64": JPEG_BASE64},
            ],
        },
    ],
}

DOC_AND_REPLY_REQUEST = {
    "chatSequence": [
        {
            "role": "user",
            "parts": [
                {"pt": "doc", "ref": "notes.md", "data": {"mimetype": "text/markdown", "text": "- one\n- two"}},
                {"pt": "meta_reply_to", "replyTo": "the second bullet"},
                {"pt": "text", "text": "Expand on this."},
            ],
        },
    ],
}

MODEL_IMAGE_REQUEST = {
    "chatSequence": [
        {"role": "user", "parts": [{"pt": "text", "text": "Draw a square."}]},
        {
            "role": "model",
            "parts": [
                {"pt": "text", "text": "Here it is."},
                {"pt": "inline_image", "mimeType": "image/png", "base64": PNG_BASE64},
            ],
        },
        {"role": "user", "parts": [{"pt": "text", "text": "Make it blue."}]},
    ],
}

TOOL_ROUNDTRIP_REQUEST = {
    "chatSequence": [
        {"role": "user", "parts": [{"pt": "text", "text": "What's the weather in Paris?"}]},
        {
            "role": "model",
            "parts": [
                {"pt": "text", "text": "Let me check."},
                {
                    "pt": "tool_call",
                    "id": "toolu_01",
                    "name": "get_weather",
                    "args": {"location": "Paris"},
                },
            ],
        },
        {
            "role": "tool",
            "parts": [
                {"pt": "tool_response", "id": "toolu_01", "response": "18C, sunny"},
            ],
        },
        {"role": "user", "parts": [{"pt": "text", "text": "And tomorrow?"}]},
    ],
    "tools": [
        {
            "type": "function_call",
            "function_call": {
                "name": "get_weather",
                "description": "Get current weather for a location",
                "input_schema": {
                    "properties": {
                        "location": {"type": "string", "description": "City name"},
                        "unit": {"type": "string", "enum": ["celsius", "fahrenheit"]},
                    },
                    "required": ["location"],
                },
            },
        },
    ],
    "toolsPolicy": {"type": "auto"},
}

UNSUPPORTED_TOOLS_REQUEST = {
    "chatSequence": [
        {"role": "user", "parts": [{"pt": "text", "text": "Run some code."}]},
    ],
    "tools": [{"type": "gemini_code_interpreter"}],
}
