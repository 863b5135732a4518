"""
Unit Tests for Dispatch Exceptions
"""

from intake_dispatch.adapters.exceptions import (
    CapabilityNotSupportedError,
    ConversionError,
    UnsupportedPartTypeError,
    ValidationError,
)


def test_conversion_error_to_dict():
    error = ConversionError("boom", dialect="anthropic", field="tools")

    assert error.to_dict() == {
        "error": "conversion_error",
        "message": "boom",
        "dialect": "anthropic",
        "field": "tools",
        "details": {},
    }


def test_unsupported_part_type_to_dict():
    error = UnsupportedPartTypeError("tool", "text", dialect="anthropic")
    result = error.to_dict()

    assert isinstance(error, ConversionError)
    assert result["error"] == "unsupported_part_type"
    assert result["message"] == "Unsupported part type in Tool message: text"
    assert result["role"] == "tool"
    assert result["part_type"] == "text"


def test_capability_not_supported_default_message():
    error = CapabilityNotSupportedError("preprocessor")

    assert str(error) == "Capability 'preprocessor' is not supported"
    assert error.to_dict()["error"] == "capability_not_supported"
    assert error.to_dict()["capability"] == "preprocessor"


def test_validation_error_keeps_all_errors():
    errors = [{"type": "missing", "loc": ("model",), "msg": "Field required"}]
    error = ValidationError("Invalid payload: Field required", field="payload", errors=errors)

    assert error.errors == errors
    assert error.to_dict()["error"] == "validation_error"
    assert error.to_dict()["details"] == {"errors": errors}
