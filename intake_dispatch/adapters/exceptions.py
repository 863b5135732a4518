"""
Dispatch Exceptions

Errors raised while turning an intake request into a vendor wire payload.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError


class ConversionError(Exception):
    """Base exception for dispatch conversion errors."""

    def __init__(
        self,
        message: str,
        dialect: Optional[str] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.dialect = dialect
        self.field = field
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error": "conversion_error",
            "message": self.message,
            "dialect": self.dialect,
            "field": self.field,
            "details": self.details,
        }


class UnsupportedPartTypeError(ConversionError):
    """
    Raised when a message part is not legal for the role of its message.

    Examples:
    - A tool_call part inside a tool message
    - A tool_response part inside a user message
    """

    def __init__(
        self,
        role: str,
        part_type: str,
        dialect: Optional[str] = None,
    ):
        super().__init__(
            message=f"Unsupported part type in {role.capitalize()} message: {part_type}",
            dialect=dialect,
            field="parts",
            details={"role": role, "part_type": part_type},
        )
        self.role = role
        self.part_type = part_type

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["error"] = "unsupported_part_type"
        result["role"] = self.role
        result["part_type"] = self.part_type
        return result


class CapabilityNotSupportedError(ConversionError):
    """
    Raised when a recognized capability is not implemented for the target dialect.

    Examples:
    - Gemini code interpreter tools when dispatching to Anthropic
    - Model-authored images when the user-remapping hotfix is turned off
    """

    def __init__(
        self,
        capability: str,
        message: Optional[str] = None,
        dialect: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message or f"Capability '{capability}' is not supported",
            dialect=dialect,
            field=capability,
            details=details or {},
        )
        self.capability = capability

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["error"] = "capability_not_supported"
        result["capability"] = self.capability
        return result


class ValidationError(ConversionError):
    """
    Raised when a payload (or the intake it came from) fails schema validation.

    Only the first reported problem makes it into the message; the full list
    is kept under ``details["errors"]``.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        dialect: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(
            message=message,
            dialect=dialect,
            field=field,
            details={"errors": errors or []},
        )
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["error"] = "validation_error"
        return result


def summarize_validation_error(error: Exception) -> Tuple[str, List[Dict[str, Any]]]:
    """
    Reduce a pydantic validation error to its most specific message.

    Prefers the first reported error message, then the validator's own
    message, then the plain string form of the error.
    """
    errors: List[Dict[str, Any]] = []
    if isinstance(error, PydanticValidationError):
        errors = [
            dict(e)
            for e in error.errors(
                include_url=False, include_context=False, include_input=False
            )
        ]
    first = errors[0].get("msg") if errors else None
    return first or str(error) or repr(error), errors
