# src/greeter/exceptions.py

"""
Shared custom exceptions for the Greeter service.

Centralizing exception definitions in a separate module prevents circular
import errors between the config, schema and core modules.

Exception Hierarchy:
- GreeterError (base)
  - ValidationError
    - MissingInputError
    - InvalidEventError
  - ConfigurationError
"""

from typing import Any, Dict, Optional


class GreeterError(Exception):
    """Base exception for all Greeter service errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = dict(context) if context else {}
        self.correlation_id = correlation_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "error_message": self.message,
            "context": self.context,
            "correlation_id": self.correlation_id,
        }


# === Validation Errors ===

class ValidationError(GreeterError):
    """Base class for errors caused by the incoming event."""
    pass


class MissingInputError(ValidationError):
    """Raised when the event is absent where the handler requires one."""

    def __init__(self, **kwargs):
        super().__init__("received nil event", error_code="MISSING_INPUT", **kwargs)


class InvalidEventError(ValidationError):
    """Raised when the event is not an object or fails schema validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        context = {}
        if "context" in kwargs:
            context.update(kwargs.pop("context"))
        if errors is not None:
            context["errors"] = errors
        super().__init__(message, error_code="INVALID_EVENT", context=context, **kwargs)


# === Configuration Errors ===

class ConfigurationError(GreeterError):
    """Raised when there's an error in the application configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)


# === Utility Functions ===

def get_error_context(error: Exception) -> Dict[str, Any]:
    """Extract error context for logging."""
    if isinstance(error, GreeterError):
        return error.to_dict()
    return {
        "error_type": error.__class__.__name__,
        "error_message": str(error),
    }
