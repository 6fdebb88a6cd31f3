"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code and a caller-facing message
- Used by the API layer for consistent `{"error": message}` responses
- Underlying causes (parse errors, provider tracebacks) stay in the logs
"""
from typing import Optional


class GatewayException(Exception):
    """
    Base exception for all gateway errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {"error": self.message}


class ValidationError(GatewayException):
    """Raised when request input validation fails."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class LLMError(GatewayException):
    """
    Raised when the oracle call fails.

    The provider's message is passed through verbatim so the caller
    sees why generation failed (bad key, blocked content, network).
    """
    status_code = 500
    error_code = "llm_error"

    def __init__(self, message: str = "LLM service unavailable"):
        super().__init__(message)


class ResponseShapeError(GatewayException):
    """
    Raised when oracle output cannot be parsed into the expected shape.

    `message` is the generic text returned to the caller; `details`
    holds the parse error for the operator log.
    """
    status_code = 500
    error_code = "response_shape_error"

    def __init__(self, message: str = "Failed to generate content", details: Optional[str] = None):
        super().__init__(message, details=details)
