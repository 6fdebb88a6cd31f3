"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error hierarchy mapped to HTTP responses
- validators.py     : Boundary validation for request fields
"""
from storybuddy.core.config import get_settings, Settings
from storybuddy.core.logging_config import setup_logging, get_logger
from storybuddy.core.exceptions import (
    GatewayException,
    LLMError,
    ResponseShapeError,
    ValidationError,
)

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "GatewayException",
    "LLMError",
    "ResponseShapeError",
    "ValidationError",
]
