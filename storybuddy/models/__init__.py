"""
Models module - Pydantic schemas for data validation.

This module defines:
- Request models: Input validation for API endpoints
- Response models: Output formatting for API responses
"""
from storybuddy.models.learning import (
    StoryRequest,
    QuizRequest,
    WordsRequest,
    TranslateRequest,
    MathRequest,
    StoryResponse,
    QuizQuestion,
    QuizResponse,
    WordsResponse,
    TranslateResponse,
    MathProblem,
    MathResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "StoryRequest",
    "QuizRequest",
    "WordsRequest",
    "TranslateRequest",
    "MathRequest",
    "StoryResponse",
    "QuizQuestion",
    "QuizResponse",
    "WordsResponse",
    "TranslateResponse",
    "MathProblem",
    "MathResponse",
    "HealthResponse",
    "ErrorResponse",
]
