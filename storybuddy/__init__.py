"""
StoryBuddy gateway package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, validation and error types
- services/  : Request pipeline orchestration and response normalization
- llm/       : Oracle client and prompt templates
- memory/    : Process-lifetime store for stories and quizzes
- models/    : Pydantic models for request/response schemas
"""

__version__ = "0.2.0"
