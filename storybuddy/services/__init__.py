"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- Orchestrate between the prompt builder, oracle, normalizer and store
"""
from storybuddy.services.learning_service import LearningService
from storybuddy.services.normalizer import (
    ANSWER_KEYS,
    normalize_math,
    normalize_quiz,
    parse_json_payload,
    resolve_answer,
    strip_code_fences,
    strip_emphasis,
)

__all__ = [
    "LearningService",
    "ANSWER_KEYS",
    "normalize_math",
    "normalize_quiz",
    "parse_json_payload",
    "resolve_answer",
    "strip_code_fences",
    "strip_emphasis",
]
