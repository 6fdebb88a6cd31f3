"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files for:
- Version control of prompt changes
- Clear documentation of prompt purpose
"""
from storybuddy.llm.prompts.learning_prompts import (
    DEFAULT_TARGET_LANGUAGE,
    get_story_prompt,
    get_quiz_prompt,
    get_words_prompt,
    get_translate_prompt,
    get_math_prompt,
)

__all__ = [
    "DEFAULT_TARGET_LANGUAGE",
    "get_story_prompt",
    "get_quiz_prompt",
    "get_words_prompt",
    "get_translate_prompt",
    "get_math_prompt",
]
