"""
LLM module - Language model integration.

This module handles all oracle interactions:
- Prompt construction
- API calls to Gemini or Groq
- Error handling for LLM failures
"""
from storybuddy.core.exceptions import LLMError
from storybuddy.llm.client import LLMClient, get_llm_client, reset_llm_client

__all__ = [
    "LLMClient",
    "LLMError",
    "get_llm_client",
    "reset_llm_client",
]
