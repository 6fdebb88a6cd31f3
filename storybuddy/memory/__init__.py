"""
Memory Package - Process-lifetime content state.

Holds the last generated story and every generated quiz for as long as
the process runs. Nothing is persisted.

Example:
    >>> from storybuddy.memory import get_content_store
    >>> store = get_content_store()
    >>> store.set_story("Once upon a time...")
"""
from storybuddy.memory.store import (
    ContentStore,
    QuizIdGenerator,
    get_content_store,
    reset_content_store,
)

__all__ = [
    "ContentStore",
    "QuizIdGenerator",
    "get_content_store",
    "reset_content_store",
]
