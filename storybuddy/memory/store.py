"""
Content Store - Process-lifetime state for generated content.

This module holds the only state shared across requests:
- The most recently generated story (last write wins)
- Generated quizzes keyed by quiz id

Architecture note:
This is an in-memory implementation with no eviction, no expiration and
no persistence. Everything is lost on restart, and the quiz map grows
for as long as the process lives.
"""
import threading
import time
from datetime import datetime
from typing import Callable, Dict, List, Optional

from storybuddy.core.logging_config import get_logger
from storybuddy.models.learning import QuizQuestion

logger = get_logger(__name__)


class QuizIdGenerator:
    """
    Mints numeric quiz identifiers from the wall clock.

    Ids are epoch milliseconds, bumped by one whenever the clock has not
    advanced past the previous id, so ids are strictly increasing and never
    repeat within the process.

    Example:
        >>> ids = QuizIdGenerator()
        >>> ids.next_id()
        '1718000000000'
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            candidate = int(self._clock() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)


class ContentStore:
    """
    In-memory store for stories and quizzes.

    Inserts and overwrites only; nothing reads and then modifies an entry,
    so the lock only guards the dict itself.

    Example:
        >>> store = ContentStore()
        >>> quiz_id = store.put_quiz(questions)
        >>> store.get_quiz(quiz_id) == questions
        True
    """

    def __init__(self, id_generator: Optional[QuizIdGenerator] = None):
        """
        Initialize an empty store.

        Args:
            id_generator: Optional id generator. A wall-clock generator is used if not provided.
        """
        self._ids = id_generator or QuizIdGenerator()
        self._quizzes: Dict[str, List[QuizQuestion]] = {}
        self._last_story: Optional[str] = None
        self._story_updated_at: Optional[datetime] = None
        self._lock = threading.Lock()

        logger.info("ContentStore initialized (in-memory, no eviction)")

    # ---------- Stories ----------

    @property
    def last_story(self) -> Optional[str]:
        """The most recently generated story, if any."""
        return self._last_story

    def set_story(self, story: str) -> None:
        """Overwrite the last generated story."""
        with self._lock:
            self._last_story = story
            self._story_updated_at = datetime.utcnow()
        logger.debug(f"Stored last story: length={len(story)}")

    # ---------- Quizzes ----------

    def put_quiz(self, questions: List[QuizQuestion]) -> str:
        """
        Insert a quiz under a freshly minted identifier.

        Args:
            questions: Normalized quiz questions

        Returns:
            The new quiz id
        """
        quiz_id = self._ids.next_id()
        with self._lock:
            self._quizzes[quiz_id] = list(questions)
            total = len(self._quizzes)

        logger.info(f"Stored quiz {quiz_id}: questions={len(questions)}, total_quizzes={total}")
        return quiz_id

    def get_quiz(self, quiz_id: str) -> Optional[List[QuizQuestion]]:
        """Look up a stored quiz, or None if unknown."""
        return self._quizzes.get(quiz_id)

    @property
    def quiz_count(self) -> int:
        return len(self._quizzes)

    def stats(self) -> Dict:
        """Get store statistics."""
        return {
            "quiz_count": self.quiz_count,
            "has_story": self._last_story is not None,
            "story_updated_at": self._story_updated_at.isoformat() if self._story_updated_at else None,
        }


# Singleton instance
_content_store: Optional[ContentStore] = None


def get_content_store() -> ContentStore:
    """
    Get or create the global ContentStore instance.

    Returns:
        The singleton ContentStore
    """
    global _content_store
    if _content_store is None:
        _content_store = ContentStore()
    return _content_store


def reset_content_store() -> None:
    """Reset the global ContentStore (useful for testing)."""
    global _content_store
    _content_store = None
