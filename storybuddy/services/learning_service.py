"""
Learning Service - Business logic for the learning activities.

Every activity runs the same pipeline:
1. Build the prompt from validated request fields
2. Call the oracle once
3. Normalize the raw output (plain text or structured JSON)
4. Optionally record the result in the content store
5. Return the response model

Why a service layer:
1. Separation of concerns - Routes stay thin
2. Testability - Service can be tested without HTTP
3. State injection - The store and client are passed in, not module globals
"""
from typing import Callable, List

from storybuddy.core.exceptions import ResponseShapeError, ValidationError
from storybuddy.core.logging_config import get_logger
from storybuddy.llm.client import LLMClient
from storybuddy.llm.prompts import (
    DEFAULT_TARGET_LANGUAGE,
    get_math_prompt,
    get_quiz_prompt,
    get_story_prompt,
    get_translate_prompt,
    get_words_prompt,
)
from storybuddy.memory.store import ContentStore
from storybuddy.models.learning import (
    MathRequest,
    MathResponse,
    QuizRequest,
    QuizResponse,
    StoryRequest,
    StoryResponse,
    TranslateRequest,
    TranslateResponse,
    WordsRequest,
    WordsResponse,
)
from storybuddy.services.normalizer import (
    normalize_math,
    normalize_quiz,
    parse_json_payload,
    strip_emphasis,
)

logger = get_logger(__name__)

QUIZ_FAILURE_MESSAGE = "Failed to generate quiz"
MATH_FAILURE_MESSAGE = "Failed to generate problems"


class LearningService:
    """
    Service for the story, quiz, words, translate and math activities.

    Example:
        >>> service = LearningService(LLMClient(), ContentStore())
        >>> response = await service.create_story(StoryRequest(age=6, topic="kites"))
        >>> print(response.story)
    """

    def __init__(self, llm_client: LLMClient, store: ContentStore):
        """
        Initialize the learning service.

        Args:
            llm_client: Oracle client (anything with an async `generate(prompt)`)
            store: Content store for the last story and generated quizzes
        """
        self.llm_client = llm_client
        self.store = store

    async def create_story(self, request: StoryRequest) -> StoryResponse:
        """
        Generate a story and remember it as the last story.

        Raises:
            LLMError: If the oracle call fails
        """
        logger.info(f"Generating story: age={request.age}, topic={request.topic[:50]}")

        raw = await self.llm_client.generate(get_story_prompt(request.age, request.topic))
        story = strip_emphasis(raw)
        self.store.set_story(story)

        return StoryResponse(story=story)

    async def create_quiz(self, request: QuizRequest) -> QuizResponse:
        """
        Generate quiz questions about a story and store them.

        Uses the last generated story when the request has none.

        Raises:
            ValidationError: If there is no story to build the quiz from
            LLMError: If the oracle call fails
            ResponseShapeError: If the output is not a valid quiz
        """
        story = request.story or self.store.last_story
        if not story:
            raise ValidationError("story is required (no story has been generated yet)", field="story")

        logger.info(f"Generating quiz: story_length={len(story)}, from_request={request.story is not None}")

        raw = await self.llm_client.generate(get_quiz_prompt(story))
        questions = self._parse_structured(raw, normalize_quiz, QUIZ_FAILURE_MESSAGE)

        quiz_id = self.store.put_quiz(questions)
        inferred = sum(1 for q in questions if q.answer_inferred)
        logger.info(f"Quiz {quiz_id} generated: questions={len(questions)}, inferred_answers={inferred}")

        return QuizResponse(quiz_id=quiz_id, questions=questions)

    async def describe_routine(self, request: WordsRequest) -> WordsResponse:
        """Generate a child's daily routine in their own words."""
        logger.info(f"Generating daily routine: age={request.age}")

        raw = await self.llm_client.generate(get_words_prompt(request.age))
        return WordsResponse(words=strip_emphasis(raw))

    async def translate(self, request: TranslateRequest) -> TranslateResponse:
        """Translate text into Telugu with kid-friendly wording."""
        logger.info(f"Translating text: length={len(request.text)}, target={DEFAULT_TARGET_LANGUAGE}")

        raw = await self.llm_client.generate(get_translate_prompt(request.text))
        return TranslateResponse(translated=strip_emphasis(raw))

    async def create_math_problems(self, request: MathRequest) -> MathResponse:
        """
        Generate math problems for one operation.

        Raises:
            LLMError: If the oracle call fails
            ResponseShapeError: If any element is malformed
        """
        logger.info(f"Generating math problems: age={request.age}, operation={request.operation}")

        raw = await self.llm_client.generate(get_math_prompt(request.age, request.operation))
        problems = self._parse_structured(raw, normalize_math, MATH_FAILURE_MESSAGE)

        return MathResponse(problems=problems)

    def _parse_structured(self, raw: str, normalize: Callable, failure_message: str) -> List:
        """
        Parse and normalize structured output.

        The caller only sees `failure_message`; the parse detail goes to the log.
        """
        try:
            return normalize(parse_json_payload(raw))
        except ResponseShapeError as e:
            logger.error(f"{failure_message}: {e.details}")
            logger.debug(f"Raw model output: {raw[:500]}")
            raise ResponseShapeError(failure_message, details=e.details) from e
