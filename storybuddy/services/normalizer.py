"""
Response Normalizer - Turns raw oracle text into caller-ready data.

Two modes:
- Plain text (story, words, translate): emphasis markers removed, trimmed.
- Structured (quiz, math): code fences removed, parsed as JSON, shape-checked.

Parse and shape problems raise ResponseShapeError; there is no repair
and no retry. The quiz answer fallback is the one place where a problem
is resolved with a default instead of an error.
"""
import json
import math
import re
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from storybuddy.core.exceptions import ResponseShapeError
from storybuddy.core.logging_config import get_logger
from storybuddy.models.learning import MathProblem, QuizQuestion

logger = get_logger(__name__)

# Tried in order; the first usable value wins
ANSWER_KEYS = ("answer", "Answer", "correct", "Correct")

_EMPHASIS_RE = re.compile(r"\*+")
_CODE_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_emphasis(text: str) -> str:
    """
    Remove markdown emphasis markers (`**` and `*`) and trim.

    Idempotent: the output contains no asterisks and no surrounding
    whitespace, so a second pass changes nothing.
    """
    return _EMPHASIS_RE.sub("", text or "").strip()


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` fence delimiters anywhere in the text and trim."""
    return _CODE_FENCE_RE.sub("", text or "").strip()


def parse_json_payload(text: str) -> Any:
    """
    Strip code fences and parse the remainder as JSON.

    Args:
        text: Raw oracle output

    Returns:
        The decoded JSON value

    Raises:
        ResponseShapeError: If the text is not valid JSON
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ResponseShapeError(
            details=f"Invalid JSON from model: {e.msg} at line {e.lineno} column {e.colno}"
        ) from e


def _as_text(value: Any, allow_zero: bool = True) -> Optional[str]:
    """Render a JSON scalar as option/answer text, or None if it is unusable."""
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or (value == 0 and not allow_zero):
        return None
    return str(value)


def resolve_answer(raw: dict, options: List[str]) -> Tuple[str, bool]:
    """
    Pick the correct answer for one parsed question.

    Keys are skipped when their value is null, blank, zero, or not a
    string or number.

    Args:
        raw: Question object as decoded from the model output
        options: The question's options, already coerced to strings

    Returns:
        Tuple of (answer, inferred). `inferred` is True when no answer key
        was recognized and the first option was used.
    """
    for key in ANSWER_KEYS:
        answer = _as_text(raw.get(key), allow_zero=False)
        if answer is not None:
            return answer, False
    return options[0], True


def _normalize_question(raw: Any, index: int) -> QuizQuestion:
    if not isinstance(raw, dict):
        raise ResponseShapeError(details=f"Question {index} is not an object")

    options = raw.get("options")
    if not isinstance(options, list) or not options:
        raise ResponseShapeError(details=f"Question {index} has no options")

    texts = [_as_text(option) for option in options]
    if any(text is None for text in texts):
        raise ResponseShapeError(details=f"Question {index} has a null or non-text option")
    options = texts

    answer, inferred = resolve_answer(raw, options)
    if inferred:
        logger.warning(f"Question {index} has no answer field, using first option")

    return QuizQuestion(
        question=str(raw.get("question") or ""),
        options=options,
        answer=answer,
        answer_inferred=inferred,
    )


def normalize_quiz(payload: Any) -> List[QuizQuestion]:
    """
    Validate a parsed quiz payload and resolve each question's answer.

    The number of questions and options is not enforced.

    Args:
        payload: Decoded JSON, expected as {"questions": [...]}

    Returns:
        Normalized questions in model order

    Raises:
        ResponseShapeError: If the payload or any question is mis-shaped
    """
    questions: Optional[Any] = payload.get("questions") if isinstance(payload, dict) else None
    if not isinstance(questions, list):
        raise ResponseShapeError(details="Quiz payload has no 'questions' list")

    return [_normalize_question(raw, i) for i, raw in enumerate(questions)]


def normalize_math(payload: Any) -> List[MathProblem]:
    """
    Validate a parsed math payload.

    Any malformed element fails the whole payload; no partial list is returned.

    Args:
        payload: Decoded JSON, a list of {"question", "answer"} objects
                 (an object wrapping a "problems" list is also accepted)

    Returns:
        Math problems in model order

    Raises:
        ResponseShapeError: If the payload or any element is mis-shaped
    """
    if isinstance(payload, dict) and isinstance(payload.get("problems"), list):
        payload = payload["problems"]

    if not isinstance(payload, list):
        raise ResponseShapeError(details="Math payload is not a JSON array")

    problems = []
    for i, raw in enumerate(payload):
        if not isinstance(raw, dict):
            raise ResponseShapeError(details=f"Problem {i} is not an object")
        if "question" not in raw or "answer" not in raw:
            raise ResponseShapeError(details=f"Problem {i} is missing 'question' or 'answer'")
        answer = raw["answer"]
        if isinstance(answer, bool) or (isinstance(answer, float) and not math.isfinite(answer)):
            raise ResponseShapeError(details=f"Problem {i} answer is not a number")

        try:
            problems.append(MathProblem(question=raw["question"], answer=answer))
        except PydanticValidationError as e:
            raise ResponseShapeError(details=f"Problem {i} is invalid: {e.errors()[0]['msg']}") from e

    return problems
