"""
Request and Response models for the learning endpoints.

These Pydantic models define the contract between client and server.
They provide:
- Type validation and the boundary validation layer (age, operation, text)
- Automatic documentation
- Request/response serialization (camelCase keys where the client expects them)
"""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, confloat, field_validator

from storybuddy.core.validators import validate_age, validate_operation, validate_text

MAX_TOPIC_LENGTH = 200
MAX_STORY_LENGTH = 10000
MAX_TRANSLATE_LENGTH = 5000


def _check_age(value: int) -> int:
    is_valid, error = validate_age(value)
    if not is_valid:
        raise ValueError(error)
    return value


def _check_text(value: str, field: str, max_length: int, collapse_whitespace: bool = False) -> str:
    is_valid, sanitized, error = validate_text(value, field, max_length, collapse_whitespace)
    if not is_valid:
        raise ValueError(error)
    return sanitized


# ============================================================
# Requests
# ============================================================

class StoryRequest(BaseModel):
    """
    Request model for the /story endpoint.

    Attributes:
        age: Child's age in years.
        topic: What the story should be about.
    """
    age: int = Field(..., description="Child's age in years", examples=[6])
    topic: str = Field(
        ...,
        description="Story topic",
        examples=["a friendly dragon"]
    )

    @field_validator("age")
    @classmethod
    def check_age(cls, v: int) -> int:
        return _check_age(v)

    @field_validator("topic")
    @classmethod
    def check_topic(cls, v: str) -> str:
        return _check_text(v, "topic", MAX_TOPIC_LENGTH, collapse_whitespace=True)


class QuizRequest(BaseModel):
    """
    Request model for the /quiz endpoint.

    When `story` is omitted the most recently generated story is used.
    """
    story: Optional[str] = Field(
        default=None,
        description="Story text to build questions from"
    )

    @field_validator("story")
    @classmethod
    def check_story(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return _check_text(v, "story", MAX_STORY_LENGTH)


class WordsRequest(BaseModel):
    """Request model for the /words endpoint."""
    age: int = Field(..., description="Child's age in years", examples=[7])

    @field_validator("age")
    @classmethod
    def check_age(cls, v: int) -> int:
        return _check_age(v)


class TranslateRequest(BaseModel):
    """Request model for the /translate endpoint."""
    text: str = Field(
        ...,
        description="Text to translate into Telugu",
        examples=["The little elephant loved mangoes."]
    )

    @field_validator("text")
    @classmethod
    def check_text(cls, v: str) -> str:
        return _check_text(v, "text", MAX_TRANSLATE_LENGTH)


class MathRequest(BaseModel):
    """
    Request model for the /math endpoint.

    Attributes:
        age: Child's age in years.
        operation: One of addition, subtraction, multiplication, division.
    """
    age: int = Field(..., description="Child's age in years", examples=[8])
    operation: str = Field(
        ...,
        description="Math operation (case-insensitive)",
        examples=["addition"]
    )

    @field_validator("age")
    @classmethod
    def check_age(cls, v: int) -> int:
        return _check_age(v)

    @field_validator("operation")
    @classmethod
    def check_operation(cls, v: str) -> str:
        is_valid, normalized, error = validate_operation(v)
        if not is_valid:
            raise ValueError(error)
        return normalized


# ============================================================
# Responses
# ============================================================

class StoryResponse(BaseModel):
    """Response model for the /story endpoint."""
    story: str


class QuizQuestion(BaseModel):
    """
    A single normalized multiple-choice question.

    `answer_inferred` is True when the oracle gave no recognizable answer
    field and the first option was used instead.
    """
    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: List[str]
    answer: str
    answer_inferred: bool = Field(default=False, alias="answerInferred")


class QuizResponse(BaseModel):
    """Response model for the /quiz endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    quiz_id: str = Field(..., alias="quizId", description="Numeric quiz identifier")
    questions: List[QuizQuestion]


class WordsResponse(BaseModel):
    """Response model for the /words endpoint."""
    words: str


class TranslateResponse(BaseModel):
    """Response model for the /translate endpoint."""
    translated: str


class MathProblem(BaseModel):
    """A math problem with its numeric answer (not cross-checked)."""
    question: str
    answer: Union[int, confloat(allow_inf_nan=False)]


class MathResponse(BaseModel):
    """Response model for the /math endpoint."""
    problems: List[MathProblem]


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="healthy")
    version: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
