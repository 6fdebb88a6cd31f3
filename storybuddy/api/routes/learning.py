"""
Learning Routes - API endpoints for the learning activities.

Each endpoint validates its body, hands it to LearningService and returns
the normalized result. Errors raised by the service are turned into
`{"error": message}` responses by the handlers in api.main.
"""
from fastapi import APIRouter, Depends

from storybuddy.api.dependencies import get_learning_service
from storybuddy.core.logging_config import get_logger
from storybuddy.models.learning import (
    ErrorResponse,
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
from storybuddy.services.learning_service import LearningService

logger = get_logger(__name__)

router = APIRouter(
    tags=["Learning"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request body"},
        500: {"model": ErrorResponse, "description": "Generation failed"}
    }
)


@router.post(
    "/story",
    response_model=StoryResponse,
    summary="Generate a short story",
)
async def create_story(
    request: StoryRequest,
    service: LearningService = Depends(get_learning_service),
) -> StoryResponse:
    """Write a short story for the child's age and topic. Also becomes the last story."""
    return await service.create_story(request)


@router.post(
    "/quiz",
    response_model=QuizResponse,
    summary="Generate a quiz about a story",
    description="""
    Generate multiple-choice questions about a story.

    If `story` is omitted, the last generated story is used.
    `answerInferred` is true when the model did not mark an answer
    and the first option was used.
    """
)
async def create_quiz(
    request: QuizRequest,
    service: LearningService = Depends(get_learning_service),
) -> QuizResponse:
    return await service.create_quiz(request)


@router.post(
    "/words",
    response_model=WordsResponse,
    summary="Describe a child's daily routine",
)
async def describe_routine(
    request: WordsRequest,
    service: LearningService = Depends(get_learning_service),
) -> WordsResponse:
    return await service.describe_routine(request)


@router.post(
    "/translate",
    response_model=TranslateResponse,
    summary="Translate text into Telugu",
)
async def translate(
    request: TranslateRequest,
    service: LearningService = Depends(get_learning_service),
) -> TranslateResponse:
    return await service.translate(request)


@router.post(
    "/math",
    response_model=MathResponse,
    summary="Generate math practice problems",
)
async def create_math_problems(
    request: MathRequest,
    service: LearningService = Depends(get_learning_service),
) -> MathResponse:
    return await service.create_math_problems(request)
