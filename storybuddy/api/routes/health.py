"""
Health Check Routes - System health and monitoring endpoints.

Used by hosting platforms (Render, Railway) for liveness checks.
Neither endpoint calls the oracle.
"""
from datetime import datetime

from fastapi import APIRouter, Depends

from storybuddy import __version__
from storybuddy.core.logging_config import get_logger
from storybuddy.memory.store import ContentStore, get_content_store
from storybuddy.models.learning import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """
    Perform a basic health check.

    Verifies that the API is running and responsive. It does not check
    oracle connectivity.
    """
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.utcnow()
    )


@router.get(
    "/store",
    summary="Content store statistics",
)
async def store_stats(store: ContentStore = Depends(get_content_store)) -> dict:
    """Report how many quizzes are held and whether a story is stored."""
    return store.stats()
