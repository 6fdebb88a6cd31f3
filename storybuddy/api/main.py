"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. CORS middleware
4. Exception handlers (every failure becomes `{"error": message}`)
5. Startup/shutdown events

Run with: uvicorn storybuddy.api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from storybuddy import __version__
from storybuddy.api.routes import health_router, learning_router
from storybuddy.core.config import get_settings
from storybuddy.core.exceptions import GatewayException, ResponseShapeError
from storybuddy.core.logging_config import get_logger, setup_logging


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, log_to_file=settings.log_to_file)
logger = get_logger(__name__)

BANNER = "🚀 Backend is running! Use /story, /quiz, /words, /translate, or /math."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the effective configuration on startup and shutdown.
    """
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"LLM Provider: {settings.llm_provider}")
    if settings.llm_provider == "gemini" and not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; generation requests will fail")
    if settings.llm_provider == "groq" and not settings.groq_api_key:
        logger.warning("GROQ_API_KEY is not set; generation requests will fail")

    yield  # Application runs here

    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title="StoryBuddy API",
    description="""
    Learning activities for kids, generated by a language model.

    - **/story**: short story for an age and topic
    - **/quiz**: multiple-choice questions about a story
    - **/words**: a child's daily routine in their own words
    - **/translate**: kid-friendly Telugu translation
    - **/math**: practice problems for one operation
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration
# ============================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report the first invalid field as a single error message."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        msg = str(first.get("msg", "Invalid request")).removeprefix("Value error, ")
        message = f"{field}: {msg}" if field else msg
    else:
        message = "Invalid request"

    logger.info(f"Rejected {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(GatewayException)
async def gateway_exception_handler(request: Request, exc: GatewayException):
    """Handle all custom gateway exceptions."""
    if isinstance(exc, ResponseShapeError):
        logger.error(f"{request.url.path} failed [{exc.error_code}]: {exc.message} ({exc.details})")
    elif exc.status_code >= 500:
        logger.error(f"{request.url.path} failed [{exc.error_code}]: {exc.message}")
    else:
        logger.info(f"Rejected {request.url.path} [{exc.error_code}]: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Details are only returned in development mode.
    """
    logger.exception(f"Unhandled exception: {exc}")

    message = str(exc) if settings.is_development() and str(exc) else "An unexpected error occurred"
    return JSONResponse(status_code=500, content={"error": message})


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(learning_router)


# ============================================================
# Root Endpoint
# ============================================================

@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    """Landing banner, doubles as a liveness check."""
    return BANNER


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storybuddy.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development()
    )
