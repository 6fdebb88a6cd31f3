"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Why environment variables:
1. Security - API keys never committed to Git
2. Flexibility - Different values per deployment (local/Render/Railway)
3. Easy override - No code changes needed to switch model or port
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

SUPPORTED_PROVIDERS = ("gemini", "groq")


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also write daily log files under logs/
        llm_provider: Oracle backend ('gemini' or 'groq')
        gemini_api_key: API key for Google Gemini
        groq_api_key: API key for Groq
        llm_model: Gemini model identifier
        groq_model: Groq model identifier
        llm_temperature: Sampling temperature, None for provider default
        llm_max_tokens: Maximum response length
        host: Interface the server binds to
        port: Port the server listens on
        cors_origins: Allowed CORS origins
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_to_file: bool

    # LLM settings
    llm_provider: str
    gemini_api_key: str
    groq_api_key: str
    llm_model: str
    groq_model: str
    llm_temperature: Optional[float]
    llm_max_tokens: int

    # Server settings
    host: str
    port: int
    cors_origins: List[str]

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).strip().lower() in ("1", "true", "yes")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Why lru_cache:
    - Settings are read once at startup
    - Avoids re-parsing .env on every access
    - maxsize=1 ensures only one instance exists

    API keys default to empty strings so the server can boot without them;
    the oracle call reports the missing key instead.

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If a configured value cannot be parsed
    """
    provider = _get_env("LLM_PROVIDER", "gemini").strip().lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Unsupported LLM_PROVIDER '{provider}'. "
            f"Must be one of: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    temperature = os.environ.get("LLM_TEMPERATURE")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "StoryBuddy"),
        app_env=_get_env("APP_ENV", "production"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_to_file=_get_bool("LOG_TO_FILE", "true"),

        # LLM
        llm_provider=provider,
        gemini_api_key=os.environ.get("GEMINI_API_KEY") or _get_env("GOOGLE_API_KEY", ""),
        groq_api_key=_get_env("GROQ_API_KEY", ""),
        llm_model=_get_env("LLM_MODEL", "gemini-1.5-flash"),
        groq_model=_get_env("GROQ_MODEL", "llama-3.3-70b-versatile"),
        llm_temperature=float(temperature) if temperature else None,
        llm_max_tokens=int(_get_env("LLM_MAX_TOKENS", "2048")),

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=int(_get_env("PORT", "5000")),
        cors_origins=[
            o.strip() for o in _get_env("ALLOWED_ORIGINS", "*").split(",") if o.strip()
        ],
    )
