"""
Run the gateway with uvicorn.

Usage: python -m storybuddy
"""
import uvicorn

from storybuddy.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "storybuddy.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
    )


if __name__ == "__main__":
    main()
