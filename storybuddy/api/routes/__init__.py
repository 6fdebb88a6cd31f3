"""
API Routes module - Endpoint definitions.

- learning.py : Story, quiz, words, translate and math endpoints
- health.py   : Health check endpoints
"""
from storybuddy.api.routes.health import router as health_router
from storybuddy.api.routes.learning import router as learning_router

__all__ = [
    "health_router",
    "learning_router",
]
