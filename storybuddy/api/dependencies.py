"""
FastAPI dependencies.

Handlers receive the oracle client, the content store and the service
through these providers, so tests can swap them with
`app.dependency_overrides`.
"""
from fastapi import Depends

from storybuddy.llm.client import LLMClient, get_llm_client
from storybuddy.memory.store import ContentStore, get_content_store
from storybuddy.services.learning_service import LearningService


def get_learning_service(
    llm_client: LLMClient = Depends(get_llm_client),
    store: ContentStore = Depends(get_content_store),
) -> LearningService:
    return LearningService(llm_client=llm_client, store=store)
