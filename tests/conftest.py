"""Shared pytest fixtures."""

import json
import os

import pytest
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

# Test environment must be in place before settings are first read
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LLM_PROVIDER", "gemini")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

from storybuddy.api.main import app  # noqa: E402
from storybuddy.llm.client import get_llm_client  # noqa: E402
from storybuddy.memory.store import ContentStore, get_content_store  # noqa: E402


def make_quiz_payload(count=5, answer_key="answer"):
    """Build a quiz JSON object with `count` questions of 4 options each."""
    questions = []
    for i in range(count):
        options = [f"Q{i} option {letter}" for letter in "ABCD"]
        question = {"question": f"Question {i}?", "options": options}
        if answer_key:
            question[answer_key] = options[1]
        questions.append(question)
    return {"questions": questions}


@pytest.fixture
def quiz_json():
    """Fenced quiz output as the model usually returns it."""
    return "```json\n" + json.dumps(make_quiz_payload()) + "\n```"


@pytest.fixture
def mock_llm():
    """Oracle stub; set `mock_llm.generate.return_value` or `side_effect` per test."""
    llm = AsyncMock()
    llm.generate = AsyncMock(return_value="")
    return llm


@pytest.fixture
def store():
    return ContentStore()


@pytest.fixture
def client(mock_llm, store):
    """TestClient with the oracle and store replaced."""
    app.dependency_overrides[get_llm_client] = lambda: mock_llm
    app.dependency_overrides[get_content_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
