import json

import pytest
from fastapi.testclient import TestClient

from interviewgen.agents.llm.base import LLMClient
from interviewgen.main import create_app
from interviewgen.settings import Settings

API_KEY = "test-secret-key-123"


class FakeLLM(LLMClient):
    """Upstream stub: replies with fixed text or raises a fixed error."""

    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error
        self.requests = []

    async def generate_text(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.text


def make_questions():
    return [
        {"id": 1, "text": "What is an HTTP status code?", "difficulty": "easy", "timer": 20},
        {"id": 2, "text": "What does REST stand for?", "difficulty": "easy", "timer": 20},
        {"id": 3, "text": "How would you paginate a large result set?", "difficulty": "medium", "timer": 60},
        {"id": 4, "text": "Explain database indexing trade-offs.", "difficulty": "medium", "timer": 60},
        {"id": 5, "text": "Design a rate limiter for a public API.", "difficulty": "hard", "timer": 120},
        {"id": 6, "text": "How do you keep a cache consistent with its source?", "difficulty": "hard", "timer": 120},
    ]


@pytest.fixture
def questions():
    return make_questions()


@pytest.fixture
def settings():
    return Settings(gemini_api_key=API_KEY, _env_file=None)


@pytest.fixture
def fake_llm(questions):
    return FakeLLM(text=json.dumps(questions))


@pytest.fixture
def client(settings, fake_llm):
    app = create_app(settings, llm_client=fake_llm)
    with TestClient(app) as c:
        yield c
