import os
import tempfile

# wellbeing.config 는 import 시점에 환경변수를 읽으므로 먼저 설정
_DB_DIR = tempfile.mkdtemp(prefix="wellbeing-test-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["AI_ENABLED"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import random
from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from wellbeing.schemas.moods import MoodEntry
from wellbeing.services.ai_client import AIServiceError


class FakeGenerator:
    """Records prompts and answers with a canned reply."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def generate(self, prompt, system_prompt, max_tokens=None, timeout=None):
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "max_tokens": max_tokens,
            "timeout": timeout,
        })
        if self.error is not None:
            raise self.error
        return self.reply


class FailingSession:
    """AsyncSession stand-in whose every call fails like a dropped connection."""

    def __init__(self):
        self.rolled_back = False

    def _error(self):
        return OperationalError("SELECT 1", {}, Exception("database is down"))

    async def execute(self, *args, **kwargs):
        raise self._error()

    async def get(self, *args, **kwargs):
        raise self._error()

    async def merge(self, *args, **kwargs):
        raise self._error()

    async def commit(self):
        raise self._error()

    def add(self, *args, **kwargs):
        pass

    async def rollback(self):
        self.rolled_back = True


def make_entry(score, notes=None, days_ago=0, mood_id=1, user_id=1, now=None):
    now = now or datetime(2024, 3, 15, 15, 5)
    return MoodEntry(
        id=mood_id,
        user_id=user_id,
        score=score,
        notes=notes,
        recorded_at=now - timedelta(days=days_ago),
    )


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def failing_generator():
    return FakeGenerator(error=AIServiceError("AI service returned error: 503", 503))


@pytest.fixture(scope="session")
def client():
    from fastapi.testclient import TestClient
    from wellbeing.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def app_with_generator():
    from wellbeing.main import app
    from wellbeing.services.ai_client import get_text_generator

    def install(generator):
        app.dependency_overrides[get_text_generator] = lambda: generator
        return generator

    yield install
    app.dependency_overrides.pop(get_text_generator, None)
