"""Shared fixtures: storages, a fake LLM and an API client wired to them."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Keep the app's own engine off the developer database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base
from app import models  # noqa: F401
from app.services.storage import DEMO_USER_ID, MemoryStorage, SqlStorage


class FakeLLM:
    """Stands in for ai_client.chat; records every call."""

    def __init__(self):
        self.reply = "Here you go."
        self.error = None
        self.calls = []

    async def __call__(self, system, messages, max_tokens=2000, temperature=0.7):
        self.calls.append({"system": system, "messages": messages, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm(monkeypatch):
    llm = FakeLLM()
    monkeypatch.setattr("app.agents.tutor.chat", llm)
    monkeypatch.setattr("app.agents.material_generator.chat", llm)
    return llm


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def sql_storage():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine)()
    try:
        yield SqlStorage(session)
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    """Runs a test against both storage implementations (memory one unseeded)."""
    if request.param == "memory":
        return MemoryStorage(seed=False)
    return request.getfixturevalue("sql_storage")


@pytest.fixture
def client(memory_storage, fake_llm):
    from fastapi.testclient import TestClient

    from app.main import app
    from app.middleware.auth import get_current_user_id
    from app.middleware.rate_limit import limiter
    from app.services.storage import get_storage

    app.dependency_overrides[get_storage] = lambda: memory_storage
    app.dependency_overrides[get_current_user_id] = lambda: DEMO_USER_ID
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True
