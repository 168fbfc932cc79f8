"""
Pytest configuration and fixtures for the feedback backend tests.

API tests run against a throwaway SQLite file built from the ORM metadata;
the app's ``get_session`` dependency is pointed at it.
"""
import json

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from smart_feedback.core.config import Settings
from smart_feedback.domain.entities import feedback, report  # noqa: F401
from smart_feedback.infrastructure.db.base import Base
from smart_feedback.infrastructure.db.session import get_session
from smart_feedback.main import create_app


def make_settings(**overrides) -> Settings:
    values = {"api_keys": "", "ai_gateway_api_key": "", "auto_create_schema": False}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def completion_body(content) -> str:
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]})


def gateway_transport(status_code: int = 200, content="Positive", calls: list | None = None) -> httpx.MockTransport:
    """Fake AI gateway answering every request the same way."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if status_code >= 400:
            return httpx.Response(status_code, text="upstream error")
        return httpx.Response(200, text=completion_body(content))

    return httpx.MockTransport(handler)


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "feedback.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def session_factory(db_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def build_client(session_factory):
    """Factory returning a TestClient for an app built with the given settings."""

    def _build(**overrides):
        app = create_app(make_settings(**overrides))

        async def _session():
            async with session_factory() as session:
                yield session

        app.dependency_overrides[get_session] = _session
        return app, TestClient(app)

    return _build


@pytest.fixture
def client(build_client):
    _, test_client = build_client()
    return test_client
