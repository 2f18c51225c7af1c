"""Shared fixtures: isolated SQLite database and a FastAPI client wired to it."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from transhub.app import config
from transhub.app import main as app_main
from transhub.app.database import Base, get_db, make_engine
from transhub.app.deps import get_provider
from transhub.app.errors import ProviderFailure
from transhub.app.providers import TranslationProvider


class RecordingProvider(TranslationProvider):
    """Deterministic provider that remembers every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    async def translate(self, text: str, source: str, target: str) -> str:
        self.calls.append((text, source, target))
        return f"[{target}] {text}"


class FailingProvider(TranslationProvider):
    """Provider that is always unreachable."""

    def __init__(self) -> None:
        self.calls = 0

    async def translate(self, text: str, source: str, target: str) -> str:
        self.calls += 1
        raise ProviderFailure()


@pytest.fixture
def db_setup(tmp_path: Path) -> tuple[sessionmaker, Any]:
    """Create a fresh SQLite database per test to keep tests independent."""
    db_file = tmp_path / "test.db"
    engine = make_engine(f"sqlite:///{db_file}")
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False)
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal, engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def provider() -> TranslationProvider:
    return RecordingProvider()


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()


@pytest.fixture
def client(
    db_setup: tuple[sessionmaker, Any],
    provider: TranslationProvider,
    monkeypatch: pytest.MonkeyPatch,
) -> TestClient:
    """Wire FastAPI dependency overrides to the isolated database and fake provider."""
    db_session_factory, test_engine = db_setup

    def override_get_db():
        with db_session_factory() as db:
            yield db

    # Startup table creation and provider loading must not touch real resources.
    monkeypatch.setattr(app_main, "engine", test_engine)
    monkeypatch.setattr(config, "TRANSLATION_PROVIDER", "echo")

    app_main.app.dependency_overrides[get_db] = override_get_db
    app_main.app.dependency_overrides[get_provider] = lambda: provider
    try:
        with TestClient(app_main.app) as test_client:
            yield test_client
    finally:
        app_main.app.dependency_overrides.clear()
