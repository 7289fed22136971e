"""Shared test fixtures for language state and the web app."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.i18n.state import DocumentAttributes, LanguageState, MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    """Empty in-memory durable store (a fresh browser)."""
    return MemoryStore()


@pytest.fixture
def document() -> DocumentAttributes:
    """Root-element attributes shared across reloads of one tab."""
    return DocumentAttributes()


@pytest.fixture
def state(store: MemoryStore, document: DocumentAttributes) -> LanguageState:
    """Language state initialised over the empty store."""
    return LanguageState(store, document=document)


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, independent of the process environment."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
async def client():
    """HTTP client bound to the ASGI app (lifespan not run)."""
    from app.web.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
